"""
unifi-block - Controller Session

This module owns the HTTP transport and the cookie-backed authentication
state for one run against a UniFi controller.
"""

import json
import logging
import socket
import ssl
import time
from typing import Dict, Optional

import certifi
import httpx
from pydantic import BaseModel

from ..shared.constants import (
    ACCEPT_ENCODING_IDENTITY,
    API_LOGIN,
    CONTENT_TYPE_FORM,
    LOGGER_NAME,
    SENSITIVE_HEADERS,
    USER_AGENT,
)
from .classifier import SendError, classify
from .models import LoginData, ValidatedConfig

logger = logging.getLogger(LOGGER_NAME)


class RequestResponseLogger:
    """Logs controller requests and responses without credentials or cookies."""

    def __init__(self, logger: logging.Logger):
        """Initialize request/response logger.

        Args:
            logger: Logger instance to use for logging
        """
        self.logger = logger

    def log_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict] = None,
        data: Optional[BaseModel] = None,
        operation: str = "unknown"
    ):
        """Log request details. Payload values are never written, only field names.

        Args:
            method: HTTP method
            url: Request URL
            headers: Request headers
            data: Request payload
            operation: Operation name for context
        """
        safe_headers = {}
        if headers:
            for key, value in headers.items():
                if key.lower() in SENSITIVE_HEADERS:
                    safe_headers[key] = '[REDACTED]'
                else:
                    safe_headers[key] = value

        log_data = {
            "operation": operation,
            "request": {
                "method": method,
                "url": url,
                "headers": safe_headers,
                "fields": sorted(type(data).model_fields) if data is not None else [],
            }
        }

        self.logger.debug(f"API Request: {json.dumps(log_data)}")

    def log_response(
        self,
        status_code: int,
        response_size: Optional[int] = None,
        duration_ms: Optional[float] = None,
        operation: str = "unknown",
        error: Optional[Exception] = None
    ):
        """Log response details with timing.

        Args:
            status_code: HTTP status code, 0 if no response was received
            response_size: Size of response in bytes
            duration_ms: Request duration in milliseconds
            operation: Operation name for context
            error: Transport exception if the request failed
        """
        log_data = {
            "operation": operation,
            "response": {
                "status_code": status_code,
                "response_size": response_size,
                "duration_ms": duration_ms,
                "success": 200 <= status_code < 300,
                "has_error": bool(error)
            }
        }

        if error:
            log_data["error"] = str(error)

        level = logging.DEBUG if log_data["response"]["success"] else logging.WARNING
        self.logger.log(level, f"API Response: {json.dumps(log_data)}")


request_logger = RequestResponseLogger(logger)


def create_ssl_context(accept_invalid_certs: bool) -> ssl.SSLContext:
    """
    Create the SSL context for controller connections.

    Args:
        accept_invalid_certs: Skip certificate and hostname verification

    Returns:
        Configured SSL context

    Notes:
        - When accept_invalid_certs=True, logs a security warning
        - Otherwise enforces TLS 1.2+ against the certifi CA bundle
    """
    if accept_invalid_certs:
        logger.warning(
            "SSL certificate verification is disabled for the controller connection. "
            "Connection is vulnerable to man-in-the-middle attacks."
        )
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    context = ssl.create_default_context(cafile=certifi.where())
    context.check_hostname = True
    context.verify_mode = ssl.CERT_REQUIRED
    context.minimum_version = ssl.TLSVersion.TLSv1_2

    logger.debug("SSL verification enabled with TLS 1.2+ enforcement")
    return context


class ControllerSession:
    """Cookie-backed HTTP session with one UniFi controller.

    Create with ``build``; the cookie returned by ``login`` is reused by every
    later request. Nothing is persisted once the session is closed.
    """

    def __init__(self, base_url: str, client: httpx.Client):
        self.base_url = base_url
        self.client = client

    @classmethod
    def build(
        cls,
        config: ValidatedConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "ControllerSession":
        """Build a session for the configured controller.

        The client keeps cookies across requests, asks for uncompressed
        responses, sets TCP_NODELAY and does not follow redirects.

        Args:
            config: Validated configuration
            transport: Replacement transport, bypassing the socket transport

        Returns:
            New, unauthenticated session
        """
        if transport is None:
            transport = httpx.HTTPTransport(
                verify=create_ssl_context(config.accept_invalid_certs),
                socket_options=[(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)],
            )

        client = httpx.Client(
            transport=transport,
            headers={
                "Accept-Encoding": ACCEPT_ENCODING_IDENTITY,
                "User-Agent": USER_AGENT,
            },
            follow_redirects=False,
        )

        logger.debug(
            f"Initialized controller session for {config.base_url} "
            f"(SSL verification: {'DISABLED' if config.accept_invalid_certs else 'enabled'})"
        )
        return cls(config.base_url, client)

    def url(self, endpoint: str) -> str:
        """Join an API endpoint onto the base URL, which is used verbatim."""
        return f"{self.base_url}{endpoint}"

    def post(self, url: str, payload: BaseModel, operation: str = "api_request") -> None:
        """POST a payload and classify the outcome.

        The payload is sent as JSON text declared as form content, the format
        the controller accepts on both login and command endpoints.

        Args:
            url: Absolute request URL
            payload: Request body model
            operation: Name of operation for logging

        Raises:
            SendFailedError: If no response was received
            ServerError: For 5xx statuses
            UnexpectedStatusError: For other non-2xx statuses
        """
        headers = {"Content-Type": CONTENT_TYPE_FORM}
        request_logger.log_request("POST", url, headers, payload, operation)
        start_time = time.monotonic()

        try:
            outcome = self.client.post(url, content=payload.model_dump_json(), headers=headers)
        except SendError as e:
            outcome = e

        duration_ms = (time.monotonic() - start_time) * 1000
        if isinstance(outcome, httpx.Response):
            request_logger.log_response(
                outcome.status_code, len(outcome.content), duration_ms, operation
            )
        else:
            request_logger.log_response(0, 0, duration_ms, operation, outcome)

        classify(outcome)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()

    def __enter__(self) -> "ControllerSession":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def login(session: ControllerSession, config: ValidatedConfig) -> None:
    """Authenticate the session against ``<base_url>/api/login``.

    On success the controller's session cookie is stored in the session's
    cookie jar.

    Raises:
        TransportError: If the login request fails; no further requests
            should be made with this session
    """
    login_data = LoginData(username=config.user, password=config.password)
    logger.debug(f"logging in to {config.base_url} as {config.user}")
    session.post(session.url(API_LOGIN), login_data, operation="login")
