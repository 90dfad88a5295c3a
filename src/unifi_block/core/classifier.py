"""
unifi-block - Response Classification

Maps the outcome of one controller request onto success or a
``TransportError`` subclass. Only the status code decides; the body is
kept for diagnostics.
"""

import logging
from typing import Union

import httpx

from ..shared.constants import LOGGER_NAME
from .exceptions import SendFailedError, ServerError, UnexpectedStatusError

logger = logging.getLogger(LOGGER_NAME)

# InvalidURL is raised while building the request, before anything is sent
SendError = (httpx.RequestError, httpx.InvalidURL)

Outcome = Union[httpx.Response, httpx.RequestError, httpx.InvalidURL]


def classify(outcome: Outcome) -> None:
    """Classify a request outcome.

    Args:
        outcome: The response received, or the transport or URL error
            raised while sending

    Raises:
        SendFailedError: If no response was received
        ServerError: For 5xx statuses
        UnexpectedStatusError: For any other non-2xx status
    """
    if isinstance(outcome, SendError):
        logger.warning(f"Sending request failed: {outcome!r}")
        raise SendFailedError(
            f"Sending request failed: {outcome}",
            context={"error": str(outcome), "error_type": type(outcome).__name__},
        ) from outcome

    response = outcome
    status = response.status_code

    if response.is_success:
        logger.debug(f"success:\n{response.text}")
        return

    context = {"status_code": status}
    if response.is_server_error:
        logger.error(f"HTTP server error: {status} {response.reason_phrase}")
        raise ServerError(
            f"HTTP server error: {status}",
            status_code=status,
            response_text=response.text,
            context=context,
        )

    logger.error(f"HTTP response: {status} {response.reason_phrase}")
    raise UnexpectedStatusError(
        f"Unexpected HTTP status: {status}",
        status_code=status,
        response_text=response.text,
        context=context,
    )
