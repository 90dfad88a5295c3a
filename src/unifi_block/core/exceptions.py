"""
unifi-block - Exception Hierarchy

This module contains all custom exceptions raised while validating
configuration and talking to the UniFi controller.
"""

from datetime import datetime, timezone
from typing import Any


class UnifiBlockError(Exception):
    """Base exception for all unifi-block errors with enhanced context."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


# Configuration errors: raised before any network activity


class ConfigurationError(UnifiBlockError):
    """Configuration is missing, malformed or inconsistent."""


class ConfigFileError(ConfigurationError):
    """Configuration file could not be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, context={"path": path} if path else None)
        self.path = path


class BadAddressError(ConfigurationError):
    """A configured station address is not a valid MAC address."""

    def __init__(self, address: str):
        super().__init__(
            f"Badly formed MAC address: {address}",
            context={"address": address},
        )
        self.address = address


class MissingCredentialError(ConfigurationError):
    """A credential is absent from both the config file and the command line."""

    def __init__(self, credential: str):
        super().__init__(
            f"'{credential}' must be set in the configuration file or on the command line",
            context={"credential": credential},
        )
        self.credential = credential


class ValidationError(UnifiBlockError):
    """Input parameter validation failed."""


class InvalidAddressError(ValidationError):
    """String is not a colon separated six byte hardware address."""

    def __init__(self, address: str, reason: str):
        super().__init__(
            f"Invalid MAC address '{address}': {reason}",
            context={"address": address, "reason": reason},
        )
        self.address = address
        self.reason = reason


# Transport errors: raised while talking to the controller


class TransportError(UnifiBlockError):
    """A request to the controller did not succeed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.status_code = status_code
        self.response_text = response_text


class SendFailedError(TransportError):
    """Request never produced an HTTP response (connect, TLS or timeout failure)."""


class ServerError(TransportError):
    """Controller answered with a 5xx status."""


class UnexpectedStatusError(TransportError):
    """Controller answered with a non-success, non-5xx status."""
