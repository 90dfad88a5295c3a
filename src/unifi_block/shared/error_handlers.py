"""
unifi-block - Error Reporting Helpers

This module turns exceptions into user-facing messages and structured log
records for the command line.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ..core.exceptions import (
    BadAddressError,
    ConfigFileError,
    ConfigurationError,
    MissingCredentialError,
    SendFailedError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
    UnifiBlockError,
)
from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class ErrorResponse:
    """User-facing and technical views of one failure."""

    def __init__(self, error: Exception, operation: str):
        """Initialize error response.

        Args:
            error: The exception that occurred
            operation: Name of the operation that failed
        """
        self.error = error
        self.operation = operation
        self.timestamp = datetime.now(timezone.utc)
        self.error_id = f"{operation}_{int(self.timestamp.timestamp())}"

    def get_user_message(self) -> str:
        """Get user-friendly error message.

        Returns:
            Human-readable error message
        """
        if isinstance(self.error, MissingCredentialError):
            return (
                f"No {self.error.credential} configured. Set '{self.error.credential}' in the "
                f"configuration file or pass --{self.error.credential}."
            )
        elif isinstance(self.error, BadAddressError):
            return f"Badly formed MAC address in configuration: {self.error.address}"
        elif isinstance(self.error, ConfigFileError):
            return f"Could not load configuration: {self.error.message}"
        elif isinstance(self.error, ConfigurationError):
            return f"Configuration error: {self.error.message}"
        elif isinstance(self.error, SendFailedError):
            return "Cannot reach the controller. Please check the URL and network connectivity."
        elif isinstance(self.error, ServerError):
            return f"Controller reported a server error (HTTP {self.error.status_code})."
        elif isinstance(self.error, UnexpectedStatusError):
            if self.error.status_code in (401, 403):
                return "Controller rejected the request. Please check the user and password."
            return f"Controller returned unexpected HTTP status {self.error.status_code}."
        elif isinstance(self.error, UnifiBlockError):
            return self.error.message
        else:
            return f"An unexpected error occurred during {self.operation}."

    def get_technical_details(self) -> Dict[str, Any]:
        """Get technical error details for logging.

        Returns:
            Dictionary containing technical error information
        """
        details = {
            "error_id": self.error_id,
            "operation": self.operation,
            "timestamp": self.timestamp.isoformat(),
            "error_type": type(self.error).__name__,
            "message": str(self.error)
        }

        if isinstance(self.error, UnifiBlockError):
            details.update(self.error.to_dict())

        if isinstance(self.error, TransportError):
            details["status_code"] = self.error.status_code
            details["response_text"] = self.error.response_text

        return details


def handle_command_error(operation: str, error: Exception) -> str:
    """Log a failed command and build the message shown to the user.

    Args:
        operation: Name of the operation that failed
        error: The exception that occurred

    Returns:
        User-friendly error message
    """
    error_response = ErrorResponse(error, operation)

    technical_details = error_response.get_technical_details()
    logger.debug(f"Command error in {operation}: {json.dumps(technical_details, indent=2)}")
    logger.error("Problems executing command")

    return f"Error: {error_response.get_user_message()}"
