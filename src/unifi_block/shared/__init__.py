"""
unifi-block - Shared Utilities

This package contains constants and error reporting helpers shared by the
core and the command line.
"""

from . import constants
from .error_handlers import ErrorResponse, handle_command_error

__all__ = [
    "ErrorResponse",
    "constants",
    "handle_command_error",
]
