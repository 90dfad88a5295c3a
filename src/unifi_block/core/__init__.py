"""
unifi-block - Core Infrastructure

This package contains configuration handling and the controller session
workflow.
"""

from .address import is_valid_mac_address, validate_mac_address
from .classifier import classify
from .config_loader import ConfigLoader
from .dispatcher import execute, run_station_command
from .exceptions import (
    BadAddressError,
    ConfigFileError,
    ConfigurationError,
    InvalidAddressError,
    MissingCredentialError,
    SendFailedError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
    UnifiBlockError,
    ValidationError,
)
from .models import StationCommand, UnifiConfig, ValidatedConfig
from .session import ControllerSession, RequestResponseLogger, login
from .validation import validate_config

__all__ = [
    # Exceptions
    "UnifiBlockError",
    "ConfigurationError",
    "ConfigFileError",
    "BadAddressError",
    "MissingCredentialError",
    "ValidationError",
    "InvalidAddressError",
    "TransportError",
    "SendFailedError",
    "ServerError",
    "UnexpectedStatusError",
    # Models
    "UnifiConfig",
    "ValidatedConfig",
    "StationCommand",
    # Configuration
    "ConfigLoader",
    "validate_config",
    "validate_mac_address",
    "is_valid_mac_address",
    # Session
    "ControllerSession",
    "RequestResponseLogger",
    "login",
    "classify",
    # Dispatch
    "run_station_command",
    "execute",
]
