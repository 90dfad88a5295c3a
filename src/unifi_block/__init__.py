"""
unifi-block

Command-line utility that blocks or unblocks wireless stations on a UniFi
controller. Logs in to the controller's session API, then issues one station
manager command per configured MAC address.
"""

__version__ = "0.1.0"
__author__ = "Curt Brune"
__license__ = "GPL-3.0-only"

from .core.exceptions import (
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
from .core.models import StationCommand, UnifiConfig, ValidatedConfig
from .core.session import ControllerSession

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
    # Core classes
    "UnifiConfig",
    "ValidatedConfig",
    "StationCommand",
    "ControllerSession",
]
