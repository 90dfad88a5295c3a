"""
unifi-block - Data Models

This module contains Pydantic models for configuration, command intent and
controller request payloads.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..shared.constants import CMD_BLOCK_STATION, CMD_UNBLOCK_STATION


class UnifiConfig(BaseModel):
    """Configuration as read from the YAML file, before validation."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(..., description="Controller base URL, used verbatim")
    site: str = Field(..., description="Controller site identifier")
    accept_invalid_certs: bool = Field(
        ..., description="Skip TLS certificate verification for self-signed controllers"
    )
    user: Optional[str] = Field(default=None, description="Controller user")
    password: Optional[str] = Field(
        default=None, description="Controller password", repr=False
    )  # Hide in logs
    client_macs: List[str] = Field(..., description="Station MAC addresses in command order")


class ValidatedConfig(BaseModel):
    """Configuration with credentials resolved and every MAC address checked.

    Only built by ``validate_config``; instances are immutable.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    site: str
    accept_invalid_certs: bool
    user: str
    password: str = Field(..., repr=False)
    client_macs: tuple[str, ...] = ()


class StationCommand(str, Enum):
    """Station manager command applied to every configured MAC address."""

    BLOCK_STATION = CMD_BLOCK_STATION
    UNBLOCK_STATION = CMD_UNBLOCK_STATION

    @property
    def keyword(self) -> str:
        """Controller command keyword (``block-sta`` / ``unblock-sta``)."""
        return self.value

    @property
    def label(self) -> str:
        """Display name (``BlockStation`` / ``UnblockStation``) used in the per-station INFO log."""
        return "BlockStation" if self is StationCommand.BLOCK_STATION else "UnblockStation"


class LoginData(BaseModel):
    """Credential payload for the login endpoint."""

    username: str
    password: str = Field(..., repr=False)


class StationCommandData(BaseModel):
    """Payload for one station manager command."""

    cmd: str
    mac: str
