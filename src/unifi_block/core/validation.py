"""
unifi-block - Configuration Validation

Turns a loaded ``UnifiConfig`` plus optional command line credentials into a
``ValidatedConfig``. Runs before any network activity.
"""

import logging
from typing import Optional

from ..shared.constants import LOGGER_NAME
from .address import validate_mac_address
from .exceptions import BadAddressError, InvalidAddressError, MissingCredentialError
from .models import UnifiConfig, ValidatedConfig

logger = logging.getLogger(LOGGER_NAME)


def validate_config(
    raw: UnifiConfig,
    user: Optional[str] = None,
    password: Optional[str] = None,
) -> ValidatedConfig:
    """Validate configuration and resolve credentials.

    Checks run in order and stop at the first failure: every MAC address in
    file order, then ``user``, then ``password``. A credential present in the
    file takes precedence over the one passed here.

    Args:
        raw: Configuration as loaded from the file
        user: Externally supplied user, used only if the file has none
        password: Externally supplied password, used only if the file has none

    Returns:
        ValidatedConfig with non-optional credentials

    Raises:
        BadAddressError: For the first malformed MAC address
        MissingCredentialError: If a credential is absent from both sources
    """
    for mac in raw.client_macs:
        try:
            validate_mac_address(mac)
        except InvalidAddressError as e:
            logger.error(f"Badly formed MAC address: {mac} ({e.reason})")
            raise BadAddressError(mac) from e
        logger.debug(f"mac: {mac}")

    resolved_user = raw.user if raw.user is not None else user
    if resolved_user is None:
        raise MissingCredentialError("user")

    resolved_password = raw.password if raw.password is not None else password
    if resolved_password is None:
        raise MissingCredentialError("password")

    return ValidatedConfig(
        base_url=raw.base_url,
        site=raw.site,
        accept_invalid_certs=raw.accept_invalid_certs,
        user=resolved_user,
        password=resolved_password,
        client_macs=tuple(raw.client_macs),
    )
