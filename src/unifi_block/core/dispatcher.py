"""
unifi-block - Station Command Dispatch

Applies one station manager command to every configured MAC address over an
authenticated controller session.
"""

import logging
from typing import Optional

import httpx

from ..shared.constants import API_STATION_MANAGER, LOGGER_NAME
from .models import StationCommand, StationCommandData, ValidatedConfig
from .session import ControllerSession, login

logger = logging.getLogger(LOGGER_NAME)


def run_station_command(
    session: ControllerSession,
    command: StationCommand,
    config: ValidatedConfig,
) -> None:
    """Issue ``command`` for each configured MAC address, in file order.

    The first failing request stops the batch: later addresses are not
    attempted and earlier commands are not undone. An empty address list
    sends nothing.

    Args:
        session: Session already authenticated with ``login``
        command: Command applied to every address
        config: Validated configuration

    Raises:
        TransportError: From the first failing command request
    """
    station_uri = session.url(API_STATION_MANAGER.format(site=config.site))

    for mac in config.client_macs:
        payload = StationCommandData(cmd=command.keyword, mac=mac)
        logger.debug(f"  station_command: {payload.model_dump_json()}")

        logger.info(f"{command.label}: {mac}")
        session.post(station_uri, payload, operation=command.keyword)


def execute(
    command: StationCommand,
    config: ValidatedConfig,
    transport: Optional[httpx.BaseTransport] = None,
) -> None:
    """Log in to the controller and apply ``command`` to all configured stations.

    A login failure aborts before any station command is sent.

    Args:
        command: Command applied to every address
        config: Validated configuration
        transport: Replacement HTTP transport

    Raises:
        TransportError: From the login or the first failing command
    """
    with ControllerSession.build(config, transport=transport) as session:
        login(session, config)
        run_station_command(session, command, config)
