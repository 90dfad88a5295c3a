"""
unifi-block - Station Command

Block or unblock every station listed in a configuration file.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..core.config_loader import ConfigLoader
from ..core.dispatcher import execute
from ..core.exceptions import UnifiBlockError
from ..core.models import StationCommand
from ..core.validation import validate_config
from ..shared.constants import ENV_PASSWORD, ENV_USER, LOG_FORMAT, LOGGER_NAME
from ..shared.error_handlers import handle_command_error

logger = logging.getLogger(LOGGER_NAME)


class Command(str, Enum):
    """Command selector accepted on the command line."""

    block = "block"
    unblock = "unblock"

    def to_station_command(self) -> StationCommand:
        if self is Command.block:
            return StationCommand.BLOCK_STATION
        return StationCommand.UNBLOCK_STATION


def _version_callback(value: bool):
    if value:
        typer.echo(f"unifi-block {__version__}")
        raise typer.Exit()


def station_command(
    command: Command = typer.Option(
        ...,
        "--command",
        "-x",
        case_sensitive=False,
        help="UniFi command to execute",
    ),
    config_file: Path = typer.Option(
        ..., "--config", "-c", metavar="CONFIG_FILE_PATH", help="Path to YAML config file"
    ),
    user: Optional[str] = typer.Option(
        None, "--user", "-u", envvar=ENV_USER, help="UniFi user to login with"
    ),
    password: Optional[str] = typer.Option(
        None, "--password", "-p", envvar=ENV_PASSWORD, help="UniFi password to login with"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """
    Block or unblock the stations listed in a configuration file.

    --user and --password are only used when the configuration file does
    not set them.

    Examples:
        # Block every station in the file
        unifi-block --command block --config stations.yaml

        # Unblock, supplying credentials missing from the file
        unifi-block -x unblock -c stations.yaml -u admin -p secret
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    station = command.to_station_command()

    try:
        raw_config = ConfigLoader.load(config_file)
        config = validate_config(raw_config, user=user, password=password)
        execute(station, config)
    except UnifiBlockError as e:
        typer.echo(handle_command_error(station.keyword, e), err=True)
        raise typer.Exit(1)

    logger.debug(f"{station.label} completed for {len(config.client_macs)} station(s)")
