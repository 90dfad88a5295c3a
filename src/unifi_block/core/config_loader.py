"""
unifi-block - Configuration Loader

This module reads the YAML configuration file into a ``UnifiConfig``.
Unknown keys, missing keys and wrong types all fail the load.
"""

import logging
import os
from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..shared.constants import LOGGER_NAME
from .exceptions import ConfigFileError
from .models import UnifiConfig

logger = logging.getLogger(LOGGER_NAME)


class ConfigLoader:
    """
    Loader for the controller/station configuration file.

    The file may hold the controller password, so a warning is logged when
    it is readable by group or others. Permissions are never changed.
    """

    INSECURE_PERMISSION_MASK = 0o077

    @classmethod
    def load(cls, config_file: Union[str, Path]) -> UnifiConfig:
        """
        Load and structurally validate a configuration file.

        Args:
            config_file: Path to the YAML configuration file

        Returns:
            UnifiConfig with the file contents

        Raises:
            ConfigFileError: If the file cannot be read, is not valid YAML,
                or does not match the configuration schema
        """
        path = Path(config_file)
        logger.debug(f"loading config file: {path}")

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            logger.error(f"error opening config file {path}: {e}")
            raise ConfigFileError(f"error opening config file {path}: {e}", path=str(path))
        except yaml.YAMLError as e:
            logger.error(f"Error parsing config file {path}: {e}")
            raise ConfigFileError(f"Error parsing config file {path}: {e}", path=str(path))

        if not isinstance(data, dict):
            logger.error(f"Error parsing config file {path}: top level must be a mapping")
            raise ConfigFileError(
                f"Error parsing config file {path}: top level must be a mapping",
                path=str(path),
            )

        try:
            config = UnifiConfig.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Error parsing config file {path}: {e}")
            raise ConfigFileError(f"Error parsing config file {path}: {e}", path=str(path))

        if config.password is not None:
            cls._verify_file_permissions(path)

        logger.debug(f"Config: {config!r}")
        return config

    @classmethod
    def _verify_file_permissions(cls, file_path: Path) -> None:
        """Warn if a file holding a password is readable by group or others."""
        try:
            current_perms = os.stat(file_path).st_mode & 0o777
        except OSError as e:
            logger.debug(f"Could not verify file permissions: {e}")
            return

        if current_perms & cls.INSECURE_PERMISSION_MASK:
            logger.warning(
                f"Config file {file_path} contains a password and has insecure "
                f"permissions {oct(current_perms)}. Recommended: 0o600"
            )
