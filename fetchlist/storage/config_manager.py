"""
Manages loading, validation, and migration of the INI configuration file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fetchlist.exceptions import ConfigurationError
from fetchlist.models.config import DownloaderConfig

log = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "links_file": "images.txt",
    "save_directory": "downloaded/",
    "log_level": 1,
    "log_dir": ".",
}


class ConfigManager:
    """Handles all operations related to the application's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(
        self, cli_options: dict[str, Any] | None = None
    ) -> DownloaderConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        A missing config file is not an error: built-in defaults are used instead.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated DownloaderConfig object.

        Raises:
            ConfigurationError: If the config file is invalid or validation fails.
        """
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e

            if self._migrate_if_needed():
                log.info(
                    "[yellow]Configuration file was updated with new default values."
                    "[/yellow]"
                )
        else:
            log.debug(
                f"No configuration file at '{self.config_file_path}', using defaults."
            )

        config_from_file = self._get_config_as_dict()

        # Override with CLI options
        if cli_options:
            config_from_file.update(cli_options)

        try:
            return DownloaderConfig(**config_from_file)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self, settings: dict[str, Any] | None = None) -> None:
        """
        Creates and saves a new configuration file.

        Args:
            settings: Values that take precedence over the defaults.
        """
        settings = settings or {}
        config = configparser.ConfigParser(interpolation=None)
        config["DEFAULT"] = {}

        for key in sorted(DownloaderConfig.get_ini_keys()):
            value = settings.get(key, DEFAULT_SETTINGS.get(key))
            if value is not None:
                config["DEFAULT"][key] = str(value)

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                config.write(configfile)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the 'DEFAULT' section of the INI file into a dictionary."""
        section = self._parser["DEFAULT"]
        try:
            log_level = section.getint("log_level", DEFAULT_SETTINGS["log_level"])
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid 'log_level' in configuration file: {e}"
            ) from e
        return {
            "links_file": section.get("links_file", DEFAULT_SETTINGS["links_file"]),
            "save_directory": section.get(
                "save_directory", DEFAULT_SETTINGS["save_directory"]
            ),
            "log_level": log_level,
            "log_dir": section.get("log_dir", DEFAULT_SETTINGS["log_dir"]),
        }

    def _migrate_if_needed(self) -> bool:
        """Adds missing default values to an existing config file."""
        needs_saving = False
        config_section = self._parser["DEFAULT"]

        for key in DownloaderConfig.get_ini_keys():
            if key not in config_section:
                config_section[key] = str(DEFAULT_SETTINGS[key])
                needs_saving = True
                log.debug(
                    f"Migrating config: added missing key '{key}' with "
                    f"value '{config_section[key]}'."
                )

        if needs_saving:
            try:
                with open(self.config_file_path, "w", encoding="utf-8") as f:
                    self._parser.write(f)
            except OSError as e:
                log.error(f"Could not save migrated configuration file: {e}")
                return False

        return needs_saving
