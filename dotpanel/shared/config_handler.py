from pathlib import Path
from typing import Any, Dict, List

import toml

from dotpanel.shared import config_template
from dotpanel.shared.path_handler import PathHandler


class ConfigHandler:
    """
    Manages the application's configuration file (config.toml).
    Handles file I/O and merging the user's settings with the defaults.
    The configuration is read once at startup.
    """

    def __init__(self, panel_instance: Any):
        """
        Args:
            panel_instance: The main panel instance, used for logger access.
        """
        self.logger = panel_instance.logger
        self.panel_instance = panel_instance
        self._load_successful: bool = False
        self.default_config = config_template.default_config
        self.path_handler = PathHandler(panel_instance)
        self.config_file = self.path_handler.get_config_dir() / "config.toml"
        self.config_path: str = self.config_file.parent.as_posix()
        self.config_data: Dict[str, Any] = self.load_config()

    def _strip_hints(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Recursively removes keys ending with '_hint' so that only values are
        written to the TOML file.
        """
        stripped_data = {}
        for key, value in data.items():
            if key.endswith("_hint"):
                continue
            if isinstance(value, dict):
                stripped_data[key] = self._strip_hints(value)
            else:
                stripped_data[key] = value
        return stripped_data

    @property
    def default_config_stripped(self) -> Dict[str, Any]:
        """Returns the default config without any setting metadata hints."""
        return self._strip_hints(self.default_config)

    def _recursive_merge(
        self,
        user_config: Dict[str, Any],
        default_config: Dict[str, Any],
    ) -> bool:
        """
        Recursively merges missing keys from `default_config` into `user_config`.
        Returns:
            True if any key was added.
        """
        write_back_needed = False
        for key, default_value in default_config.items():
            if key not in user_config:
                user_config[key] = default_value
                write_back_needed = True
            elif isinstance(default_value, dict) and isinstance(
                user_config.get(key), dict
            ):
                if self._recursive_merge(user_config[key], default_value):
                    write_back_needed = True
        return write_back_needed

    def save_config(self) -> None:
        """Writes the current state of self.config_data to the TOML file."""
        if not self._load_successful:
            self.logger.warning(
                "Skipping configuration save: Configuration is in an untrusted state (load failed). Please fix config.toml manually."
            )
            return
        try:
            with open(self.config_file, "w") as f:
                toml.dump(self.config_data, f)
            self.logger.info("Configuration saved successfully.")
        except OSError as e:
            self.logger.error(f"Failed to save configuration to file: {e}")

    def load_config(self) -> Dict[str, Any]:
        """
        Loads the configuration from file, or uses defaults if missing/corrupt.
        Returns:
            The loaded and merged configuration dictionary.
        """
        config_from_file: Dict[str, Any] = {}
        file_path = Path(self.config_file)
        file_must_be_created = not file_path.exists()
        load_succeeded = False
        if file_must_be_created:
            self.logger.info("Config file is missing. Will apply defaults and create.")
            load_succeeded = True
        else:
            try:
                with open(file_path, "r") as f:
                    config_from_file = toml.load(f)
                self.logger.debug("Existing config.toml loaded successfully.")
                load_succeeded = True
            except (OSError, toml.TomlDecodeError) as e:
                self.logger.error(
                    f"Error loading config file: {e}. Using default configuration and skipping file save to preserve user data."
                )
                config_from_file = {}
        self._load_successful = load_succeeded
        self._recursive_merge(config_from_file, self.default_config_stripped)
        if file_must_be_created:
            self.logger.info(
                "Saving default configuration to file because it was missing."
            )
            self.config_data = config_from_file
            self.save_config()
        self.logger.debug("Configuration loaded and merged with defaults.")
        return config_from_file

    def get_root_setting(self, key_path: List[str], default_value: Any = None) -> Any:
        """
        Traverses the configuration dict (self.config_data) to retrieve a value.
        Args:
            key_path: List of strings representing the path (e.g., ['org.dotpanel.clock', 'format']).
            default_value: Value to return if the path is not found.
        Returns:
            The configuration value or the default value.
        """
        current_data = self.config_data
        for i, key in enumerate(key_path):
            if isinstance(current_data, dict) and key in current_data:
                current_data = current_data[key]
            else:
                self.logger.debug(
                    f"Missing configuration key at path: {' -> '.join(key_path[: i + 1])}. Using default value: {default_value}"
                )
                return default_value
        return current_data

    def get_int_setting(self, key_path: List[str], default_value: int) -> int:
        """
        Like get_root_setting, for values that must be integers. A value that
        is not a number is reported and replaced by the default.
        """
        value = self.get_root_setting(key_path, default_value)
        if not isinstance(value, bool):
            try:
                return int(value)
            except (TypeError, ValueError):
                pass
        self.logger.warning(
            f"Invalid integer {value!r} at {' -> '.join(key_path)}. Using default value: {default_value}"
        )
        return default_value
