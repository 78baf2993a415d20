"""Configuration management functionality for cloparse."""

import os
import re
from pathlib import Path

from .config_result import ConfigResult
from .diagnostics import check_io_status
from .exceptions import InvalidConfigError
from .types import ConfigData

CONFIG_FILE_NAME = "cloparse.conf"

KNOWN_KEYS = ("short_option_length", "default_args", "require")

MAX_CONFIG_SIZE = 1024 * 1024


class ConfigManager:
    """Manages configuration file loading."""

    @staticmethod
    def find_config_file() -> Path | None:
        """
        Find cloparse.conf, preferring $XDG_CONFIG_HOME over $HOME/.config.

        Returns None when neither location holds the file.
        """
        candidates = []
        if xdg_config_home := os.getenv("XDG_CONFIG_HOME"):
            candidates.append(Path(xdg_config_home))
        if home := os.getenv("HOME"):
            candidates.append(Path(home) / ".config")

        for config_dir in candidates:
            config_path = config_dir / CONFIG_FILE_NAME
            if config_path.is_file():
                return config_path
        return None

    @staticmethod
    def load_config(config_file: Path) -> ConfigResult:
        """
        Load settings from a KEY=VALUE config file.

        Args:
            config_file: Path to the configuration file

        Returns:
            ConfigResult holding the validated settings

        Raises:
            InvalidConfigError: If config file has invalid format or content
            IOStatusError: If the file cannot be read
        """
        settings: ConfigData = {}

        text = ""
        try:
            file_size = config_file.stat().st_size
            if file_size > MAX_CONFIG_SIZE:
                raise InvalidConfigError(
                    str(config_file),
                    message=f"Config file too large ({file_size} bytes)",
                )
            text = config_file.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e
        except OSError as e:
            check_io_status(False, f"Cannot read config file {config_file}", error=e)

        for line_num, line in enumerate(text.splitlines(), 1):
            ConfigManager._process_config_line(
                line, line_num, str(config_file), settings
            )

        return ConfigResult(settings)

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, settings: ConfigData
    ) -> None:
        """
        Process a single configuration line.

        Args:
            line: The configuration line to process
            line_num: Line number for error reporting
            config_file: Config file path for error reporting
            settings: Dictionary to store settings
        """
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            return

        if "=" not in line:
            raise InvalidConfigError(config_file, line_num, f"Expected KEY=VALUE: '{line}'")

        key, value = line.split("=", 1)
        key = key.strip()
        value = ConfigManager._strip_quotes(value.strip())

        if key not in KNOWN_KEYS:
            raise InvalidConfigError(config_file, line_num, f"Unknown setting: '{key}'")

        if key == "short_option_length" and not ConfigManager._is_positive_int(value):
            raise InvalidConfigError(
                config_file,
                line_num,
                f"short_option_length must be a positive integer, got '{value}'",
            )

        settings[key] = value

    @staticmethod
    def _strip_quotes(value: str) -> str:
        """Strip matching quotes from value if present."""
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            return value[1:-1]
        return value

    @staticmethod
    def _is_positive_int(value: str) -> bool:
        return bool(re.match(r"^[0-9]+$", value)) and int(value) > 0
