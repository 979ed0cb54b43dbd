"""Configuration management functionality for argsplit."""

from pathlib import Path

from .config_result import GROWTH_MODES, ConfigResult, Settings
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import InvalidConfigError
from .path_helper import PathHelper
from .string_array import MAX_INITIAL_CAPACITY
from .types import ConfigData

KNOWN_KEYS = (
    "default_capacity",
    "growth",
    "error_symbol",
    "info_symbol",
    "styles",
    "memory_limit",
)
BOOLEAN_VALUES = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


class ConfigManager:
    """Manages configuration file loading and settings resolution."""

    @staticmethod
    def find_config_file() -> Path | None:
        """Find argsplit.conf config file path."""
        return PathHelper.get_config_path()

    @staticmethod
    def load_config(config_file: Path) -> ConfigData:
        """
        Load raw key/values from a configuration file.

        Args:
            config_file: Path to the configuration file

        Returns:
            Dictionary of the keys found in the file

        Raises:
            InvalidConfigError: If the file cannot be decoded or a line is invalid
        """
        values: ConfigData = {}
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line, line_num, str(config_file), values
                    )
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e
        except OSError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Cannot read config: {e}"
            ) from e
        return values

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, values: ConfigData
    ) -> None:
        line = line.strip()
        if not line or line.startswith("#"):
            return

        if "=" not in line:
            raise InvalidConfigError(config_file, line_num, f"Expected KEY=VALUE, got '{line}'")

        key, value = line.split("=", 1)
        key = key.strip().lower()
        if key not in KNOWN_KEYS:
            raise InvalidConfigError(config_file, line_num, f"Unknown setting: '{key}'")

        values[key] = ConfigManager._strip_quotes(value.strip())

    @staticmethod
    def _strip_quotes(value: str) -> str:
        """Strip matching quotes from value if present."""
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            return value[1:-1]
        return value

    @staticmethod
    def build_settings(values: ConfigData, source: str = "config") -> Settings:
        """
        Validate raw values and turn them into a Settings object.

        Raises:
            InvalidConfigError: If a value has the wrong type or is out of range
        """
        settings = Settings()

        if "default_capacity" in values:
            settings.default_capacity = ConfigManager._parse_positive_int(
                values, "default_capacity", source, MAX_INITIAL_CAPACITY
            )

        if "memory_limit" in values:
            settings.memory_limit = ConfigManager._parse_positive_int(
                values, "memory_limit", source
            )

        if "growth" in values:
            growth = values["growth"].lower()
            if growth not in GROWTH_MODES:
                raise InvalidConfigError(
                    source,
                    message=f"growth must be one of {', '.join(GROWTH_MODES)}, got '{values['growth']}'",
                )
            settings.growth = growth

        if "styles" in values:
            styles = BOOLEAN_VALUES.get(values["styles"].lower())
            if styles is None:
                raise InvalidConfigError(
                    source, message=f"styles must be on or off, got '{values['styles']}'"
                )
            settings.styles = styles

        # Symbols are taken verbatim; an empty value keeps the default.
        for key in ("error_symbol", "info_symbol"):
            if values.get(key):
                setattr(settings, key, values[key])

        return settings

    @staticmethod
    def _parse_positive_int(
        values: ConfigData, key: str, source: str, maximum: int | None = None
    ) -> int:
        """Parse values[key] as an integer between 1 and maximum."""
        raw = values[key]
        try:
            number = int(raw)
        except ValueError:
            number = 0
        if number < 1:
            raise InvalidConfigError(
                source, message=f"{key} must be a positive integer, got '{raw}'"
            )
        if maximum is not None and number > maximum:
            raise InvalidConfigError(
                source, message=f"{key} must not exceed {maximum}, got '{raw}'"
            )
        return number

    @staticmethod
    def load_settings(
        config_file: Path | None = None, use_environment: bool = True
    ) -> ConfigResult:
        """Resolve settings from the config file, then ARGSPLIT_* overrides."""
        if config_file is None:
            config_file = ConfigManager.find_config_file()

        values: ConfigData = {}
        source = "environment"
        if config_file is not None:
            debug_log(f"load_settings: reading {config_file}")
            values.update(ConfigManager.load_config(config_file))
            source = str(config_file)

        if use_environment:
            values.update(EnvironmentHelper.get_setting_overrides())

        settings = ConfigManager.build_settings(values, source)
        debug_log(f"load_settings: {settings}")
        return ConfigResult(settings, values)
