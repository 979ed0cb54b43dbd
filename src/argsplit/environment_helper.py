"""Environment variable operations for argsplit."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when ARGSPLIT_DEBUG=1 is set."""
    if EnvironmentHelper.is_enabled("ARGSPLIT_DEBUG"):
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_enabled(var_name: str) -> bool:
        """Check whether an environment flag is set to a truthy value."""
        return os.environ.get(var_name, "").strip().lower() in TRUTHY_VALUES

    @staticmethod
    def get_setting_overrides() -> dict[str, str]:
        """Collect settings overridden through ARGSPLIT_* variables.

        Keys match the config file keys so the result can be merged directly
        over the values read from argsplit.conf.
        """
        overrides: dict[str, str] = {}
        mapping = {
            "ARGSPLIT_DEFAULT_CAPACITY": "default_capacity",
            "ARGSPLIT_GROWTH": "growth",
            "ARGSPLIT_ERROR_SYM": "error_symbol",
            "ARGSPLIT_INFO_SYM": "info_symbol",
            "ARGSPLIT_MEMORY_LIMIT": "memory_limit",
        }
        for var_name, key in mapping.items():
            value = os.environ.get(var_name)
            if value is not None and value.strip():
                overrides[key] = value.strip()

        # NO_COLOR only needs to be present, whatever its value
        if EnvironmentHelper.is_enabled("ARGSPLIT_NO_STYLES") or os.environ.get(
            "NO_COLOR"
        ):
            overrides["styles"] = "off"

        debug_log(f"get_setting_overrides: {overrides}")
        return overrides
