"""Settings containers for argsplit."""

from .printer import DEFAULT_ERROR_SYMBOL, DEFAULT_INFO_SYMBOL
from .string_array import DEFAULT_CAPACITY
from .types import ConfigData

GROWTH_MODES = ("dynamic", "fixed")


class Settings:
    """Runtime settings, the counterpart of cli.h's configuration macros."""

    def __init__(
        self,
        default_capacity: int = DEFAULT_CAPACITY,
        growth: str = "dynamic",
        error_symbol: str = DEFAULT_ERROR_SYMBOL,
        info_symbol: str = DEFAULT_INFO_SYMBOL,
        styles: bool = True,
        memory_limit: int | None = None,
    ):
        self.default_capacity = default_capacity
        self.growth = growth
        self.error_symbol = error_symbol
        self.info_symbol = info_symbol
        self.styles = styles
        # Total array slots the classifier may hold at once; None is unlimited.
        self.memory_limit = memory_limit

    def __eq__(self, other):
        if isinstance(other, Settings):
            return vars(self) == vars(other)
        return NotImplemented

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"Settings({fields})"


class ConfigResult:
    """Class to hold parsed settings together with the raw key/values."""

    def __init__(self, settings: Settings, values: ConfigData):
        self.settings = settings
        self.values = values
