"""Terminal style configuration for argsplit output."""

from typing import NamedTuple


class Style(NamedTuple):
    """Escape sequences used when formatting messages.

    Styles are immutable; ``toggle_colors`` returns a new one.
    """

    reset: str = ""
    bold: str = ""
    dim: str = ""
    fore_red: str = ""
    fore_brblue: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.reset)


PLAIN_STYLE = Style()
ANSI_STYLE = Style(
    reset="\033[0m",
    bold="\033[1m",
    dim="\033[2m",
    fore_red="\033[31m",
    fore_brblue="\033[94m",
)


def toggle_colors(style: Style) -> Style:
    """Return the ANSI style for a plain one and the plain style otherwise."""
    if style.enabled:
        return PLAIN_STYLE
    return ANSI_STYLE
