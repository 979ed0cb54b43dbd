"""Styled error, info and debug messages for argsplit."""

import inspect
import os
import sys
from typing import TextIO

from .styles import PLAIN_STYLE, Style, toggle_colors

DEFAULT_ERROR_SYMBOL = "✖"
DEFAULT_INFO_SYMBOL = "●"


class MessagePrinter:
    """Writes one-line messages such as ``✖ Title: message`` to a stream."""

    def __init__(
        self,
        style: Style = PLAIN_STYLE,
        stream: TextIO | None = None,
        error_symbol: str = DEFAULT_ERROR_SYMBOL,
        info_symbol: str = DEFAULT_INFO_SYMBOL,
        styles_allowed: bool = True,
    ):
        self.style = style if styles_allowed else PLAIN_STYLE
        self._stream = stream
        self.error_symbol = error_symbol
        self.info_symbol = info_symbol
        self.styles_allowed = styles_allowed

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stderr is honoured.
        return self._stream if self._stream is not None else sys.stderr

    def toggle_colors(self) -> Style:
        """Switch between plain and colored output, unless styles are disallowed."""
        if self.styles_allowed:
            self.style = toggle_colors(self.style)
        return self.style

    def format_error(self, title: str, msg: str) -> str:
        return self._format(self.style.fore_red, self.error_symbol, title, msg)

    def format_info(self, title: str, msg: str) -> str:
        return self._format(self.style.fore_brblue, self.info_symbol, title, msg)

    def format_debug(self, location: str, msg: str) -> str:
        s = self.style
        return f"{s.dim}{location}:{s.reset}{s.bold}Debug{s.reset}: {msg}"

    def print_error(self, title: str, msg: str) -> None:
        self._write(self.format_error(title, msg))

    def print_info(self, title: str, msg: str) -> None:
        self._write(self.format_info(title, msg))

    def print_debug(self, msg: str) -> None:
        """Print ``msg`` prefixed with the caller's file and line."""
        frame = inspect.currentframe().f_back
        location = (
            f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
        )
        self._write(self.format_debug(location, msg))

    def _format(self, color: str, symbol: str, title: str, msg: str) -> str:
        s = self.style
        return f"{color}{symbol}{s.reset}{s.bold} {title}{s.reset}: {msg}"

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)
