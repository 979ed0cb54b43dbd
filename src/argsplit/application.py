#!/usr/bin/env python3
"""Command-line front end for argsplit."""

import logging
import sys
from typing import Optional

from .allocator import LimitedAllocator
from .classification import ClassificationResult
from .classifier import ArgumentClassifier, CliStatus
from .config_manager import ConfigManager
from .config_result import Settings
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import ArgsplitError, InvalidConfigError
from .printer import MessagePrinter
from .types import ArgsList, ExitCode

COLOR_OPTION = "--color"
COLOR_ON_VALUES = ("yes", "always", "on")


def print_help() -> None:
    """Print concise help message about argsplit functionality."""
    help_text = """argsplit - command-line argument classifier
Usage:
  argsplit -v input.txt -x             # pre option -v, positional input.txt, post option -x
  argsplit -v -- -x -y                 # everything after -- is a post option
  argsplit --color=yes file            # colored output

  Config file: $XDG_CONFIG_HOME/argsplit.conf or $HOME/.config/argsplit.conf
  Config format: KEY=VALUE (e.g., "default_capacity=16")
  Exit codes: 0 ok, 1 command-line error, 2 memory error
"""
    print(help_text)


def _join(tokens) -> str:
    joined = " ".join(tokens)
    return joined if joined else "(none)"


class Application:
    """Classifies its own command line and reports the buckets."""

    def __init__(
        self,
        classifier: Optional[ArgumentClassifier] = None,
        printer: Optional[MessagePrinter] = None,
        settings: Optional[Settings] = None,
        config_manager: Optional[ConfigManager] = None,
    ):
        self.classifier = classifier
        self.printer = printer
        self.settings = settings
        self.config_manager = config_manager or ConfigManager()

    def run(self, argv: ArgsList) -> ExitCode:
        """Run the application with the full argument vector (argv[0] included)."""
        try:
            settings = self._resolve_settings()
        except InvalidConfigError as e:
            logging.error(str(e))
            return e.exit_code

        classifier = self.classifier or self._build_classifier(settings)
        printer = self.printer or self._build_printer(settings)

        outcome = classifier.parse(argv)
        if EnvironmentHelper.is_enabled("ARGSPLIT_DEBUG"):
            printer.print_debug(f"classification status: {outcome.status.name}")
        if outcome.status is not CliStatus.OK:
            title = "CLI error" if outcome.status is CliStatus.USER_ERROR else "Memory error"
            printer.print_error(title, outcome.error.message)
            return int(outcome.status)

        with outcome.result as result:
            pre_options = tuple(result.pre_positional_options)
            if "--help" in pre_options:
                print_help()
                return 0

            self._apply_color_option(pre_options, printer)
            self._report(result, printer)
        return 0

    def _resolve_settings(self) -> Settings:
        if self.settings is None:
            self.settings = self.config_manager.load_settings().settings
        return self.settings

    @staticmethod
    def _build_classifier(settings: Settings) -> ArgumentClassifier:
        debug_log(
            f"_build_classifier: growth={settings.growth}, "
            f"capacity={settings.default_capacity}, "
            f"memory_limit={settings.memory_limit}"
        )
        if settings.growth == "fixed":
            return ArgumentClassifier.fixed(settings.default_capacity)
        allocator = None
        if settings.memory_limit is not None:
            allocator = LimitedAllocator(settings.memory_limit)
        return ArgumentClassifier(
            initial_capacity=settings.default_capacity, allocator=allocator
        )

    @staticmethod
    def _build_printer(settings: Settings) -> MessagePrinter:
        return MessagePrinter(
            error_symbol=settings.error_symbol,
            info_symbol=settings.info_symbol,
            styles_allowed=settings.styles,
        )

    @staticmethod
    def _apply_color_option(pre_options: tuple, printer: MessagePrinter) -> None:
        """Honour the last --color / --color=VALUE pre-positional option."""
        wanted = None
        for option in pre_options:
            if option == COLOR_OPTION:
                wanted = True
            elif option.startswith(COLOR_OPTION + "="):
                wanted = option.split("=", 1)[1].lower() in COLOR_ON_VALUES

        if wanted is not None and wanted != printer.style.enabled:
            printer.toggle_colors()

    @staticmethod
    def _report(result: ClassificationResult, printer: MessagePrinter) -> None:
        printer.print_info("Executable", result.executable)
        printer.print_info("Positional", _join(result.positional_args))
        printer.print_info("Pre options", _join(result.pre_positional_options))
        printer.print_info("Post options", _join(result.post_positional_options))


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv)
    except ArgsplitError as e:
        logging.error(str(e))
        return e.exit_code
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
