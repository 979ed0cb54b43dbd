"""Token classification for argsplit.

``ArgumentClassifier.classify`` walks the argument vector once, left to right,
and routes every token after the executable:

* a token that does not start with ``-`` is a positional argument;
* the exact token ``--`` switches the scan to post-positional mode and is
  dropped, unless a positional argument was already seen;
* any other token starting with ``-`` (a lone ``-`` included) is an option,
  stored as pre- or post-positional depending on the current mode.

The first positional argument also ends the pre-positional section, so
``prog -a b -c`` gives ``-a`` as a pre-positional and ``-c`` as a
post-positional option. Once in post mode the scan never goes back.
"""

from enum import Enum, IntEnum
from typing import Callable, NamedTuple

from .allocator import Allocator
from .classification import ClassificationResult
from .environment_helper import debug_log
from .exceptions import (
    ArgsplitError,
    DoubleDashAfterPositionalError,
    FatalError,
    UserError,
)
from .string_array import (
    DEFAULT_CAPACITY,
    FixedStringArray,
    GrowableStringArray,
    StringArray,
)
from .types import ArgsList

DOUBLE_DASH = "--"

ArrayFactory = Callable[[str], StringArray]


class ScanMode(Enum):
    """Which option bucket receives the next option token."""

    PRE = "pre"
    POST = "post"


class CliStatus(IntEnum):
    """Outcome of ``parse``; the values double as process exit codes."""

    OK = 0
    USER_ERROR = 1
    FATAL_ERROR = 2


class ParseOutcome(NamedTuple):
    status: CliStatus
    result: ClassificationResult | None
    error: ArgsplitError | None = None


def is_double_dash(token: str) -> bool:
    return token == DOUBLE_DASH


def is_option(token: str) -> bool:
    return token.startswith("-")


class ArgumentClassifier:
    """Splits an argument vector into positional arguments and option buckets."""

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        allocator: Allocator | None = None,
        array_factory: ArrayFactory | None = None,
    ):
        self.initial_capacity = initial_capacity
        self.allocator = allocator
        self.array_factory = array_factory or self._growable_array

    @classmethod
    def fixed(cls, capacity: int = DEFAULT_CAPACITY) -> "ArgumentClassifier":
        """Classifier whose arrays never grow past ``capacity`` tokens each."""
        return cls(
            initial_capacity=capacity,
            array_factory=lambda what: FixedStringArray.with_capacity(capacity, what),
        )

    def _growable_array(self, what: str) -> StringArray:
        return GrowableStringArray(self.initial_capacity, self.allocator, what)

    def classify(self, argv: ArgsList) -> ClassificationResult:
        """
        Classify ``argv`` where ``argv[0]`` is the executable path.

        Args:
            argv: The raw argument vector, usually ``sys.argv``

        Returns:
            ClassificationResult owning the three token arrays

        Raises:
            ValueError: If argv is empty
            DoubleDashAfterPositionalError: If '--' follows a positional argument
            FatalError: If storage for a token array cannot be provided
        """
        if not argv:
            raise ValueError("argv must contain at least the executable path")

        executable, tokens = argv[0], argv[1:]
        if not tokens:
            debug_log(f"classify: no arguments after {executable!r}")
            return ClassificationResult(executable)

        positional, post_options, pre_options = self._allocate_sequences()
        result = ClassificationResult(executable, positional, post_options, pre_options)
        try:
            self._scan(tokens, result)
        except Exception:
            result.release()
            raise
        return result

    def parse(self, argv: ArgsList) -> ParseOutcome:
        """Classify ``argv`` and report errors as a status instead of raising."""
        try:
            return ParseOutcome(CliStatus.OK, self.classify(argv))
        except UserError as e:
            return ParseOutcome(CliStatus.USER_ERROR, None, e)
        except FatalError as e:
            return ParseOutcome(CliStatus.FATAL_ERROR, None, e)

    def _allocate_sequences(self) -> tuple[StringArray, StringArray, StringArray]:
        """Allocate the positional, post-option and pre-option arrays in order."""
        allocated: list[StringArray] = []
        try:
            for what in (
                "positional arguments",
                "post-positional options",
                "pre-positional options",
            ):
                allocated.append(self.array_factory(what))
        except FatalError:
            for array in allocated:
                array.release()
            raise
        positional, post_options, pre_options = allocated
        return positional, post_options, pre_options

    @staticmethod
    def _scan(tokens: ArgsList, result: ClassificationResult) -> None:
        positional = result.positional_args
        mode = ScanMode.PRE

        for token in tokens:
            if not is_option(token):
                positional.append(token)
                mode = ScanMode.POST
                continue

            if is_double_dash(token):
                if len(positional) > 0:
                    raise DoubleDashAfterPositionalError(token, positional[-1])
                debug_log("classify: double dash, switching to post-positional mode")
                mode = ScanMode.POST
                continue

            if mode is ScanMode.POST:
                result.post_positional_options.append(token)
            else:
                result.pre_positional_options.append(token)


def classify(argv: ArgsList, **kwargs) -> ClassificationResult:
    """Classify ``argv`` with a default ``ArgumentClassifier``."""
    return ArgumentClassifier(**kwargs).classify(argv)
