"""Classification result container for argsplit."""

from .string_array import FixedStringArray, StringArray
from .types import TokenList


def _as_tokens(sequence) -> TokenList:
    if isinstance(sequence, StringArray):
        return sequence.data
    return tuple(sequence)


def _or_empty(sequence, what: str):
    # Zero-slot array over an empty list: nothing is allocated.
    if sequence is None:
        return FixedStringArray([], what)
    return sequence


class ClassificationResult:
    """Executable, positional arguments and the two option buckets of one argv.

    The sequences hold the caller's string objects. When they are string
    arrays the result owns their storage; call ``release`` (or use the result
    as a context manager) once it is no longer needed.
    """

    def __init__(
        self,
        executable: str,
        positional_args=None,
        post_positional_options=None,
        pre_positional_options=None,
        command: str | None = None,
    ):
        self.executable = executable
        # Reserved for sub-command detection; classify() never fills it.
        self.command = command
        self.positional_args = _or_empty(positional_args, "positional arguments")
        self.post_positional_options = _or_empty(
            post_positional_options, "post-positional options"
        )
        self.pre_positional_options = _or_empty(
            pre_positional_options, "pre-positional options"
        )

    def sequences(self) -> tuple:
        """The three token sequences in allocation order."""
        return (
            self.positional_args,
            self.post_positional_options,
            self.pre_positional_options,
        )

    def release(self) -> None:
        """Release every array still owned by this result."""
        for sequence in self.sequences():
            if isinstance(sequence, StringArray) and not sequence.released:
                sequence.release()

    def as_dict(self) -> dict:
        """Plain snapshot of the result, with sequences as tuples."""
        return {
            "executable": self.executable,
            "command": self.command,
            "positional_args": _as_tokens(self.positional_args),
            "post_positional_options": _as_tokens(self.post_positional_options),
            "pre_positional_options": _as_tokens(self.pre_positional_options),
        }

    def __eq__(self, other):
        if isinstance(other, ClassificationResult):
            return self.as_dict() == other.as_dict()
        return NotImplemented

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()
        return False

    def __repr__(self) -> str:
        return (
            f"ClassificationResult(executable={self.executable!r}, "
            f"command={self.command!r}, "
            f"positional_args={self.positional_args!r}, "
            f"post_positional_options={self.post_positional_options!r}, "
            f"pre_positional_options={self.pre_positional_options!r})"
        )
