"""Ordered, append-only storage for classified tokens.

Tokens are stored as-is: Python strings are immutable, so the arrays share
the caller's string objects (normally the ones in ``sys.argv``) instead of
copying them.
"""

from .allocator import DEFAULT_ALLOCATOR, Allocator
from .environment_helper import debug_log
from .exceptions import AllocationError, ArrayReleasedError, CapacityExceededError
from .types import Buffer, TokenList

DEFAULT_CAPACITY = 5
# Largest initial capacity accepted from settings.
MAX_INITIAL_CAPACITY = 65535
GROWTH_FACTOR = 2


class StringArray:
    """Shared behaviour of the growable and fixed-capacity arrays."""

    def __init__(self, buffer: Buffer, what: str):
        self._buffer = buffer
        self._capacity = len(buffer)
        self._length = 0
        self._released = False
        self.what = what

    @property
    def length(self) -> int:
        self._check_live("read length")
        return self._length

    @property
    def capacity(self) -> int:
        self._check_live("read capacity")
        return self._capacity

    @property
    def released(self) -> bool:
        return self._released

    @property
    def data(self) -> TokenList:
        """Stored tokens, index 0 to length - 1."""
        self._check_live("read data")
        return tuple(self._buffer[: self._length])  # type: ignore[arg-type]

    def append(self, token: str) -> None:
        """Add ``token`` as the new last element."""
        self._check_live("append")
        if self._length == self._capacity:
            self._handle_full(token)
        self._buffer[self._length] = token
        self._length += 1

    def release(self) -> None:
        """Give the backing storage back; the array is unusable afterwards."""
        self._check_live("release")
        self._release_buffer(self._buffer)
        self._buffer = []
        self._released = True

    def _handle_full(self, token: str) -> None:
        raise NotImplementedError

    def _release_buffer(self, buffer: Buffer) -> None:
        raise NotImplementedError

    def _check_live(self, operation: str) -> None:
        if self._released:
            raise ArrayReleasedError(operation)

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __eq__(self, other):
        if isinstance(other, StringArray):
            return self.data == other.data
        if isinstance(other, (list, tuple)):
            return self.data == tuple(other)
        return NotImplemented

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if not self._released:
            self.release()
        return False

    def __repr__(self) -> str:
        if self._released:
            return f"{type(self).__name__}(<released>)"
        return (
            f"{type(self).__name__}({list(self.data)!r}, "
            f"capacity={self._capacity})"
        )


class GrowableStringArray(StringArray):
    """String array that doubles its storage whenever it runs out of room."""

    def __init__(
        self,
        initial_capacity: int = DEFAULT_CAPACITY,
        allocator: Allocator | None = None,
        what: str = "string array",
    ):
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        self._allocator = allocator or DEFAULT_ALLOCATOR
        super().__init__(self._allocate(initial_capacity, what), what)

    def _allocate(self, size: int, what: str) -> Buffer:
        try:
            buffer = self._allocator.allocate(size)
        except (MemoryError, OverflowError) as e:
            raise AllocationError(what, size) from e
        if buffer is None:
            raise AllocationError(what, size)
        return buffer

    def _handle_full(self, token: str) -> None:
        new_capacity = max(self._capacity * GROWTH_FACTOR, self._capacity + 1)
        debug_log(
            f"GrowableStringArray: growing {self.what} "
            f"from {self._capacity} to {new_capacity}"
        )
        new_buffer = self._allocate(new_capacity, self.what)
        new_buffer[: self._length] = self._buffer[: self._length]
        old_buffer = self._buffer
        self._buffer = new_buffer
        self._capacity = new_capacity
        self._allocator.release(old_buffer)

    def _release_buffer(self, buffer: Buffer) -> None:
        self._allocator.release(buffer)


class FixedStringArray(StringArray):
    """String array over a caller-supplied buffer that never reallocates.

    Appending to a full array raises ``CapacityExceededError`` and leaves the
    stored tokens untouched.
    """

    def __init__(self, buffer: Buffer, what: str = "string array"):
        super().__init__(buffer, what)

    @classmethod
    def with_capacity(cls, capacity: int, what: str = "string array"):
        return cls([None] * capacity, what)

    def _handle_full(self, token: str) -> None:
        raise CapacityExceededError(self._capacity, token)

    def _release_buffer(self, buffer: Buffer) -> None:
        # Caller owns the buffer; just detach from it.
        pass
