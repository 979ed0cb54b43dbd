"""Allocation capability used by the string arrays."""

from .environment_helper import debug_log
from .types import Buffer


class Allocator:
    """Interface for obtaining and returning array buffers.

    ``allocate`` returns ``None`` when no buffer can be provided; callers turn
    that into an ``AllocationError``.
    """

    def allocate(self, size: int) -> Buffer | None:
        raise NotImplementedError

    def release(self, buffer: Buffer) -> None:
        raise NotImplementedError


class ListAllocator(Allocator):
    """Default allocator backed by plain Python lists."""

    def allocate(self, size: int) -> Buffer | None:
        try:
            return [None] * size
        except (MemoryError, OverflowError):
            debug_log(f"ListAllocator.allocate: cannot provide {size} slots")
            return None

    def release(self, buffer: Buffer) -> None:
        buffer.clear()


class LimitedAllocator(ListAllocator):
    """Allocator that refuses to hand out more than ``limit`` slots in total.

    Released buffers give their slots back. A growing array holds its old
    buffer until the new one is allocated, so both have to fit at once.
    """

    def __init__(self, limit: int):
        self.limit = limit
        self.in_use = 0
        self.allocations = 0
        self.releases = 0

    def allocate(self, size: int) -> Buffer | None:
        if self.in_use + size > self.limit:
            debug_log(
                f"LimitedAllocator.allocate: refusing {size} slots "
                f"({self.in_use}/{self.limit} in use)"
            )
            return None
        buffer = super().allocate(size)
        if buffer is not None:
            self.in_use += size
            self.allocations += 1
        return buffer

    def release(self, buffer: Buffer) -> None:
        self.in_use -= len(buffer)
        self.releases += 1
        super().release(buffer)


DEFAULT_ALLOCATOR = ListAllocator()
