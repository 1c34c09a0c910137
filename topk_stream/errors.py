from __future__ import annotations


class TopKError(Exception):
    """Base class for selector errors."""


class InvalidArgument(TopKError, ValueError):
    """Raised when a selector is constructed with a non-positive capacity."""


class Underfilled(TopKError, LookupError):
    """Raised by ``kth()`` before ``capacity`` values have been fed."""

    def __init__(self, count: int, capacity: int) -> None:
        self.count = int(count)
        self.capacity = int(capacity)
        super().__init__(
            f"only {self.count} of {self.capacity} values seen; kth largest is undefined"
        )
