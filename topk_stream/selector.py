from __future__ import annotations

import operator
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from .errors import InvalidArgument, Underfilled


def _order_key(value: Any) -> Tuple[int, Any]:
    # NaN sorts below everything, -inf included
    if value != value:
        return (0, 0)
    return (1, value)


class TopKSelector:
    """Bounded buffer holding the K largest values of a stream.

    - 缓冲区始终按非递增顺序保存，最多 ``capacity`` 个元素；
    - 未满时保存全部已见值，不使用哨兵填充；
    - 相等值按到达顺序排列，先到者靠前；
    - 每次 ``feed`` 为 O(K)，总内存为 O(K)，与流长度无关。
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool):
            raise InvalidArgument(f"capacity must be a positive integer, got {capacity!r}")
        try:
            capacity = operator.index(capacity)
        except TypeError:
            raise InvalidArgument(f"capacity must be a positive integer, got {capacity!r}") from None
        if capacity <= 0:
            raise InvalidArgument(f"capacity must be a positive integer, got {capacity}")
        self._capacity = capacity
        self._buffer: List[Any] = []
        self._keys: List[Tuple[int, Any]] = []
        self._seen = 0
        self._kept = 0
        self._evicted = 0

    @classmethod
    def from_iterable(cls, capacity: int, values: Iterable[Any]) -> "TopKSelector":
        selector = cls(capacity)
        selector.feed_many(values)
        return selector

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"TopKSelector(capacity={self._capacity}, values={self._buffer!r})"

    def is_full(self) -> bool:
        return len(self._buffer) == self._capacity

    def _insertion_index(self, key: Tuple[int, Any]) -> int:
        # first slot holding a strictly smaller value; equal values stay ahead
        for j, held in enumerate(self._keys):
            if held < key:
                return j
        return len(self._keys)

    def feed(self, value: Any) -> None:
        """Offer one value; it is kept only if it ranks among the K largest."""
        self._seen += 1
        key = _order_key(value)
        full = self.is_full()
        if full and not self._keys[-1] < key:
            return

        j = self._insertion_index(key)
        if full:
            # evict the current minimum before shifting
            self._buffer.pop()
            self._keys.pop()
            self._evicted += 1
        self._buffer.insert(j, value)
        self._keys.insert(j, key)
        self._kept += 1

    def feed_many(self, values: Iterable[Any]) -> None:
        for value in values:
            self.feed(value)

    def snapshot(self) -> List[Any]:
        """Current top values, largest first, as a new list."""
        return list(self._buffer)

    def kth(self) -> Any:
        """Return the K-th largest value seen so far.

        Raises ``Underfilled`` while fewer than ``capacity`` values are held,
        so a missing answer is never confused with a small one.
        """
        if not self.is_full():
            raise Underfilled(len(self._buffer), self._capacity)
        return self._buffer[-1]

    def stats(self) -> Dict[str, int]:
        return {
            "seen": self._seen,
            "kept": self._kept,
            "evicted": self._evicted,
            "discarded": self._seen - self._kept,
            "count": len(self._buffer),
            "capacity": self._capacity,
        }


def create(capacity: int) -> TopKSelector:
    return TopKSelector(capacity)
