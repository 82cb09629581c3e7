from __future__ import annotations

import struct
from collections import deque
from typing import Any, Deque, List, Tuple

_BUCKETS = 65


def float_key(value: float) -> int:
    """Map a non-negative float onto an int with the same ordering."""

    if value < 0:
        raise ValueError("radix heap keys must be non-negative")
    return struct.unpack(">Q", struct.pack(">d", float(value) + 0.0))[0]


class RadixHeap:
    """Monotone priority queue over non-negative float keys.

    Items live in buckets indexed by the highest bit in which their key
    differs from the last extracted key. Keys pushed must never be smaller
    than the last extracted key, which holds for Dijkstra with non-negative
    weights.
    """

    def __init__(self) -> None:
        self._last = 0
        self._buckets: List[Deque[Tuple[int, float, Any]]] = [deque() for _ in range(_BUCKETS)]
        self._size = 0

    def _bucket_index(self, key: int) -> int:
        if key == self._last:
            return 0
        return (key ^ self._last).bit_length()

    def push(self, priority: float, item: Any) -> None:
        key = float_key(priority)
        if key < self._last:
            raise ValueError(
                f"radix heap is monotone: {priority} is below the last extracted key"
            )
        self._buckets[self._bucket_index(key)].append((key, priority, item))
        self._size += 1

    def _pull(self) -> None:
        index = 1
        while not self._buckets[index]:
            index += 1
        bucket = self._buckets[index]
        self._buckets[index] = deque()
        self._last = min(entry[0] for entry in bucket)
        for entry in bucket:
            self._buckets[self._bucket_index(entry[0])].append(entry)

    def pop(self) -> Tuple[float, Any]:
        if not self._size:
            raise IndexError("pop from empty radix heap")
        if not self._buckets[0]:
            self._pull()
        _, priority, item = self._buckets[0].popleft()
        self._size -= 1
        return priority, item

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
