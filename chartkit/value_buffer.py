"""A growable FIFO queue of floats backed by a reusable ring array."""

from __future__ import annotations

from collections.abc import Iterator

_MINIMUM_GROW = 4
_GROW_FACTOR_PERCENT = 200
_DEFAULT_CAPACITY = 4


def _format_value(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class ValueBuffer:
    """FIFO queue of floats stored in a ring array that grows as needed.

    Dequeue is O(1); enqueue is O(1) except when the array has to grow.
    """

    def __init__(self, *values: float) -> None:
        capacity = max(len(values), _DEFAULT_CAPACITY)
        self._array = [float(v) for v in values]
        self._array.extend([0.0] * (capacity - len(values)))
        self._head = 0
        self._size = len(values)
        self._tail = self._size % capacity

    @classmethod
    def with_capacity(cls, capacity: int) -> "ValueBuffer":
        """Create an empty buffer with the given pre-allocated capacity."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        buffer = cls()
        buffer._array = [0.0] * capacity
        buffer._head = 0
        buffer._tail = 0
        buffer._size = 0
        return buffer

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> float:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("value buffer index out of range")
        return self._array[(self._head + index) % len(self._array)]

    def __iter__(self) -> Iterator[float]:
        capacity = len(self._array)
        for offset in range(self._size):
            yield self._array[(self._head + offset) % capacity]

    def __str__(self) -> str:
        return " <= ".join(_format_value(v) for v in self)

    def capacity(self) -> int:
        """Total number of slots, used or not."""
        return len(self._array)

    def set_capacity(self, capacity: int) -> None:
        """Re-allocate the backing array, keeping the contents in order."""
        if capacity < self._size:
            raise ValueError(
                f"capacity {capacity} is smaller than the buffer length {self._size}"
            )
        contents = self.to_list()
        self._array = contents + [0.0] * (capacity - len(contents))
        self._head = 0
        self._tail = 0 if self._size == capacity else self._size

    def clear(self) -> None:
        """Remove every value and reset to the default capacity."""
        self._array = [0.0] * _DEFAULT_CAPACITY
        self._head = 0
        self._tail = 0
        self._size = 0

    def enqueue(self, value: float) -> None:
        """Add a value to the back of the queue."""
        if self._size == len(self._array):
            current = len(self._array)
            new_capacity = current * (_GROW_FACTOR_PERCENT // 100)
            if new_capacity < current + _MINIMUM_GROW:
                new_capacity = current + _MINIMUM_GROW
            self.set_capacity(new_capacity)
        self._array[self._tail] = float(value)
        self._tail = (self._tail + 1) % len(self._array)
        self._size += 1

    def dequeue(self) -> float:
        """Remove and return the front value, or 0 when empty."""
        if self._size == 0:
            return 0.0
        removed = self._array[self._head]
        self._head = (self._head + 1) % len(self._array)
        self._size -= 1
        return removed

    def peek(self) -> float:
        """Return the front value without removing it, or 0 when empty."""
        if self._size == 0:
            return 0.0
        return self._array[self._head]

    def peek_back(self) -> float:
        """Return the back value without removing it, or 0 when empty."""
        if self._size == 0:
            return 0.0
        return self._array[self._tail - 1]

    def trim_excess(self) -> None:
        """Shrink the capacity to the length when much of it is unused."""
        threshold = len(self._array) * 0.9
        if self._size < int(threshold):
            self.set_capacity(self._size)

    def to_list(self) -> list[float]:
        """The values in queue order."""
        return list(self)