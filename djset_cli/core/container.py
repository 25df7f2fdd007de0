"""
A dynamic array with an explicit, observable capacity policy.

Storage doubles when a push finds it full and halves when a removal leaves it at
most a quarter full. Indexed reads never raise: an out-of-range index yields the
container's default value instead.
"""

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

MIN_CAPACITY = 2
GROWTH_FACTOR = 2
SHRINK_THRESHOLD_DIVISOR = 4
SHRINK_FACTOR = 2


class GrowableContainer(Generic[T]):
    """
    Owns a backing list of `capacity` slots, of which the first `size` are live.

    The container owns its slots, not the objects referenced from them: removing
    or clearing never tears down a stored value. Disposal stays with the caller.
    """

    def __init__(self, initial_capacity: int = MIN_CAPACITY, default: T = None):
        """
        Args:
            initial_capacity: Number of slots allocated up front (at least 2).
            default: Value held by empty slots and returned for invalid indices,
                e.g. None for object handles or 0 for counters.
        """
        if initial_capacity < MIN_CAPACITY:
            raise ValueError(
                f"Initial capacity must be at least {MIN_CAPACITY}, "
                f"got {initial_capacity}."
            )
        self.default = default
        self._initial_capacity = initial_capacity
        self._slots: list[T] = [default] * initial_capacity
        self._size = 0

    @property
    def size(self) -> int:
        """Number of live elements."""
        return self._size

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._slots)

    def _is_valid_index(self, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < self._size

    def _resize(self, new_capacity: int) -> None:
        """Reallocates storage, copying the live elements in order."""
        new_slots = [self.default] * new_capacity
        new_slots[: self._size] = self._slots[: self._size]
        log.debug(f"Container resized: {self.capacity} -> {new_capacity} slots.")
        self._slots = new_slots

    def push_back(self, value: T) -> None:
        """Appends a value, doubling the storage first if it is full."""
        if self._size == self.capacity:
            self._resize(self.capacity * GROWTH_FACTOR)
        self._slots[self._size] = value
        self._size += 1

    def remove_at(self, index: int) -> bool:
        """
        Removes the element at `index`, shifting later elements one slot left.

        Returns:
            False (and leaves the container untouched) if `index` is out of range,
            True otherwise.
        """
        if not self._is_valid_index(index):
            return False

        for i in range(index, self._size - 1):
            self._slots[i] = self._slots[i + 1]
        self._slots[self._size - 1] = self.default
        self._size -= 1

        if (
            self._size > 0
            and self._size <= self.capacity // SHRINK_THRESHOLD_DIVISOR
            and self.capacity > MIN_CAPACITY
        ):
            self._resize(self.capacity // SHRINK_FACTOR)
        return True

    def at(self, index: int) -> T:
        """Returns the element at `index`, or the default value if out of range."""
        if not self._is_valid_index(index):
            return self.default
        return self._slots[index]

    def clear(self) -> None:
        """Drops every element and returns to the initial capacity."""
        self._slots = [self.default] * self._initial_capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._slots[i]

    def __repr__(self) -> str:
        return f"GrowableContainer(size={self._size}, capacity={self.capacity})"
