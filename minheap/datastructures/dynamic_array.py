from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """A fixed-capacity slot buffer that can be regrown on demand.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • The array knows its capacity only; the owner tracks how many leading
      slots hold live values and passes that count to `resize`.
    • Reading a slot that was never written raises ValueError (NULL object),
      so owners must never read past their live count.
    • Indices are bounded by capacity; negative indices are rejected.
    """

    __slots__ = ("_buf", "_capacity")

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._buf = self._make_array(capacity)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _check(self, idx: int) -> None:
        if idx < 0 or idx >= self._capacity:
            raise IndexError(f"slot {idx} outside capacity {self._capacity}")

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    def resize(self, new_capacity: int, live: int) -> None:
        """Resize to `new_capacity`, carrying over the first `live` slots.

        Raises:
            ValueError: if `live` does not fit in either buffer.
        """
        if live < 0 or live > self._capacity or live > new_capacity:
            raise ValueError("live count must fit in old and new capacity")

        new_buf = self._make_array(new_capacity)
        for i in range(live):
            new_buf[i] = self._buf[i]

        logger.debug("resized buffer %d -> %d (%d live)", self._capacity, new_capacity, live)
        self._buf = new_buf
        self._capacity = new_capacity

    def grow(self, live: int) -> None:
        """Double capacity (0 grows to 2). Amortized O(1) per appended slot."""
        self.resize(self._capacity * 2 if self._capacity > 0 else 2, live)

    def swap(self, i: int, j: int) -> None:
        buf = self._buf
        buf[i], buf[j] = buf[j], buf[i]

    def release(self, idx: int) -> None:
        """Drop the reference held in slot `idx` so it can be collected."""
        self._check(idx)
        self._buf[idx] = None

    def copy(self, live: int) -> "DynamicArray[T]":
        """Return an independent buffer of the same capacity with `live` slots copied."""
        out: DynamicArray[T] = DynamicArray(self._capacity)
        for i in range(live):
            out._buf[i] = self._buf[i]
        return out

    def iter_live(self, live: int) -> Iterator[T]:
        """Yield the first `live` slots from left to right."""
        for i in range(live):
            yield self._buf[i]  # type: ignore[misc]

    def __len__(self) -> int:
        """Capacity of the buffer, not the owner's live count."""
        return self._capacity

    def __getitem__(self, idx: int) -> T:
        self._check(idx)
        return self._buf[idx]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._check(idx)
        self._buf[idx] = value

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray(capacity={self._capacity})"
