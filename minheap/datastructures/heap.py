from __future__ import annotations
import io
import logging
import sys
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TextIO, TypeVar

from ..errors import HeapIndexOutOfBoundsError, HeapUnderflowError
from .dynamic_array import DynamicArray

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Initial backing-store capacity of a heap created empty.
DEFAULT_CAPACITY = 2


class MinHeap(Generic[T]):
    """A binary min-heap over an owned, capacity-tracked buffer.

    The tree is implicit: the root sits at index 0 and node ``i`` has
    children ``2i + 1`` and ``2i + 2``. Only the first ``size`` slots of the
    buffer are live; anything past them is stale and never read.
    """

    __slots__ = ("_data", "_size")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._data: DynamicArray[T] = DynamicArray(capacity)
        self._size = 0

    @classmethod
    def from_sequence(cls, it: Iterable[T]) -> "MinHeap[T]":
        """Copy `it` into a new heap and heapify it in place in O(n)."""
        items = list(it)
        heap: MinHeap[T] = cls(len(items))
        for i, item in enumerate(items):
            heap._data[i] = item
        heap._size = len(items)
        heap._make_heap()
        logger.debug("built heap of %d elements", heap._size)
        return heap

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _parent(idx: int) -> int:
        return (idx - 1) // 2

    @staticmethod
    def _left(idx: int) -> int:
        return 2 * idx + 1

    @staticmethod
    def _right(idx: int) -> int:
        return 2 * idx + 2

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = self._parent(idx)
            if not data[idx] < data[parent]:
                break
            data.swap(parent, idx)
            idx = parent

    def _heapify_at(self, idx: int) -> None:
        """Sift the element at `idx` down until neither child is smaller."""
        data = self._data
        n = self._size
        while True:
            left = self._left(idx)
            right = self._right(idx)
            smallest = idx
            if left < n and data[left] < data[smallest]:
                smallest = left
            if right < n and data[right] < data[smallest]:
                smallest = right
            if smallest == idx:
                break
            data.swap(idx, smallest)
            idx = smallest

    def _make_heap(self) -> None:
        """Transform the live slots into a heap in-place in O(n) time."""
        if self._size < 2:
            return
        for i in range(self._parent(self._size - 1), -1, -1):
            self._heapify_at(i)

    def _require_items(self, operation: str) -> None:
        if self._size == 0:
            raise HeapUnderflowError(operation)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, item: T) -> None:
        """Insert item, growing the buffer when full (O(log n))."""
        if self._size == self._data.capacity:
            self._data.grow(self._size)
        self._data[self._size] = item
        self._size += 1
        self._sift_up(self._size - 1)

    def pop(self) -> T:
        """Remove and return the smallest item (O(log n))."""
        self._require_items("pop")
        data = self._data
        top = data[0]
        self._size -= 1
        if self._size > 0:
            data[0] = data[self._size]
            self._heapify_at(0)
        data.release(self._size)
        return top

    extract_min = pop

    def pop_into(self, sink: Callable[[T], object]) -> None:
        """Pop the smallest item and hand it to `sink` (e.g. ``out.append``)."""
        sink(self.pop())

    def peek(self) -> T:
        """Return the smallest item without removing it (O(1))."""
        self._require_items("peek")
        return self._data[0]

    top = peek

    def replace(self, item: T) -> T:
        """Pop and return the smallest item, then push a new item (O(log n))."""
        self._require_items("replace")
        top = self._data[0]
        self._data[0] = item
        self._heapify_at(0)
        return top

    def pushpop(self, item: T) -> T:
        """Push item then pop smallest in a single O(log n) operation."""
        if self._size and self._data[0] < item:
            top = self._data[0]
            self._data[0] = item
            self._heapify_at(0)
            return top
        return item

    def at(self, index: int) -> T:
        """Return the element stored at `index` in heap array order."""
        if index < 0 or index >= self._size:
            raise HeapIndexOutOfBoundsError(index, self._size)
        return self._data[index]

    __getitem__ = at

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def capacity(self) -> int:
        return self._data.capacity

    def clear(self) -> None:
        """Drop every element and release the buffer."""
        logger.debug("clearing heap of %d elements", self._size)
        self._data = DynamicArray(0)
        self._size = 0

    def copy(self) -> "MinHeap[T]":
        """Return an independent heap with its own copy of the buffer."""
        out: MinHeap[T] = type(self)(0)
        out._data = self._data.copy(self._size)
        out._size = self._size
        return out

    __copy__ = copy

    def transfer(self) -> "MinHeap[T]":
        """Move this heap's buffer into a new heap, leaving this one empty."""
        out: MinHeap[T] = type(self)(0)
        out._data, out._size = self._data, self._size
        self._data = DynamicArray(0)
        self._size = 0
        return out

    def render(self, writer: Optional[TextIO] = None) -> None:
        """Write ``MinHeap [e0, e1, ...]`` in heap array order to `writer`."""
        out = sys.stdout if writer is None else writer
        out.write("MinHeap [")
        for i, item in enumerate(self):
            if i:
                out.write(", ")
            out.write(str(item))
        out.write("]")

    def to_text(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()

    def __str__(self) -> str:
        return self.to_text()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def to_list(self) -> List[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        # Iterate over the live slots (heap order, not sorted order)
        return self._data.iter_live(self._size)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinHeap({self.to_list()!r})"
