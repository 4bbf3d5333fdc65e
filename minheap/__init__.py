"""Binary min-heap container with verification and benchmark tooling."""

from .datastructures import DEFAULT_CAPACITY, DynamicArray, MinHeap
from .errors import HeapIndexOutOfBoundsError, HeapUnderflowError, MinHeapError
from .validation import is_min_heap

__all__ = [
    "MinHeap",
    "DynamicArray",
    "DEFAULT_CAPACITY",
    "MinHeapError",
    "HeapUnderflowError",
    "HeapIndexOutOfBoundsError",
    "is_min_heap",
]
