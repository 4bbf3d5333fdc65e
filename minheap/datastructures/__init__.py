from .dynamic_array import DynamicArray
from .heap import DEFAULT_CAPACITY, MinHeap

__all__ = [
    "DynamicArray",
    "MinHeap",
    "DEFAULT_CAPACITY",
]
