"""Exceptions raised by the heap container.

Both failures are caller contract violations. They subclass IndexError so
code written against built-in containers keeps working.
"""


class MinHeapError(Exception):
    """Base class for heap errors."""


class HeapUnderflowError(MinHeapError, IndexError):
    """An operation that needs an element was attempted on an empty heap."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} from empty heap")
        self.operation = operation


class HeapIndexOutOfBoundsError(MinHeapError, IndexError):
    """An index outside the live range [0, size) was requested."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"heap index {index} out of range for size {size}")
        self.index = index
        self.size = size
