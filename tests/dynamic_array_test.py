import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from minheap.datastructures.dynamic_array import DynamicArray


def test_set_get_within_capacity():
    a = DynamicArray(4)
    for i in range(4):
        a[i] = i * 10
    assert [a[i] for i in range(4)] == [0, 10, 20, 30]
    assert len(a) == 4


def test_index_bounds_are_capacity():
    a = DynamicArray(2)
    with pytest.raises(IndexError):
        a[2] = "x"
    with pytest.raises(IndexError):
        a[-1]


def test_grow_doubles_and_keeps_live_slots():
    a = DynamicArray(0)
    a.grow(0)
    assert a.capacity == 2
    a[0], a[1] = "a", "b"
    a.grow(2)
    assert a.capacity == 4
    assert list(a.iter_live(2)) == ["a", "b"]


def test_resize_rejects_live_count_that_does_not_fit():
    a = DynamicArray(2)
    with pytest.raises(ValueError):
        a.resize(1, 2)
    with pytest.raises(ValueError):
        a.resize(8, 3)
    with pytest.raises(ValueError):
        DynamicArray(-2)


def test_swap_release_and_copy():
    a = DynamicArray(3)
    a[0], a[1], a[2] = 1, 2, 3
    a.swap(0, 2)
    assert list(a.iter_live(3)) == [3, 2, 1]

    b = a.copy(3)
    b[0] = 99
    assert a[0] == 3
    assert b.capacity == 3

    a.release(2)
    assert a[2] is None
