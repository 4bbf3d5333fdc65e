"""
Heap verification and randomized stress trials.

The checks only use the public read API (`size()` and `at()`), so they
verify what a consumer of the heap can actually observe.

Usage example:
    from minheap.validation import run_stress
    for result in run_stress("int", trials=10, seed=1):
        print(result)
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, NamedTuple, Optional, Union

from .datastructures.heap import MinHeap

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Defaults for a stress run: 100 trials, each inserting 5000 values drawn
# from a shuffled pool of 7500, then popping the 10 smallest.
DEFAULT_TRIALS = 100
DEFAULT_POOL_SIZE = 7500
DEFAULT_INSERTS = 5000
DEFAULT_SAMPLE = 10


class TrialResult(NamedTuple):
    """Outcome of one stress trial."""

    trial: int
    empty: bool
    valid: bool
    sample: List[Number]

    @property
    def passed(self) -> bool:
        ordered = all(a <= b for a, b in zip(self.sample, self.sample[1:]))
        return not self.empty and self.valid and ordered


def is_min_heap(heap: MinHeap, index: int = 0) -> bool:
    """Recursively check the heap property of the subtree rooted at `index`.

    An empty heap is valid. Asking about an index past the live range of a
    non-empty heap is not.
    """
    size = heap.size()
    if size == 0:
        return True
    if index >= size:
        return False

    left = 2 * index + 1
    right = 2 * index + 2
    if right < size:
        return (
            heap.at(index) <= heap.at(left)
            and heap.at(index) <= heap.at(right)
            and is_min_heap(heap, left)
            and is_min_heap(heap, right)
        )
    if left < size:
        return heap.at(index) <= heap.at(left) and is_min_heap(heap, left)
    return True


def make_pool(kind: str, size: int, rng: random.Random) -> List[Number]:
    """Generate the value pool for a stress run.

    `int` pools hold integers in [1, 10000]; `float` pools hold values in [1, 100001).
    """
    if kind == "int":
        return [rng.randint(1, 10000) for _ in range(size)]
    if kind == "float":
        return [1 + rng.random() * 100000 for _ in range(size)]
    raise ValueError(f"Unsupported pool kind: {kind!r}")


def run_stress_trial(
    trial: int,
    heap: MinHeap,
    pool: List[Number],
    inserts: int,
    sample: int,
    rng: random.Random,
) -> TrialResult:
    """Shuffle `pool`, insert its first `inserts` values, check, pop, clear."""
    if inserts > len(pool):
        raise ValueError("inserts cannot exceed the pool size")
    if sample > inserts:
        raise ValueError("sample cannot exceed the number of inserts")

    rng.shuffle(pool)
    for value in pool[:inserts]:
        heap.insert(value)

    empty = heap.is_empty()
    valid = is_min_heap(heap)
    popped = [heap.pop() for _ in range(sample)]
    heap.clear()

    result = TrialResult(trial, empty, valid, popped)
    logger.debug("trial %d: empty=%s valid=%s", trial, empty, valid)
    return result


def run_stress(
    kind: str = "int",
    trials: int = DEFAULT_TRIALS,
    pool_size: int = DEFAULT_POOL_SIZE,
    inserts: int = DEFAULT_INSERTS,
    sample: int = DEFAULT_SAMPLE,
    seed: Optional[int] = None,
) -> Iterator[TrialResult]:
    """Run `trials` stress trials against a single reused heap."""
    rng = random.Random(seed)
    pool = make_pool(kind, pool_size, rng)
    heap: MinHeap[Number] = MinHeap()

    failures = 0
    for trial in range(trials):
        result = run_stress_trial(trial, heap, pool, inserts, sample, rng)
        if not result.passed:
            failures += 1
            logger.warning("stress trial %d failed: %r", trial, result)
        yield result

    logger.info("stress run finished: %d trials, %d failures", trials, failures)
