"""
Timing and memory benchmarks for heap operations.

Each operation is run over inputs that double in size; every run draws its
input from one seeded `random.Random`, so a given seed reproduces the same
inputs across invocations.
"""

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, List, Optional, Tuple

from .datastructures.heap import MinHeap

logger = logging.getLogger(__name__)

# Values are drawn from [0, MAX_VALUE].
MAX_VALUE = 1000000

Operation = Callable[[List[int]], MinHeap]

# ----------------------------
# Helper Functions
# ----------------------------

def heap_input(rng: random.Random, size: int) -> List[int]:
    """Draw `size` heap elements from `rng`."""
    return [rng.randint(0, MAX_VALUE) for _ in range(size)]

def measure_operation_time(operation: Operation, input_size: int, iterations: int,
                           rng: random.Random) -> Tuple[float, float]:
    """Time `operation` over fresh inputs; return (mean, stdev) in milliseconds."""
    samples = []
    for _ in range(iterations):
        data = heap_input(rng, input_size)
        began = time.perf_counter()
        operation(data)
        samples.append((time.perf_counter() - began) * 1000)

    spread = statistics.stdev(samples) if iterations > 1 else 0.0
    return statistics.mean(samples), spread

def heap_footprint(heap: MinHeap) -> int:
    """Bytes held by `heap`: the object, its buffer (sized by capacity) and live elements."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._data._buf)
    return total + sum(sys.getsizeof(item) for item in heap)

def measure_space_efficiency(operation: Operation, input_size: int, rng: random.Random,
                             iterations: int = 3) -> float:
    """Mean footprint of the heap `operation` leaves behind."""
    return statistics.mean(
        heap_footprint(operation(heap_input(rng, input_size))) for _ in range(iterations)
    )

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data):
    heap = MinHeap()
    for item in data:
        heap.insert(item)
    return heap

def bench_pop(data):
    heap = MinHeap()
    for item in data:
        heap.insert(item)
    while not heap.is_empty():
        heap.pop()
    return heap

def bench_peek(data):
    heap = MinHeap()
    for item in data:
        heap.insert(item)
    for _ in range(min(3, len(data))):
        _ = heap.peek()
    return heap

def bench_from_sequence(data):
    return MinHeap.from_sequence(data)

OPERATIONS = {
    "insert": bench_insert,
    "pop": bench_pop,
    "peek": bench_peek,
    "from_sequence": bench_from_sequence,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12, iterations: int = 5,
                   seed: Optional[int] = None):
    """Run exponential performance tests for MinHeap operations.

    Returns the rows written to `output_file` (without the header). Passing
    `seed` makes the generated inputs reproducible.
    """
    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Standard Deviation (ms)",
            "Average Space (bytes)"
        ])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations, rng)
                avg_space = measure_space_efficiency(op_func, size, rng)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                logger.info("%-13s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Avg Space: %.0f bytes",
                            op_name, size, avg_time, std_time, avg_space)

    logger.info("benchmark completed, results saved to %s", output_file)
    return rows
