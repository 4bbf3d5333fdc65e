"""
MinHeap Command-Line Interface (CLI)

This script exposes the heap and its verification tooling via subcommands.
It ties together:
- The MinHeap container (bulk build, insert, drain, rendering)
- Invariant checking and randomized stress trials
- The CSV benchmark runner

Usage examples:
    python -m minheap.cli render 5 4 3 2 1
    python -m minheap.cli drain --type str This is just a test
    python -m minheap.cli stress --type float --trials 20 --seed 7
    python -m minheap.cli bench --path heap_bench.csv --steps 6
"""

import argparse
import logging
import sys

from .benchmark import run_benchmarks
from .datastructures.heap import MinHeap
from .errors import MinHeapError
from .validation import (
    DEFAULT_INSERTS,
    DEFAULT_POOL_SIZE,
    DEFAULT_SAMPLE,
    DEFAULT_TRIALS,
    is_min_heap,
    run_stress,
)

logger = logging.getLogger(__name__)

# Element parsers for the --type option
ELEMENT_TYPES = {
    "int": int,
    "float": float,
    "str": str,
}


# -------------------------------------------------------------------
# Utility: build a heap from command-line values
# -------------------------------------------------------------------
def build_heap(args):
    """Build a heap from args.values, by bulk heapify or repeated insert."""
    parse = ELEMENT_TYPES[args.type]
    values = [parse(v) for v in args.values]
    if args.insert:
        heap = MinHeap()
        for v in values:
            heap.insert(v)
        return heap
    return MinHeap.from_sequence(values)


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------

def cmd_render(args):
    """Print the heap in array order."""
    heap = build_heap(args)
    heap.render(sys.stdout)
    print()


def cmd_drain(args):
    """Pop every element and print them in extraction order."""
    heap = build_heap(args)
    out = []
    while not heap.is_empty():
        heap.pop_into(out.append)
    print(" ".join(str(v) for v in out))


def cmd_check(args):
    """Report whether the built heap satisfies the heap property."""
    heap = build_heap(args)
    print(f"size: {heap.size()}")
    print(f"min heap?: {str(is_min_heap(heap)).lower()}")


# -------------------------------------------------------------------
# Stress trials
# -------------------------------------------------------------------
def cmd_stress(args):
    """Run randomized stress trials, printing one row per trial."""
    print("Trial\tEmpty?\tMin Heap?\tFirst Elements")
    failed = 0
    results = run_stress(
        args.type,
        trials=args.trials,
        pool_size=args.pool,
        inserts=args.inserts,
        sample=args.sample,
        seed=args.seed,
    )
    for r in results:
        if not r.passed:
            failed += 1
        sample = " ".join(str(v) for v in r.sample)
        print(f"{r.trial}:\t{str(r.empty).lower()}\t{str(r.valid).lower()}\t\t{sample}")

    if failed:
        print(f"{failed} of {args.trials} trials failed.")
        return 1
    print(f"All {args.trials} trials passed.")
    return 0


# -------------------------------------------------------------------
# Benchmark
# -------------------------------------------------------------------
def cmd_bench(args):
    """Run the CSV benchmark for heap operations."""
    rows = run_benchmarks(args.path, base_input=args.base_input, steps=args.steps,
                          iterations=args.iterations, seed=args.seed)
    print(f"Wrote {len(rows)} measurements to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def _add_build_args(s):
    s.add_argument("values", nargs="*")
    s.add_argument("--type", choices=sorted(ELEMENT_TYPES), default="int")
    s.add_argument("--insert", action="store_true",
                   help="Build by repeated insert instead of bulk heapify")


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m minheap.cli", description="MinHeap CLI")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- heap construction ---
    s = sub.add_parser("render", help="Print a heap in array order")
    _add_build_args(s)
    s.set_defaults(func=cmd_render)

    s = sub.add_parser("drain", help="Pop all elements in sorted order")
    _add_build_args(s)
    s.set_defaults(func=cmd_drain)

    s = sub.add_parser("check", help="Verify the heap property")
    _add_build_args(s)
    s.set_defaults(func=cmd_check)

    # --- verification ---
    s = sub.add_parser("stress", help="Run randomized stress trials")
    s.add_argument("--type", choices=["int", "float"], default="int")
    s.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    s.add_argument("--pool", type=int, default=DEFAULT_POOL_SIZE)
    s.add_argument("--inserts", type=int, default=DEFAULT_INSERTS)
    s.add_argument("--sample", type=int, default=DEFAULT_SAMPLE)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_stress)

    # --- benchmark ---
    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--steps", type=int, default=12)
    s.add_argument("--iterations", type=int, default=5)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m minheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args) or 0
    except (MinHeapError, ValueError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        parser.exit(1, f"error: {e}\n")


if __name__ == "__main__":
    sys.exit(main())
