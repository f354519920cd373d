import argparse
import logging
from collections.abc import Sequence
from typing import Optional

from .Config import *
from .generate_statistics import generate_statistics, results_frame, summary_table
from .patterns import generators
from .quick_sorts import SortMethod, UnknownSortMethodError, get_sort_method, sort_methods


def _size(value: str) -> int:
    size = int(value)
    if not 0 <= size <= MAX_SIZE:
        raise argparse.ArgumentTypeError(f"size must be within [0, {MAX_SIZE}]")
    return size


def _method(value: str) -> SortMethod:
    try:
        return get_sort_method(value)
    except UnknownSortMethodError as e:
        raise argparse.ArgumentTypeError(e.args[0]) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quicksort-bench", description="Benchmark quicksort partitioning schemes and pivot selectors.")
    parser.add_argument("--sizes", nargs="+", type=_size, default=list(SIZES), metavar="N")
    parser.add_argument("--patterns", nargs="+", choices=list(generators), default=list(PATTERNS))
    methods = parser.add_mutually_exclusive_group()
    methods.add_argument("--methods", nargs="+", type=_method, metavar="METHOD", help="method names as shown by --list")
    methods.add_argument("--all-methods", action="store_true")
    parser.add_argument("--seed", type=int, default=SEED, help="defaults to a clock based seed")
    parser.add_argument("--no-validate", dest="validate", action="store_false", default=VALIDATE)
    parser.add_argument("--summary", choices=REPORT_VALUES, help="print a method x (size, pattern) table of one counter")
    parser.add_argument("--no-progress", dest="progress", action="store_false")
    parser.add_argument("--list", action="store_true", help="list methods and patterns, then exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.list:
        print("Methods:")
        for method in sort_methods:
            print(f"  {method.name}")
        print("Patterns:")
        for pattern in generators:
            print(f"  {pattern}")
        return 0

    methods = sort_methods if args.all_methods else args.methods
    results = generate_statistics(args.sizes, args.patterns, methods, args.seed, args.validate, args.progress)
    if args.summary:
        print(summary_table(results_frame(results), args.summary).to_string())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
