"""Three-way merge sort and a timing report over numeric data files."""

from __future__ import annotations

import argparse
import heapq
import sys
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

__all__ = [
    "three_way_merge_sort",
    "three_way_merge_sort_desc",
    "count_words",
    "main",
]


def _split_points(length: int) -> tuple:
    third = length // 3
    return third, 2 * third + 1


def _sort(values: List[Any], descending: bool) -> List[Any]:
    if len(values) < 2:
        return values
    first, second = _split_points(len(values))
    parts = (
        _sort(values[:first], descending),
        _sort(values[first:second], descending),
        _sort(values[second:], descending),
    )
    return list(heapq.merge(*parts, reverse=descending))


def three_way_merge_sort(items: Iterable[Any]) -> List[Any]:
    """Sort ascending by splitting into three parts and merging them."""
    return _sort(list(items), descending=False)


def three_way_merge_sort_desc(items: Iterable[Any]) -> List[Any]:
    """Sort descending by splitting into three parts and merging them."""
    return _sort(list(items), descending=True)


def count_words(path) -> int:
    """Count whitespace-separated tokens in a text file."""
    with open(path, encoding="utf-8") as handle:
        return sum(len(line.split()) for line in handle)


def _read_numbers(path: Path, limit: int) -> List[int]:
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    return [int(token) for token in tokens[:limit]]


def _timed(sort: Callable[[List[int]], List[int]], data: List[int]) -> tuple:
    start = time.process_time()
    result = sort(data)
    return result, time.process_time() - start


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time the three-way merge sort on 'File N.txt' and 'File N_asc.txt' data."""
    parser = argparse.ArgumentParser(
        description="Time three-way merge sort on numbered data files."
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory holding the data files"
    )
    parser.add_argument(
        "--files", type=int, default=10, help="number of numbered files to process"
    )
    args = parser.parse_args(argv)
    directory = Path(args.directory)

    print("*******************TIME SUMMARY***************")
    try:
        for number in range(1, args.files + 1):
            average_path = directory / f"File {number}.txt"
            count = count_words(average_path)
            print(f"-------------------------File {number}.txt-----------------------")
            print(f"File {number} has {count} elements")

            data = _read_numbers(average_path, count)
            _, elapsed = _timed(three_way_merge_sort, data)
            print(f"AVERAGE case : {elapsed:.10f}")

            data = _read_numbers(directory / f"File {number}_asc.txt", count)
            ordered, elapsed = _timed(three_way_merge_sort, data)
            print(f"Best case  : {elapsed:.10f}")

            _, elapsed = _timed(three_way_merge_sort_desc, ordered)
            print(f"Worst case  {elapsed:.10f}\n")
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())