"""Shortest contiguous subarrays with the largest sum."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Optional


def _shortest_start(data: Sequence[int], end: int, total: int) -> int:
    """Latest start whose run up to end sums to total."""
    if total == 0:
        return end
    suffixes = accumulate(reversed(data[: end + 1]))
    for start, suffix in zip(range(end, -1, -1), suffixes):
        if suffix == total:
            return start
    raise ValueError("no run ending here reaches the total")


def max_subarrays(values: Iterable[int]) -> tuple[int, list[tuple[int, int]]]:
    """Return the maximum subarray sum and every shortest (start, end) span.

    Spans are inclusive and listed by their end position.
    """
    data = list(values)
    if not data:
        raise ValueError("at least one value is required")
    best_ending = list(accumulate(data, lambda acc, x: max(x, acc + x)))
    best = max(best_ending)
    spans = [
        (_shortest_start(data, end, best), end)
        for end, ending_sum in enumerate(best_ending)
        if ending_sum == best
    ]
    shortest = min(end - start for start, end in spans)
    return best, [(start, end) for start, end in spans if end - start == shortest]


def main(argv: Optional[list[str]] = None) -> int:
    """Read one line of integers; print each shortest span and the sum."""
    parser = argparse.ArgumentParser(prog="subarray", description="Maximum subarray sum.")
    parser.parse_args(argv)
    try:
        values = [int(token) for token in sys.stdin.readline().split()]
        best, spans = max_subarrays(values)
    except ValueError as exc:
        parser.error(str(exc))
    for start, end in spans:
        print(f"{start} {end}")
    print(best)
    return 0


if __name__ == "__main__":
    sys.exit(main())