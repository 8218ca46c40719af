"""Search set partitions for the best AND of per-block XORs."""

from __future__ import annotations

import argparse
import operator
import sys
from collections.abc import Iterator, Sequence
from functools import reduce
from typing import Optional

Partition = tuple[tuple[int, ...], ...]


def restricted_growth_functions(size: int) -> Iterator[tuple[int, ...]]:
    """Yield one block-label tuple per set partition of size elements.

    Element 0 always carries label 0. The remaining elements are labelled
    from the last one backwards, each taking a label at most one above the
    highest label seen so far; the last element varies slowest.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    labels = [0] * size

    def fill(position: int, highest: int) -> Iterator[tuple[int, ...]]:
        if position == 0:
            yield tuple(labels)
            return
        for label in range(highest + 2):
            labels[position] = label
            yield from fill(position - 1, max(label, highest))

    yield from fill(size - 1, 0)


def _blocks(values: Sequence[int], rgf: Sequence[int]) -> Partition:
    if len(values) != len(rgf):
        raise ValueError("values and labels differ in length")
    groups: dict[int, list[int]] = {}
    for value, label in zip(values, rgf):
        groups.setdefault(label, []).append(value)
    return tuple(tuple(groups[label]) for label in sorted(groups))


def partition_value(values: Sequence[int], rgf: Sequence[int]) -> int:
    """AND of the XOR of each block; a single block counts as 0."""
    blocks = _blocks(values, rgf)
    if len(blocks) <= 1:
        return 0
    return reduce(operator.and_, (reduce(operator.xor, block) for block in blocks))


def best_partitions(values: Sequence[int]) -> tuple[int, list[Partition]]:
    """Return the best value and every partition reaching it, in search order.

    Each partition is a tuple of blocks ordered by label; block members keep
    their input order.
    """
    data = list(values)
    if not data:
        raise ValueError("at least one value is required")
    if any(value < 0 for value in data):
        raise ValueError("values must not be negative")
    scored = [
        (partition_value(data, rgf), _blocks(data, rgf))
        for rgf in restricted_growth_functions(len(data))
    ]
    best = max(score for score, _ in scored)
    return best, [blocks for score, blocks in scored if score == best]


def _format_partition(blocks: Partition) -> str:
    if len(blocks) <= 1:
        return ""
    return " -1 ".join(" ".join(str(v) for v in block) for block in blocks) + " "


def main(argv: Optional[list[str]] = None) -> int:
    """Read one line of numbers; print the best partitions and their value."""
    parser = argparse.ArgumentParser(prog="partitions", description="Best XOR/AND partition.")
    parser.parse_args(argv)
    try:
        values = [int(token) for token in sys.stdin.readline().split()]
        best, partitions = best_partitions(values)
    except ValueError as exc:
        parser.error(str(exc))
    for blocks in partitions:
        print(_format_partition(blocks))
    sys.stdout.write(str(best))
    return 0


if __name__ == "__main__":
    sys.exit(main())