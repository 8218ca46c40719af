"""Rearrange a word list so that equal words stop sitting side by side."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Optional


def _forward_pass(items: list[str]) -> None:
    count = len(items)
    for position in range(1, count):
        if items[position - 1] != items[position]:
            continue
        current = items[position]
        for step in range(1, count - position):
            other = position + step
            if items[other] == current:
                continue
            if step == 1 and (position + 2 >= count or items[position + 2] != current):
                items[position], items[other] = items[other], items[position]
                break
            if items[other - 1] != current and (
                other + 1 >= count or items[other + 1] != current
            ):
                items[position], items[other] = items[other], items[position]
                break


def _reverse_pass(items: list[str]) -> None:
    for position in range(len(items) - 2, -1, -1):
        if items[position + 1] != items[position]:
            continue
        current = items[position]
        for step in range(1, position + 1):
            other = position - step
            if items[other] == current:
                continue
            # Index 0 is treated as lying beyond the edge in both tests below.
            if step == 1 and (position - 2 <= 0 or items[position - 2] != current):
                items[position], items[other] = items[other], items[position]
                break
            if items[other + 1] != current and (
                other - 1 <= 0 or items[other - 1] != current
            ):
                items[position], items[other] = items[other], items[position]
                break


def arrange(words: Iterable[str]) -> list[str]:
    """Return the words reordered by swaps that split runs of equal words.

    A forward sweep moves a differing word into each run of equal
    neighbours, then a backward sweep does the same from the other end.
    """
    items = list(words)
    _forward_pass(items)
    _reverse_pass(items)
    return items


def main(argv: Optional[list[str]] = None) -> int:
    """Print the command-line words rearranged."""
    parser = argparse.ArgumentParser(prog="arrange", description="Separate equal words.")
    parser.add_argument("words", nargs="*", help="words to arrange")
    args = parser.parse_args(argv)
    if not args.words:
        parser.error("no inputs")
    print("".join(f"{word} " for word in arrange(args.words)))
    return 0


if __name__ == "__main__":
    sys.exit(main())