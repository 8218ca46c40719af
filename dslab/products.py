"""Decide which of two lists of unsigned numbers has the larger product."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable
from typing import Optional

_UNSIGNED_LIMIT = 2**64


def _checked(values: Iterable[int], name: str) -> list[int]:
    data = list(values)
    if not data:
        raise ValueError(f"{name} must not be empty")
    for value in data:
        if not 0 <= value < _UNSIGNED_LIMIT:
            raise ValueError(f"{name} values must be unsigned 64-bit integers")
    return data


def compare_products(list1: Iterable[int], list2: Iterable[int]) -> str:
    """Return 'L1', 'L2', or 'L1 L2' when the two products are equal."""
    first = math.prod(_checked(list1, "list1"))
    second = math.prod(_checked(list2, "list2"))
    if first == second:
        return "L1 L2"
    return "L1" if first > second else "L2"


def main(argv: Optional[list[str]] = None) -> int:
    """Read two lines of numbers and name the list with the larger product."""
    parser = argparse.ArgumentParser(prog="products", description="Compare list products.")
    parser.parse_args(argv)
    try:
        list1 = [int(token) for token in sys.stdin.readline().split()]
        list2 = [int(token) for token in sys.stdin.readline().split()]
        result = compare_products(list1, list2)
    except ValueError as exc:
        parser.error(str(exc))
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())