"""Check that each coefficient splits into two factors drawn from a set."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Optional


def find_prime_factor(number: int) -> Optional[int]:
    """Return the only divisor of number in [2, sqrt(number)], or None.

    None is returned when there is no such divisor or more than one.
    """
    found: Optional[int] = None
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            if found is not None:
                return None
            found = divisor
        divisor += 1
    return found


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return an index of target in the sorted values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def prime_pairs_available(coefficients: Iterable[int], values: Iterable[int]) -> bool:
    """True if every coefficient factors into two unused members of values.

    Each member of values, once used as a factor, is blocked from later use.
    """
    coeffs = list(coefficients)
    if not coeffs:
        raise ValueError("Enter valid inputs")
    pool = sorted(values)
    if any(value < 1 for value in pool):
        raise ValueError("invalid inputs: Only positive input allowed")
    used: set[int] = set()
    for coefficient in coeffs:
        factor = find_prime_factor(coefficient)
        if factor is None:
            return False
        first = binary_search(pool, factor)
        second = binary_search(pool, coefficient // factor)
        if first is None or second is None:
            return False
        if first in used or second in used:
            return False
        used.update((first, second))
    return True


def main(argv: Optional[list[str]] = None) -> int:
    """Read a count, that many coefficients, then a line of set members."""
    parser = argparse.ArgumentParser(prog="primepairs", description="Prime pair search.")
    parser.parse_args(argv)
    tokens = [
        (line_number, token)
        for line_number, line in enumerate(sys.stdin.read().splitlines())
        for token in line.split()
    ]
    try:
        if not tokens:
            raise ValueError("Enter valid inputs")
        count = int(tokens[0][1])
        if count <= 0:
            raise ValueError("Enter valid inputs")
        coefficient_tokens = tokens[1 : 1 + count]
        if len(coefficient_tokens) < count:
            raise ValueError("too few coefficients")
        rest = tokens[1 + count :]
        if not rest:
            raise ValueError("missing set of values")
        set_line = rest[0][0]
        values = [int(token) for line_number, token in rest if line_number == set_line]
        coefficients = [int(token) for _, token in coefficient_tokens]
        result = prime_pairs_available(coefficients, values)
    except ValueError as exc:
        parser.error(str(exc))
    print("TRUE" if result else "FALSE")
    return 0


if __name__ == "__main__":
    sys.exit(main())