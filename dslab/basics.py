"""Small exercises: triangle classification, standard deviation, line sorting."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from typing import Optional


def classify_triangle(vertices: Sequence[tuple[int, int]]) -> str:
    """Classify three vertices as 'Scalene', 'Isosceles' or 'Equilateral'."""
    points = list(vertices)
    if len(points) != 3:
        raise ValueError("a triangle needs exactly three vertices")
    lengths = [
        (ax - bx) ** 2 + (ay - by) ** 2
        for (ax, ay), (bx, by) in zip(points, points[1:] + points[:1])
    ]
    distinct = len(set(lengths))
    if distinct == 3:
        return "Scalene"
    if distinct == 2:
        return "Isosceles"
    return "Equilateral"


def standard_deviation(values: Iterable[int]) -> float:
    """Return the population standard deviation of values."""
    data = list(values)
    if not data:
        raise ValueError("standard deviation of an empty sequence")
    n = len(data)
    mean = sum(data) / n
    variance = sum(x * x for x in data) / n - mean * mean
    return math.sqrt(max(variance, 0.0))


def sorted_line_numbers(lines: Sequence[str]) -> list[int]:
    """Return 1-based line numbers ordered by the text of their lines."""
    return sorted(range(1, len(lines) + 1), key=lambda number: lines[number - 1])


def _read_ints(text: str) -> list[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"invalid integer input: {exc}") from None


def triangle_main(argv: Optional[list[str]] = None) -> int:
    """Read three 'x y' vertices from standard input and classify them."""
    parser = argparse.ArgumentParser(prog="triangle", description="Classify a triangle.")
    parser.parse_args(argv)
    numbers = _read_ints(sys.stdin.read())
    if len(numbers) < 6:
        parser.error("expected three pairs of integer coordinates")
    vertices = list(zip(numbers[0:6:2], numbers[1:6:2]))
    print(classify_triangle(vertices))
    return 0


def stddev_main(argv: Optional[list[str]] = None) -> int:
    """Read integers up to a terminating 0 and print their standard deviation."""
    parser = argparse.ArgumentParser(prog="stddev", description="Standard deviation.")
    parser.parse_args(argv)
    values: list[int] = []
    for number in _read_ints(sys.stdin.read()):
        if number == 0:
            break
        values.append(number)
    if not values:
        return 0
    sys.stdout.write(f"{standard_deviation(values):f}")
    return 0


if __name__ == "__main__":
    sys.exit(triangle_main())