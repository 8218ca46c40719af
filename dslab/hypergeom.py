"""Upper-tail p-values of the hypergeometric distribution, three ways.

Every p-value function answers the same question: when draws items are
taken without replacement from a population holding successes marked
items, what is the probability of seeing at least threshold marked ones?
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from fractions import Fraction
from functools import lru_cache
from typing import Optional


@lru_cache(maxsize=None)
def binomial(n: int, k: int) -> int:
    """Return n choose k; zero when k exceeds n."""
    if n < 0 or k < 0:
        raise ValueError("binomial arguments must not be negative")
    return math.comb(n, k)


def _validate(threshold: int, draws: int, successes: int, population: int) -> None:
    if threshold < 0:
        raise ValueError("threshold must not be negative")
    if not 0 <= successes <= population:
        raise ValueError("successes must lie between 0 and the population size")
    if not 0 <= draws <= population:
        raise ValueError("draws must lie between 0 and the population size")


def p_value_recurrence(n: int, big_n: int, e: int, big_e: int) -> float:
    """P(X >= n) for N draws from E items of which e are marked.

    Starts from the smallest possible count and walks the ratio
    P(X=i+1)/P(X=i) = (e-i)(N-i) / ((i+1)(E-e-N+i+1)), then subtracts
    the lower tail from one.
    """
    _validate(n, big_n, e, big_e)
    unmarked = big_e - e
    p_value = 1.0
    if unmarked >= big_n:
        for i in range(big_n):
            if unmarked > i:
                p_value = p_value * (unmarked - i) / (big_e - i)
    else:
        lowest = big_n - unmarked
        for i in range(big_n):
            if i < lowest:
                p_value = p_value * ((e - i) * (big_n - i)) / ((lowest - i) * (big_e - i))
            else:
                p_value = p_value * (big_n - i) / (big_e - i)

    term = p_value
    offset = unmarked - big_n + 1
    for i in range(n - 1):
        if offset + i > 0 and e > i and big_n > i:
            term = term * ((e - i) * (big_n - i)) / ((i + 1) * (offset + i))
            p_value += term
    return 1.0 - p_value


def p_value_factorial(n: int, big_n: int, e: int, big_e: int) -> float:
    """P(X >= n) summed term by term from exact binomial coefficients."""
    _validate(n, big_n, e, big_e)
    total = sum(
        binomial(e, i) * binomial(big_e - e, big_n - i) for i in range(n, big_n + 1)
    )
    return float(Fraction(total, binomial(big_e, big_n)))


def p_value_binomial(k: int, n: int, m: int, big_n: int) -> float:
    """P(X >= k) for n draws from N items of which m are marked.

    Sums whichever tail has fewer terms, using cached binomial coefficients.
    """
    _validate(k, n, m, big_n)
    total_ways = binomial(big_n, n)

    def tail(counts: range) -> int:
        acc = 0
        for i in counts:
            if i > m:
                break
            if n - i <= big_n - m:
                acc += binomial(m, i) * binomial(big_n - m, n - i)
        return acc

    if n - k + 1 < k:
        return tail(range(k, n + 1)) / total_ways
    return 1.0 - tail(range(0, k)) / total_ways


_METHODS = {
    "recurrence": p_value_recurrence,
    "factorial": p_value_factorial,
    "binomial": p_value_binomial,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Read 'threshold draws successes population' and print the p-value."""
    parser = argparse.ArgumentParser(prog="hypergeom", description="Hypergeometric p-value.")
    parser.add_argument(
        "--method", choices=sorted(_METHODS), default="recurrence", help="computation to use"
    )
    args = parser.parse_args(argv)
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("inputs must be integers")
    if len(numbers) < 4:
        parser.error("expected four integers: threshold draws successes population")
    start = time.perf_counter()
    try:
        p_value = _METHODS[args.method](*numbers[:4])
    except ValueError as exc:
        parser.error(str(exc))
    elapsed = int((time.perf_counter() - start) * 1_000_000)
    sys.stdout.write(f"p-value = {p_value:f} ({elapsed} microseconds)")
    return 0


if __name__ == "__main__":
    sys.exit(main())