"""Conflict-serializability test for schedules of interleaved transactions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_ACCESS = ("read", "write")
_CONFLICTS = {("write", "read"), ("read", "write"), ("write", "write")}


@dataclass(frozen=True)
class Operation:
    """One step of a schedule: which transaction does what to which variable."""

    transaction: int
    command: str
    variable: str


def _parse_operation(text: str, transaction: int) -> Operation:
    text = text or "blank"
    head, _, rest = text.lstrip("(").partition("(")
    command = head.lower()
    if command not in _ACCESS:
        return Operation(transaction, command, "0")
    variable = rest.lstrip(")").partition(")")[0]
    if not variable:
        raise ValueError(f"missing variable in {text!r}")
    return Operation(transaction, command, variable)


def parse_transaction(text: str, transaction: int) -> list[tuple[int, Operation]]:
    """Parse a transaction file into (serial number, operation) pairs.

    The first line holds the number of operations; each following line
    holds a serial number and an operation such as 'read(A)' or 'commit'.
    """
    head, _, body = text.lstrip().partition("\n")
    if not head.split():
        raise ValueError("missing operation count")
    count = int(head.split()[0])
    if count < 0:
        raise ValueError("operation count must not be negative")
    lines = [line.strip() for line in body.splitlines() if line.strip()]
    if len(lines) < count:
        raise ValueError("fewer operations than declared")
    operations = []
    for line in lines[:count]:
        serial_text, *rest = line.split(None, 1)
        operation_text = rest[0].strip() if rest else ""
        operations.append((int(serial_text), _parse_operation(operation_text, transaction)))
    return operations


def build_schedule(texts: Sequence[str]) -> list[Operation]:
    """Merge transaction files into one schedule ordered by serial number.

    Transactions are numbered from 1 in the order the texts are given.
    """
    if not texts:
        raise ValueError("No files entered")
    parsed = [parse_transaction(text, number) for number, text in enumerate(texts, 1)]
    total = sum(len(operations) for operations in parsed)
    slots: dict[int, Operation] = {}
    for operations in parsed:
        for serial, operation in operations:
            if not 1 <= serial <= total:
                raise ValueError("Invalid Inputs")
            slots[serial] = operation
    missing = [serial for serial in range(1, total + 1) if serial not in slots]
    if missing:
        raise ValueError(f"no operation for serial number {missing[0]}")
    return [slots[serial] for serial in range(1, total + 1)]


def precedence_matrix(schedule: Sequence[Operation], count: int) -> list[list[int]]:
    """Adjacency matrix with a 1 where transaction i must precede j."""
    matrix = [[0] * count for _ in range(count)]
    for position, first in enumerate(schedule):
        if first.command not in _ACCESS:
            continue
        for second in schedule[position + 1 :]:
            if (
                first.transaction != second.transaction
                and first.variable == second.variable
                and (first.command, second.command) in _CONFLICTS
            ):
                matrix[first.transaction - 1][second.transaction - 1] = 1
    return matrix


def has_cycle(matrix: Sequence[Sequence[int]]) -> bool:
    """True if some power 2..n of the adjacency matrix has a nonzero diagonal."""
    adjacency = [[bool(cell) for cell in row] for row in matrix]
    columns = list(zip(*adjacency))
    power = adjacency
    for _ in range(2, len(adjacency) + 1):
        power = [[any(a and b for a, b in zip(row, col)) for col in columns] for row in power]
        if any(row[i] for i, row in enumerate(power)):
            return True
    return False


def is_conflict_serializable(texts: Sequence[str]) -> bool:
    """True if the schedule built from the transaction texts has no conflict cycle."""
    schedule = build_schedule(texts)
    return not has_cycle(precedence_matrix(schedule, len(texts)))


def main(argv: Optional[list[str]] = None) -> int:
    """Read transaction files named on the command line and test the schedule."""
    parser = argparse.ArgumentParser(
        prog="serializability", description="Conflict-serializability test."
    )
    parser.add_argument("files", nargs="*", help="one file per transaction")
    args = parser.parse_args(argv)
    if not args.files:
        print("error: No files entered")
        return 0
    try:
        texts = [Path(name).read_text() for name in args.files]
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        serializable = is_conflict_serializable(texts)
    except ValueError as exc:
        print(f"err: {exc}", file=sys.stderr)
        return 1
    print("Conflict Serializable" if serializable else "Not Conflict Serializable")
    return 0


if __name__ == "__main__":
    sys.exit(main())