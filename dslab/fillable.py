"""An array supporting constant-time read, write and fill."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Optional


class FillableArray:
    """An integer array whose fill operation costs O(1).

    Every slot remembers the fill generation in which it was last written;
    a slot written before the latest fill reads as the fill value.
    Writing past the end grows the array, and the new slots read as the
    fill value until written.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._values = list(values)
        self._generation = 0
        self._stamps = [self._generation] * len(self._values)
        self._fill_value = 0

    @property
    def fill_value(self) -> int:
        """Value shown by slots not written since the latest fill."""
        return self._fill_value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return (self.read(index) for index in range(len(self._values)))

    def read(self, index: int) -> int:
        """Return the value at index."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")
        if self._stamps[index] == self._generation:
            return self._values[index]
        return self._fill_value

    def write(self, index: int, value: int) -> None:
        """Store value at index, growing the array if needed."""
        if index < 0:
            raise IndexError(f"index {index} out of range")
        if index >= len(self._values):
            missing = index + 1 - len(self._values)
            self._values.extend([0] * missing)
            self._stamps.extend([self._generation - 1] * missing)
        self._values[index] = value
        self._stamps[index] = self._generation

    def fill(self, value: int) -> None:
        """Make every slot read as value."""
        self._fill_value = value
        self._generation += 1


def _render(array: FillableArray) -> str:
    return "".join(f"{value} " for value in array)


def main(argv: Optional[list[str]] = None) -> int:
    """Run '+ index value', '= index' and '@ value' commands from standard input.

    The first line holds the initial values; any other line ends the session.
    """
    parser = argparse.ArgumentParser(prog="fillable", description="Fillable array.")
    parser.parse_args(argv)
    lines = iter(sys.stdin.readline, "")
    try:
        array = FillableArray(int(token) for token in next(lines, "").split())
    except ValueError:
        parser.error("initial values must be integers")
    for line in lines:
        command, arguments = line[:1], line[1:].split()
        try:
            numbers = [int(token) for token in arguments]
            if command == "+":
                index, value = numbers[:2]
                array.write(index, value)
                print(_render(array))
            elif command == "=":
                print(f"{array.read(numbers[0])} ")
            elif command == "@":
                array.fill(numbers[0])
                print(_render(array))
            else:
                break
        except (ValueError, IndexError) as exc:
            parser.error(f"bad command {line.strip()!r}: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())