"""Generate random binary tree shapes stored as arrays in preorder."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node with a value and the array indices of its children."""

    value: int
    left: Optional[int] = None
    right: Optional[int] = None


def generate_random_tree(count: int, rng: Optional[random.Random] = None) -> list[TreeNode]:
    """Return count nodes of a random tree laid out in preorder.

    Each node picks a random size for its left subtree; the rest go right.
    The left child immediately follows its parent in the array.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return []
    rng = rng or random.Random()
    nodes: list[Optional[TreeNode]] = [None] * count
    stack = [(0, count)]
    while stack:
        start, size = stack.pop()
        left_size = rng.randrange(size)
        right_size = size - left_size - 1
        node = TreeNode(rng.getrandbits(31))
        nodes[start] = node
        if right_size > 0:
            node.right = start + left_size + 1
            stack.append((node.right, right_size))
        if left_size > 0:
            node.left = start + 1
            stack.append((node.left, left_size))
    return [node for node in nodes if node is not None]


def arity_string(nodes: list[TreeNode]) -> str:
    """Return the preorder sequence of child counts, starting at node 0."""
    if not nodes:
        return ""
    digits: list[str] = []
    stack = [0]
    while stack:
        node = nodes[stack.pop()]
        children = [c for c in (node.left, node.right) if c is not None]
        digits.append(str(len(children)))
        stack.extend(reversed(children))
    return "".join(digits)


def format_tree(nodes: list[TreeNode], linenum: bool = False) -> str:
    """Return the node count and one 'value left right' line per node.

    Missing children are -1; with linenum, positive indices are shifted by two.
    """

    def ref(child: Optional[int]) -> int:
        if child is None:
            return -1
        return child + 2 if linenum and child > 0 else child

    lines = [f"{len(nodes)}"]
    lines.extend(f"{node.value} {ref(node.left)} {ref(node.right)}" for node in nodes)
    return "\n".join(lines) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    """Print a random tree of the requested size."""
    parser = argparse.ArgumentParser(
        prog="generate-random-tree", description="Generate a random binary tree."
    )
    parser.add_argument("number", type=int, help="number of nodes")
    parser.add_argument("--linenum", action="store_true", help="shift child references by two")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.number < 0:
        parser.error("number of nodes must not be negative")

    nodes = generate_random_tree(args.number, random.Random(args.seed))
    sys.stdout.write(format_tree(nodes, args.linenum))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())