import random
from collections import Counter

import pytest

from dslab.randomtree import TreeNode, arity_string, format_tree, generate_random_tree, main


def child_refs(nodes):
    return [c for node in nodes for c in (node.left, node.right) if c is not None]


@pytest.mark.parametrize("count", [1, 2, 5, 50, 300])
def test_generated_tree_is_a_tree(count):
    nodes = generate_random_tree(count, random.Random(count))
    assert len(nodes) == count
    refs = child_refs(nodes)
    assert Counter(refs) == Counter(range(1, count))


@pytest.mark.parametrize("seed", range(5))
def test_preorder_layout(seed):
    nodes = generate_random_tree(40, random.Random(seed))
    for index, node in enumerate(nodes):
        if node.left is not None:
            assert node.left == index + 1
        if node.right is not None:
            assert node.right > index


def test_values_in_range_and_deterministic():
    first = generate_random_tree(30, random.Random(11))
    second = generate_random_tree(30, random.Random(11))
    assert first == second
    assert all(0 <= node.value < 2**31 for node in first)


def test_empty_and_negative():
    assert generate_random_tree(0, random.Random(1)) == []
    with pytest.raises(ValueError):
        generate_random_tree(-1)


def test_arity_string_handbuilt():
    nodes = [TreeNode(1, 1, 2), TreeNode(2), TreeNode(3)]
    assert arity_string(nodes) == "200"


def test_arity_string_invariants():
    nodes = generate_random_tree(60, random.Random(4))
    text = arity_string(nodes)
    assert len(text) == 60
    assert sum(int(d) for d in text) == 59
    assert text.endswith("0")


def test_arity_string_empty():
    assert arity_string([]) == ""


def test_format_tree_plain():
    nodes = [TreeNode(7, 1, None), TreeNode(9)]
    assert format_tree(nodes) == "2\n7 1 -1\n9 -1 -1\n"


def test_format_tree_linenum():
    nodes = [TreeNode(7, 1, 2), TreeNode(9), TreeNode(4)]
    lines = format_tree(nodes, linenum=True).splitlines()
    assert lines[1] == "7 3 4"
    assert lines[2] == "9 -1 -1"


def test_main_prints_table(capsys):
    assert main(["8", "--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert out.endswith("\n\n")
    lines = out.splitlines()
    assert lines[0] == "8"
    assert len([line for line in lines[1:] if line]) == 8


def test_main_rejects_bad_argument():
    with pytest.raises(SystemExit):
        main(["abc"])