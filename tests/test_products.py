import io

import pytest

from dslab.products import compare_products, main

SWAPPED = {"L1": "L2", "L2": "L1", "L1 L2": "L1 L2"}


def test_equal_products():
    assert compare_products([2, 3], [3, 2]) == "L1 L2"


def test_first_larger():
    assert compare_products([2, 4], [3, 2]) == "L1"


def test_second_larger():
    assert compare_products([3, 2], [2, 4]) == "L2"


def test_different_lengths():
    assert compare_products([5], [2, 2]) == "L1"
    assert compare_products([1, 1, 1, 3], [4]) == "L2"


def test_huge_values_compared_exactly():
    assert compare_products([2**63, 2**63], [2**64 - 1, 2**62]) == "L1"
    assert compare_products([2**64 - 1] * 5, [2**64 - 1] * 5) == "L1 L2"


def test_zero_makes_product_smallest():
    assert compare_products([0, 2**60], [1]) == "L2"


@pytest.mark.parametrize(
    "list1,list2",
    [([2, 3], [3, 2]), ([7, 11], [5, 13]), ([2**40, 3], [2**41]), ([1], [1, 1, 2])],
)
def test_swapping_lists_swaps_result(list1, list2):
    assert compare_products(list2, list1) == SWAPPED[compare_products(list1, list2)]


@pytest.mark.parametrize(
    "list1,list2", [([-1], [2]), ([2], [2**64]), ([], [1]), ([1], [])]
)
def test_invalid_lists_raise(list1, list2):
    with pytest.raises(ValueError):
        compare_products(list1, list2)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n3 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "L1 L2\n"


def test_main_rejects_bad_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 x\n3\n"))
    with pytest.raises(SystemExit):
        main([])