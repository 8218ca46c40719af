import io
import math

import pytest

from dslab.basics import (
    classify_triangle,
    sorted_line_numbers,
    standard_deviation,
    stddev_main,
    triangle_main,
)


def test_scalene():
    assert classify_triangle([(0, 0), (4, 0), (0, 3)]) == "Scalene"


def test_isosceles_each_position():
    base = [(0, 0), (2, 0), (1, 5)]
    for shift in range(3):
        rotated = base[shift:] + base[:shift]
        assert classify_triangle(rotated) == "Isosceles"


def test_equilateral_degenerate_points():
    assert classify_triangle([(1, 1), (1, 1), (1, 1)]) == "Equilateral"


def test_triangle_wrong_vertex_count():
    with pytest.raises(ValueError):
        classify_triangle([(0, 0), (1, 1)])


def test_stddev_constant_is_zero():
    assert standard_deviation([5, 5, 5, 5]) == 0.0


def test_stddev_shift_and_scale():
    data = [1, 3, 4, 10]
    base = standard_deviation(data)
    assert math.isclose(standard_deviation([x + 7 for x in data]), base)
    assert math.isclose(standard_deviation([3 * x for x in data]), 3 * base)


def test_stddev_empty():
    with pytest.raises(ValueError):
        standard_deviation([])


def test_sorted_line_numbers_orders_text():
    lines = ["pear\n", "apple\n", "fig\n", "banana\n", "kiwi\n", "cherry\n"]
    order = sorted_line_numbers(lines)
    assert sorted(order) == list(range(1, 7))
    texts = [lines[n - 1] for n in order]
    assert texts == sorted(lines)


def test_sorted_line_numbers_empty():
    assert sorted_line_numbers([]) == []


def test_triangle_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n4 0\n0 3\n"))
    assert triangle_main([]) == 0
    assert capsys.readouterr().out == "Scalene\n"


def test_triangle_main_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n4 0\n"))
    with pytest.raises(SystemExit):
        triangle_main([])


def test_stddev_main_stops_at_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 4 4 0 100"))
    assert stddev_main([]) == 0
    assert capsys.readouterr().out == "0.000000"


def test_stddev_main_no_values(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0"))
    assert stddev_main([]) == 0
    assert capsys.readouterr().out == ""