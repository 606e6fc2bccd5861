import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.patterns import (
    butterfly,
    floyds_triangle,
    hollow_diamond,
    number_pyramid,
    palindromic_pyramid,
    pascal_rows,
    pascals_triangle,
    right_triangle,
    solid_square,
    star_pyramid,
    zigzag,
)

sizes = st.integers(min_value=0, max_value=12)


def test_pascal_rows_first_five():
    assert pascal_rows(5) == [
        [1],
        [1, 1],
        [1, 2, 1],
        [1, 3, 3, 1],
        [1, 4, 6, 4, 1],
    ]


def test_zigzag_default_shape():
    assert zigzag() == [
        "*   *   *",
        " * * * * ",
        "  *   *  ",
    ]


def test_hollow_diamond_four():
    assert hollow_diamond(4) == [
        "   *",
        "  * *",
        " *   *",
        "*     *",
        " *   *",
        "  * *",
        "   *",
    ]


@given(sizes)
def test_butterfly_symmetry(n):
    lines = butterfly(n)
    assert len(lines) == 2 * n
    assert lines == lines[::-1]
    assert all(line == line[::-1] for line in lines)
    assert all(len(line) == 2 * n for line in lines)


@given(sizes)
def test_floyds_triangle_counts_consecutively(n):
    lines = floyds_triangle(n)
    numbers = [int(tok) for line in lines for tok in line.split()]
    assert numbers == list(range(1, len(numbers) + 1))
    assert [len(line.split()) for line in lines] == list(range(1, n + 1))


@given(st.integers(min_value=1, max_value=12))
def test_hollow_diamond_outline(n):
    lines = hollow_diamond(n)
    assert len(lines) == 2 * n - 1
    assert lines == lines[::-1]
    assert all(line.count("*") in (1, 2) for line in lines)
    assert lines[0].count("*") == 1


@given(sizes)
def test_number_pyramid_rows(n):
    lines = number_pyramid(n)
    assert [line.split() for line in lines] == [
        [str(j) for j in range(1, i + 1)] for i in range(1, n + 1)
    ]


@given(st.integers(min_value=1, max_value=9))
def test_palindromic_pyramid_rows_are_palindromes(n):
    lines = palindromic_pyramid(n)
    assert len(lines) == n
    for i, line in enumerate(lines, start=1):
        digits = line.strip()
        assert digits == digits[::-1]
        assert len(digits) == 2 * i - 1
        assert len(line) == n + i - 1


@given(sizes)
def test_pascal_rows_sum_to_powers_of_two(n):
    rows = pascal_rows(n)
    assert [sum(row) for row in rows] == [2**i for i in range(n)]
    assert all(row == row[::-1] for row in rows)


@given(sizes)
def test_pascals_triangle_text_matches_rows(n):
    text = pascals_triangle(n)
    assert [[int(tok) for tok in line.split()] for line in text] == pascal_rows(n)


@given(sizes)
def test_right_triangle_star_counts(n):
    lines = right_triangle(n)
    assert [line.count("*") for line in lines] == list(range(1, n + 1))


@given(sizes)
def test_solid_square_dimensions(n):
    lines = solid_square(n)
    assert len(lines) == n
    assert all(line.count("*") == n for line in lines)


@given(sizes)
def test_star_pyramid_centred(n):
    lines = star_pyramid(n)
    assert [line.count("*") for line in lines] == [2 * i - 1 for i in range(1, n + 1)]
    assert all(len(line) == n + i - 1 for i, line in enumerate(lines, start=1))


@given(st.integers(min_value=2, max_value=6), st.integers(min_value=0, max_value=30))
def test_zigzag_one_star_per_column(rows, width):
    lines = zigzag(rows, width)
    assert len(lines) == rows
    assert all(len(line) == width for line in lines)
    for col in range(width):
        assert sum(line[col] == "*" for line in lines) == 1


def test_zigzag_single_row_is_solid():
    assert zigzag(1, 5) == ["*****"]


def test_zero_size_is_empty():
    assert butterfly(0) == []
    assert pascal_rows(0) == []
    assert star_pyramid(0) == []


@pytest.mark.parametrize(
    "func",
    [
        butterfly,
        floyds_triangle,
        hollow_diamond,
        number_pyramid,
        palindromic_pyramid,
        pascal_rows,
        pascals_triangle,
        right_triangle,
        solid_square,
        star_pyramid,
    ],
)
def test_negative_size_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


def test_zigzag_rejects_bad_arguments():
    with pytest.raises(ValueError):
        zigzag(0, 5)
    with pytest.raises(ValueError):
        zigzag(3, -1)