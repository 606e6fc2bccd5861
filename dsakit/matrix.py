"""Operations on matrices held as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_rectangular(matrix: Matrix) -> None:
    if matrix and any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("matrix rows must all have the same length")


def transpose(matrix: Matrix) -> list[list[int]]:
    """Swap rows and columns."""
    _check_rectangular(matrix)
    return [list(column) for column in zip(*matrix)]


def rotate_clockwise(matrix: Matrix) -> list[list[int]]:
    """Rotate a square matrix a quarter turn clockwise."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("only square matrices can be rotated")
    return [row[::-1] for row in transpose(matrix)]


def saddle_point(matrix: Matrix) -> int | None:
    """First value that is smallest in its row and largest in its column, or None."""
    _check_rectangular(matrix)
    for row in matrix:
        if not row:
            continue
        col = min(range(len(row)), key=row.__getitem__)
        smallest = row[col]
        if all(other[col] <= smallest for other in matrix):
            return smallest
    return None


def to_sparse(matrix: Matrix) -> list[tuple[int, int, int]]:
    """Triplet form: a (rows, cols, count) header, then (row, col, value) per non-zero."""
    _check_rectangular(matrix)
    entries = [
        (i, j, value)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != 0
    ]
    cols = len(matrix[0]) if matrix else 0
    return [(len(matrix), cols, len(entries)), *entries]


def spiral_order(matrix: Matrix) -> list[int]:
    """Elements read clockwise from the outer layer inwards."""
    _check_rectangular(matrix)
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result