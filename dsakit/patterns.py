"""Text patterns built from stars and numbers, returned as lists of lines."""

from __future__ import annotations


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")


def butterfly(n: int) -> list[str]:
    """Butterfly of stars, ``2 * n`` lines, symmetric in both directions."""
    _check_size(n)
    rows = list(range(1, n + 1)) + list(range(n, 0, -1))
    return ["*" * i + " " * (2 * (n - i)) + "*" * i for i in rows]


def floyds_triangle(n: int) -> list[str]:
    """Floyd's triangle: consecutive numbers from 1, row ``i`` holding ``i`` of them."""
    _check_size(n)
    lines: list[str] = []
    start = 1
    for i in range(1, n + 1):
        lines.append("".join(f"{num} " for num in range(start, start + i)))
        start += i
    return lines


def hollow_diamond(n: int) -> list[str]:
    """Outline of a diamond of stars, ``2 * n - 1`` lines tall."""
    _check_size(n)

    def line(i: int) -> str:
        edge = " " * (n - i) + "*"
        return edge + (" " * (2 * i - 3) + "*" if i > 1 else "")

    rows = list(range(1, n + 1)) + list(range(n - 1, 0, -1))
    return [line(i) for i in rows]


def number_pyramid(n: int) -> list[str]:
    """Row ``i`` counts from 1 up to ``i``."""
    _check_size(n)
    return ["".join(f"{j} " for j in range(1, i + 1)) for i in range(1, n + 1)]


def palindromic_pyramid(n: int) -> list[str]:
    """Centred rows that count down to 1 and back up, e.g. ``32123``."""
    _check_size(n)
    lines: list[str] = []
    for i in range(1, n + 1):
        down = "".join(str(j) for j in range(i, 0, -1))
        up = "".join(str(j) for j in range(2, i + 1))
        lines.append(" " * (n - i) + down + up)
    return lines


def pascal_rows(n: int) -> list[list[int]]:
    """The first ``n`` rows of Pascal's triangle as lists of integers."""
    _check_size(n)
    rows: list[list[int]] = []
    for i in range(n):
        row: list[int] = []
        val = 1
        for j in range(i + 1):
            row.append(val)
            val = val * (i - j) // (j + 1)
        rows.append(row)
    return rows


def pascals_triangle(n: int) -> list[str]:
    """Pascal's triangle as text, each number followed by a space."""
    return ["".join(f"{val} " for val in row) for row in pascal_rows(n)]


def right_triangle(n: int) -> list[str]:
    """Left-aligned triangle whose row ``i`` has ``i`` stars."""
    _check_size(n)
    return ["* " * i for i in range(1, n + 1)]


def solid_square(n: int) -> list[str]:
    """An ``n`` by ``n`` square of stars."""
    _check_size(n)
    return ["* " * n for _ in range(n)]


def star_pyramid(n: int) -> list[str]:
    """Centred pyramid whose row ``i`` has ``2 * i - 1`` stars."""
    _check_size(n)
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def zigzag(rows: int = 3, width: int = 9) -> list[str]:
    """A zig-zag line of stars bouncing between the top and bottom rows."""
    if rows < 1:
        raise ValueError(f"rows must be at least 1, got {rows}")
    if width < 0:
        raise ValueError(f"width must not be negative, got {width}")
    if rows == 1:
        return ["*" * width]
    period = 2 * (rows - 1)
    lines: list[str] = []
    for row in range(rows):
        chars = []
        for col in range(width):
            phase = col % period
            chars.append("*" if phase in (row, period - row) else " ")
        lines.append("".join(chars))
    return lines