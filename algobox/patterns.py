"""Text patterns made of stars and numbers, returned as lists of lines."""

from __future__ import annotations


def heart() -> list[str]:
    """Return the lines of a heart drawn with stars."""
    upper = [
        " " * (2 - row)
        + "*" * (2 * row + 5)
        + " " * (5 - 2 * row)
        + "*" * (2 * row + 5)
        for row in range(3)
    ]
    lower = [" " * row + "*" * (19 - 2 * row) for row in range(10)]
    return upper + lower


def left_triangle() -> list[str]:
    """Return nine left-aligned lines of one to nine stars."""
    return ["*" * width for width in range(1, 10)]


def right_triangle() -> list[str]:
    """Return nine right-aligned lines of one to nine stars."""
    return [" " * (9 - width) + "*" * width for width in range(1, 10)]


def full_pyramid(rows: int) -> list[str]:
    """Return a centred pyramid of ``rows`` lines of spaced stars."""
    return [
        "  " * (rows - row) + "* " * (2 * row - 1) for row in range(1, rows + 1)
    ]


def inverted_left_triangle(rows: int) -> list[str]:
    """Return ``rows`` lines of spaced stars, longest first."""
    return ["* " * width for width in range(rows, 0, -1)]


def number_pyramid(rows: int) -> list[str]:
    """Return a centred pyramid whose row ``i`` counts up from ``i`` and back."""
    lines = []
    for row in range(1, rows + 1):
        values = [*range(row, 2 * row), *range(2 * row - 2, row - 1, -1)]
        lines.append("  " * (rows - row) + "".join(f"{value} " for value in values))
    return lines