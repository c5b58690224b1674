"""
renderer.py - Plain text rendering of a Connect Four grid
"""

from typing import Iterable, Optional, Sequence

EMPTY_SYMBOL = "-"


def cell_symbol(cell: Optional[str]) -> str:
    """'-' for an empty cell, otherwise the first letter of the marker."""
    if cell is None:
        return EMPTY_SYMBOL
    return cell[0]


def render_board_text(grid: Sequence[Iterable[Optional[str]]]) -> str:
    """
    Render a grid snapshot as text.

    The first line holds the 1-indexed column numbers players type in,
    followed by one line per board row, top row first.

    Args:
        grid: Rows of cells as returned by ``get_board_snapshot``

    Returns:
        The rendered board, without a trailing newline
    """
    rows = list(grid)
    width = len(rows[0]) if rows else 0

    lines = ["".join(f" {i + 1} " for i in range(width))]
    for row in rows:
        lines.append("".join(f" {cell_symbol(cell)} " for cell in row))
    return "\n".join(lines)
