"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which owns the grid of color markers
and the per-column fill counts, applies disk drops and evaluates whether a
color has four connected disks.
"""

import numpy as np
from typing import List, Optional, Tuple

from connectfour.debug import debug
from connectfour.utils import (ROWS, COLS, CONNECT_N, DIRECTION_VECTORS,
                               InvalidColumnError, is_valid_column, is_valid_position)

Cell = Optional[str]
Coord = Tuple[int, int]


class Board:
    """
    Represents a Connect Four game board.

    The grid holds ``None`` for an empty cell or the color marker of the
    disk occupying it. For every column ``c`` exactly the bottom
    ``column_counts[c]`` cells are occupied.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.trace("Initializing new Board", "board")
        self.reset()

    def reset(self) -> None:
        """Reset the board to an empty state."""
        debug.debug("Resetting board", "board")
        self.grid = np.full((ROWS, COLS), None, dtype=object)
        self.column_counts = np.zeros(COLS, dtype=int)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board.column_counts = self.column_counts.copy()
        return new_board

    def get_grid(self) -> List[List[Cell]]:
        """
        Get a copy of the grid for rendering.

        Returns:
            ROWS lists of COLS cells, top row first
        """
        return self.grid.tolist()

    def get_cell(self, row: int, col: int) -> Cell:
        """Marker at (row, col), or None if the cell is empty."""
        if not is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is outside the board")
        return self.grid[row, col]

    def column_fill_count(self, column: int) -> int:
        """
        Number of disks in a column.

        Raises:
            InvalidColumnError: if the column is outside the board
        """
        if not is_valid_column(column):
            raise InvalidColumnError(column)
        return int(self.column_counts[column])

    def is_column_full(self, column: int) -> bool:
        """
        Check if no more disks fit in a column.

        Raises:
            InvalidColumnError: if the column is outside the board
        """
        return self.column_fill_count(column) == ROWS

    def can_drop(self, column) -> bool:
        """True if a disk dropped into ``column`` would be accepted."""
        return is_valid_column(column) and not self.is_column_full(column)

    def valid_columns(self) -> List[int]:
        """
        Get the columns that still have room.

        Returns:
            List of valid column indices
        """
        return [col for col in range(COLS) if self.column_counts[col] < ROWS]

    def disk_count(self) -> int:
        """Total number of disks on the board."""
        return int(self.column_counts.sum())

    def drop_disk(self, color: str, column) -> bool:
        """
        Drop a disk of the given color into a column.

        Args:
            color: Color marker of the disk
            column: The column to drop into (0-indexed)

        Returns:
            True if the disk was placed, False if the column is out of
            range or already full. Nothing changes on rejection.
        """
        if not color:
            raise ValueError("A disk needs a color marker")

        if not is_valid_column(column):
            debug.debug(f"Rejected drop: column {column} out of bounds", "board")
            return False

        if self.column_counts[column] == ROWS:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            return False

        self.column_counts[column] += 1
        row = ROWS - int(self.column_counts[column])
        self.grid[row, column] = color
        debug.trace(f"Placed {color} at ({row}, {column})", "board")
        return True

    def find_connected_four(self, color: str) -> List[Coord]:
        """
        Find a line of CONNECT_N disks of the given color.

        Every cell holding ``color`` is treated as the last disk of a run
        and the scan looks back from it along each direction.

        Args:
            color: Color marker to look for

        Returns:
            Positions of the first run found, or an empty list
        """
        debug.start_timer("win_check")
        try:
            for row in range(ROWS):
                for col in range(COLS):
                    if self.grid[row, col] != color:
                        continue
                    for dr, dc in DIRECTION_VECTORS:
                        line = [(row, col)]
                        for k in range(1, CONNECT_N):
                            r, c = row - k * dr, col - k * dc
                            if not is_valid_position(r, c) or self.grid[r, c] != color:
                                break
                            line.append((r, c))
                        if len(line) == CONNECT_N:
                            return line[::-1]
            return []
        finally:
            debug.end_timer("win_check", "board")

    def has_connected_four(self, color: str) -> bool:
        """
        Check whether the given color has four disks in a row.

        The line can be vertical, horizontal or diagonal.
        """
        return bool(self.find_connected_four(color))

    def is_full(self) -> bool:
        """Check if every column is full."""
        return bool(np.all(self.column_counts == ROWS))
