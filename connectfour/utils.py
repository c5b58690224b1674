"""
utils.py - Constants, enumerations and errors shared by the Connect Four engine

Board geometry lives here as module constants so every component (board,
game, environment, renderer) agrees on the same dimensions.
"""

from enum import Enum, auto
from numbers import Integral
from typing import Tuple

# Board geometry
ROWS = 6   # HEIGHT, row 0 is the top of the displayed board
COLS = 7   # WIDTH
CONNECT_N = 4  # Number of disks in a line needed to win

# Unit direction vectors (row, col) used by the connected-four scan.
# All eight are listed; the scan looks backward along each of them.
DIRECTION_VECTORS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (1, 0), (0, 1), (0, -1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


class InvalidColumnError(ValueError):
    """Raised when a column index outside [0, COLS) reaches a board query."""

    def __init__(self, column):
        super().__init__(f"Column {column} is outside the board (0-{COLS - 1})")
        self.column = column


class PlayerSlot(Enum):
    """The two seats at the table. Turns are tracked by slot, not by Player."""
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'PlayerSlot':
        """Get the other slot."""
        return PlayerSlot.TWO if self == PlayerSlot.ONE else PlayerSlot.ONE


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class MoveStatus(Enum):
    """Outcome of a single call to ConnectFourGame.play."""
    ACCEPTED = auto()    # Disk placed, game continues
    GAME_OVER = auto()   # Disk placed, game ended (win or tie)
    REJECTED = auto()    # Nothing changed


class RejectReason(Enum):
    """Why a move was rejected."""
    GAME_OVER = auto()
    COLUMN_OUT_OF_RANGE = auto()
    COLUMN_FULL = auto()


def is_valid_column(column) -> bool:
    """
    Check if a column index is within the board.

    Args:
        column: Column index (0-indexed)

    Returns:
        True if 0 <= column < COLS, False otherwise
    """
    if isinstance(column, bool) or not isinstance(column, Integral):
        return False
    return 0 <= column < COLS


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS
