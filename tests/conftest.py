import pytest

from connectfour.debug import debug, DebugLevel
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame


@pytest.fixture(autouse=True)
def quiet_logging():
    debug.configure(level=DebugLevel.WARNING, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, components=[])


@pytest.fixture
def red() -> Player:
    return Player("Alice", "Red")


@pytest.fixture
def yellow() -> Player:
    return Player("Bob", "Yellow")


@pytest.fixture
def game(red, yellow) -> ConnectFourGame:
    game = ConnectFourGame(red, yellow)
    game.start_game()
    return game


def draw_color(row_from_bottom: int, col: int) -> str:
    """Color of each cell in a full board with no four in a row."""
    return "Red" if (row_from_bottom // 3 + col) % 2 == 0 else "Yellow"


# Alternating Red/Yellow drop order that fills the board into the
# draw_color pattern, Red moving first.
DRAW_SEQUENCE = (
    [0, 1, 0, 1, 0, 1, 1, 0, 1, 0, 1, 0]
    + [2, 3, 2, 3, 2, 3, 3, 2, 3, 2, 3, 2]
    + [4, 5, 4, 5, 4, 5, 6, 4, 6, 4, 6, 4, 5, 6, 5, 6, 5, 6]
)
