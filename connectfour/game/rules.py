"""
rules.py - Turn sequencing for Connect Four

This module provides ConnectFourGame, which runs one game between two
players on a Board, and the PlayResult it hands back for every move.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from connectfour.debug import debug
from connectfour.utils import (ROWS, PlayerSlot, GameResult, MoveStatus,
                               RejectReason, is_valid_column)
from connectfour.game.board import Board, Cell, Coord
from connectfour.game.player import Player


@dataclass(frozen=True)
class PlayResult:
    """
    What happened when a column was played.

    Attributes:
        status: ACCEPTED, GAME_OVER or REJECTED
        column: The column that was requested
        row: Row the disk landed in, None when rejected
        winner: The winning player when the move ended the game with a win
        reason: Why the move was rejected, None otherwise
    """
    status: MoveStatus
    column: Any
    row: Optional[int] = None
    winner: Optional[Player] = None
    reason: Optional[RejectReason] = None

    @property
    def accepted(self) -> bool:
        """True if a disk was placed."""
        return self.status != MoveStatus.REJECTED

    @property
    def game_over(self) -> bool:
        return self.status == MoveStatus.GAME_OVER

    @property
    def is_tie(self) -> bool:
        return self.game_over and self.winner is None


class ConnectFourGame:
    """
    Manages the flow of a two-player Connect Four game.

    Player one always moves first. Each accepted move that does not end
    the game hands the turn to the other player; once a player connects
    four or the board fills up, no further moves are accepted until
    ``start_game`` is called again.
    """

    def __init__(self, player_one: Player, player_two: Player):
        """
        Initialize a new game with two players and an empty board.

        Args:
            player_one: The player who takes the first turn
            player_two: The player who moves after player_one
        """
        debug.debug(f"Initializing ConnectFourGame: {player_one} vs {player_two}", "game")
        self.board = Board()
        self.players: Dict[PlayerSlot, Player] = {
            PlayerSlot.ONE: player_one,
            PlayerSlot.TWO: player_two,
        }
        self.current_slot = PlayerSlot.ONE
        self.winner_slot: Optional[PlayerSlot] = None
        self.game_over = False
        self.moves: List[int] = []

    def start_game(self) -> None:
        """Empty the board and give the first turn to player one."""
        debug.debug("Starting game", "game")
        self.board.reset()
        self.current_slot = PlayerSlot.ONE
        self.winner_slot = None
        self.game_over = False
        self.moves = []

    def play(self, column) -> PlayResult:
        """
        Drop the current player's disk into a column.

        Args:
            column: Column to play (0-indexed)

        Returns:
            A PlayResult. A rejected move leaves the board and the turn
            untouched.
        """
        if self.game_over:
            debug.debug(f"Rejected column {column}: game is over", "game")
            return PlayResult(MoveStatus.REJECTED, column, reason=RejectReason.GAME_OVER)

        mover = self.current_slot
        player = self.players[mover]

        if not self.board.can_drop(column):
            if is_valid_column(column):
                reason = RejectReason.COLUMN_FULL
            else:
                reason = RejectReason.COLUMN_OUT_OF_RANGE
            debug.debug(f"Rejected column {column}: {reason.name}", "game")
            return PlayResult(MoveStatus.REJECTED, column, reason=reason)

        self.board.drop_disk(player.color, column)
        column = int(column)
        row = ROWS - self.board.column_fill_count(column)
        self.moves.append(column)
        debug.debug(f"{player.name} dropped {player.color} at ({row}, {column})", "game")

        # Win is checked before fullness: a last disk that completes four wins
        if self.board.has_connected_four(player.color):
            self.game_over = True
            self.winner_slot = mover
            debug.info(f"{player.name} wins after {len(self.moves)} moves", "game")
            return PlayResult(MoveStatus.GAME_OVER, column, row=row, winner=player)

        if self.board.is_full():
            self.game_over = True
            self.winner_slot = None
            debug.info("Game ends in a tie", "game")
            return PlayResult(MoveStatus.GAME_OVER, column, row=row)

        self.current_slot = mover.other()
        return PlayResult(MoveStatus.ACCEPTED, column, row=row)

    def check_game_over(self) -> bool:
        """True once the game has been won or the board is full."""
        return self.get_result().is_game_over()

    def is_tie(self) -> bool:
        return self.game_over and self.winner_slot is None

    def get_result(self) -> GameResult:
        if not self.game_over:
            return GameResult.IN_PROGRESS
        if self.winner_slot == PlayerSlot.ONE:
            return GameResult.PLAYER_ONE_WIN
        if self.winner_slot == PlayerSlot.TWO:
            return GameResult.PLAYER_TWO_WIN
        return GameResult.DRAW

    def get_player(self, slot: PlayerSlot) -> Player:
        return self.players[slot]

    def get_current_slot(self) -> PlayerSlot:
        return self.current_slot

    def get_current_player(self) -> Player:
        """
        Get the player whose turn it is.

        After the game ends this is the player who made the final move.
        """
        return self.players[self.current_slot]

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None while the game is running or after a tie
        """
        if self.winner_slot is None:
            return None
        return self.players[self.winner_slot]

    def get_board_snapshot(self) -> List[List[Cell]]:
        """Independent copy of the grid, top row first."""
        return self.board.get_grid()

    def get_valid_moves(self) -> List[int]:
        if self.game_over:
            return []
        return self.board.valid_columns()

    def get_winning_line(self) -> List[Coord]:
        """Positions of the winning four, or an empty list if nobody has won."""
        winner = self.get_winner()
        if winner is None:
            return []
        return self.board.find_connected_four(winner.color)
