"""
cli.py - Text-based client for playing Connect Four in a terminal

The client reads both player names, then asks the current player for a
column (1-7) each turn, shows the board after every accepted move and
announces the winner or a tie at the end.
"""

from typing import Optional, Sequence

from connectfour.debug import debug
from connectfour.utils import COLS, RejectReason
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame
from connectfour.interfaces.renderer import render_board_text

DEFAULT_COLORS = ("Red", "Yellow")
QUIT_COMMANDS = {"q", "quit", "exit"}

REJECT_MESSAGES = {
    RejectReason.COLUMN_OUT_OF_RANGE: f"Invalid move! Column must be between 1 and {COLS}. Try again.",
    RejectReason.COLUMN_FULL: "Invalid move! That column is full. Try again.",
    RejectReason.GAME_OVER: "The game is already over.",
}


class TextClient:
    """Command-line client driving one ConnectFourGame through stdin/stdout."""

    def __init__(self, colors: Sequence[str] = DEFAULT_COLORS):
        if len(colors) != 2:
            raise ValueError("Exactly two colors are needed")
        self.colors = tuple(colors)
        self.game: Optional[ConnectFourGame] = None

    def read_players(self) -> Optional[Sequence[Player]]:
        """Ask for both names. Returns None if input ends first."""
        players = []
        for number, color in enumerate(self.colors, start=1):
            name = self._prompt(f"Enter Player {number}'s name:")
            if name is None:
                return None
            players.append(Player(name.strip() or f"Player {number}", color))
        return players

    def read_column(self, player: Player) -> Optional[int]:
        """
        Prompt the current player until they type a number or quit.

        Returns:
            0-indexed column, or None to quit
        """
        while True:
            raw = self._prompt(f"{player.name}'s turn! Enter column (1-{COLS}) to drop your disk:")
            if raw is None:
                return None

            text = raw.strip().lower()
            if text in QUIT_COMMANDS:
                return None

            try:
                return int(text) - 1
            except ValueError:
                print(f"Invalid input. Please enter a valid column number (1-{COLS}).")

    def play(self) -> int:
        """
        Run a full game.

        Returns:
            Exit status: 0 when the game finished, 1 if it was abandoned
        """
        players = self.read_players()
        if players is None:
            return 1

        self.game = ConnectFourGame(*players)
        self.game.start_game()
        debug.info(f"Game started: {players[0]} vs {players[1]}", "cli")

        print(f"Game started! {players[0].color} will go first.")
        self.show_board()

        while not self.game.check_game_over():
            column = self.read_column(self.game.get_current_player())
            if column is None:
                print("Game abandoned.")
                return 1

            result = self.game.play(column)
            if not result.accepted:
                print(REJECT_MESSAGES[result.reason])
                continue

            self.show_board()

        self.announce_result()
        return 0

    def show_board(self) -> None:
        print(render_board_text(self.game.get_board_snapshot()))
        print()

    def announce_result(self) -> None:
        winner = self.game.get_winner()
        if winner is not None:
            print(f"Congratulations, {winner.name}! You win!")
        else:
            print("It's a tie!")

    @staticmethod
    def _prompt(message: str) -> Optional[str]:
        print(message)
        try:
            return input()
        except EOFError:
            return None
