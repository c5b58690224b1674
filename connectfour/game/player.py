"""
player.py - Player value type for Connect Four
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """
    A participant in the game.

    Attributes:
        name: Display name of the player
        color: Color marker written into the board for this player's disks
    """
    name: str
    color: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError(f"Player name must be a string, got {self.name!r}")
        if not isinstance(self.color, str) or not self.color:
            raise ValueError(f"Player color must be a non-empty string, got {self.color!r}")

    def __str__(self) -> str:
        return f"{self.name} ({self.color})"
