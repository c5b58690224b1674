"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the player value type,
and the turn sequencing that makes up the rules engine.
"""

from connectfour.game.board import Board
from connectfour.game.player import Player
from connectfour.game.rules import ConnectFourGame, PlayResult

__all__ = ['Board', 'Player', 'ConnectFourGame', 'PlayResult']
