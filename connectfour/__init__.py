"""
connectfour - Rules engine for the Connect Four disk-drop game

This package provides the board representation, move validation,
win detection and turn sequencing for a two-player game, together with
a Gymnasium environment adapter and a small text client.
"""

# Version number
__version__ = '0.1.0'
