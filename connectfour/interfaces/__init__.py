"""
connectfour.interfaces - Presentation layer for Connect Four

This package contains the text renderer and the command-line client.
They only talk to the engine through ConnectFourGame's public methods.
"""

# Don't import anything here to avoid circular imports
__all__ = []
