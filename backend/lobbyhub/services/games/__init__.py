"""Game rule engines hosted by lobbies.

Each engine implements the ``GameSession`` capabilities and knows nothing
about lobbies beyond the id it broadcasts to.
"""
from .base import GameSession, SessionFactory
from .tictactoe import TicTacToeSession

GAME_TYPES = {
    'tictactoe': TicTacToeSession,
}

__all__ = ['GAME_TYPES', 'GameSession', 'SessionFactory', 'TicTacToeSession']
