"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameStateView, LetterState
from .stats import Stats

__all__ = ['GameState', 'GameStateView', 'LetterState', 'Stats']
