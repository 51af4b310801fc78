"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .errors import WordRiddleError, WordSourceError, PersistenceError
from .game import (
    Attempt, Feedback, GameOutcome, GameState, GuessRejection, GuessResult,
    LetterStatus, ShareCard
)
from .statistics import Statistics

__all__ = [
    'Attempt', 'Feedback', 'GameOutcome', 'GameState', 'GuessRejection', 'GuessResult',
    'LetterStatus', 'ShareCard', 'Statistics',
    'WordRiddleError', 'WordSourceError', 'PersistenceError'
]
