"""
Error Types

Exceptions raised by collaborators (word sources, statistics stores). The game
session itself never raises for bad input; it reports a GuessRejection instead.
"""


class WordRiddleError(Exception):
    """Base class for all word riddle errors."""


class WordSourceError(WordRiddleError):
    """A word list could not be fetched or parsed."""


class PersistenceError(WordRiddleError):
    """Statistics could not be loaded or saved."""
