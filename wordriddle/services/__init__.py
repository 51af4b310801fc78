"""
Services Package

Contains all business logic and service classes.
"""

from .evaluator import evaluate, is_solved, merge_letter_status
from .dictionary import DictionaryValidator
from .game_service import GameService, get_game_service, initialize_game_service
from .session import GameSession
from .statistics_store import StatisticsStore, InMemoryStatisticsStore, JsonFileStatisticsStore
from .word_source import (
    WordSource, FileWordSource, RemoteWordSource, WordBank, LoadStatus, select_random_word
)

__all__ = [
    'evaluate', 'is_solved', 'merge_letter_status',
    'DictionaryValidator',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'StatisticsStore', 'InMemoryStatisticsStore', 'JsonFileStatisticsStore',
    'WordSource', 'FileWordSource', 'RemoteWordSource', 'WordBank', 'LoadStatus', 'select_random_word'
]
