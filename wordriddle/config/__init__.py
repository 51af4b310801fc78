"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, MAX_ATTEMPTS, WORD_LENGTH, QUESTION_WORDS_PATH, ANSWER_WORDS_PATH,
    is_well_formed_word, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'MAX_ATTEMPTS', 'WORD_LENGTH', 'QUESTION_WORDS_PATH', 'ANSWER_WORDS_PATH',
    'is_well_formed_word', 'get_word_statistics'
]
