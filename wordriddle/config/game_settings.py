"""
Game Configuration Constants Module

Game rule constants and word list helpers. The word lists
themselves are loaded at runtime by the word source services; this module
only knows where the bundled copies live and how to summarize them.
"""

import os
from typing import Dict, Final, Iterable

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per session.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

GAME_TITLE: Final[str] = "Word Riddle"
GAME_SUBTITLE: Final[str] = "Guess the 5-letter word"

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

# Bundled word lists (JSON arrays of words)
QUESTION_WORDS_PATH: Final[str] = os.path.join(_CONFIG_DIR, 'question_words.json')
ANSWER_WORDS_PATH: Final[str] = os.path.join(_CONFIG_DIR, 'answer_words.json')


def is_well_formed_word(word: str) -> bool:
    """True if `word` is exactly WORD_LENGTH letters from ALPHABET."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all(char in ALPHABET for char in word)
    )


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: The five most frequent letters
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
