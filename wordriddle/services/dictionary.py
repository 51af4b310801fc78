"""
Dictionary Validator

Format and membership checks for submitted guesses.
"""

from ..config.game_settings import is_well_formed_word
from .word_source import WordBank


class DictionaryValidator:
    """Accepts any word from the question or answer pools of a loaded WordBank."""

    def __init__(self, word_bank: WordBank):
        self.word_bank = word_bank

    @staticmethod
    def is_well_formed(candidate: str) -> bool:
        return is_well_formed_word(candidate)

    def is_valid_word(self, candidate: str) -> bool:
        if not self.word_bank.ready:
            return False
        return candidate in self.word_bank.question_words or candidate in self.word_bank.answer_words
