"""
Word Source Service

Fetches the question (target) and answer word lists, and holds them in a
WordBank together with the loading status the game sessions check before
accepting guesses.
"""

import json
import logging
import random
import threading
from enum import Enum
from typing import Iterable, List, Optional, Set

import requests

from ..config.game_settings import (
    ANSWER_WORDS_PATH, QUESTION_WORDS_PATH, is_well_formed_word
)
from ..models.errors import WordSourceError

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """Word list initialization phase."""
    PENDING = "PENDING"
    READY = "READY"
    ERROR = "ERROR"


class WordSource:
    """Interface for anything that can supply the two word pools."""

    def fetch_question_words(self) -> Set[str]:
        raise NotImplementedError

    def fetch_answer_words(self) -> Set[str]:
        raise NotImplementedError


def _parse_word_array(data, origin: str) -> Set[str]:
    if not isinstance(data, list):
        raise WordSourceError(f"{origin} must contain an array of words")
    non_strings = [word for word in data if not isinstance(word, str)]
    if non_strings:
        raise WordSourceError(
            f"{origin} contains {len(non_strings)} non-string entries: {non_strings[:10]!r}"
        )
    return set(data)


class FileWordSource(WordSource):
    """Reads the word pools from JSON array files on disk."""

    def __init__(self, question_path: str = QUESTION_WORDS_PATH, answer_path: str = ANSWER_WORDS_PATH):
        self.question_path = question_path
        self.answer_path = answer_path

    def _read(self, path: str) -> Set[str]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise WordSourceError(f"Word list file not found: {path}")
        except json.JSONDecodeError as e:
            raise WordSourceError(f"Invalid JSON in {path}: {e}")
        return _parse_word_array(data, path)

    def fetch_question_words(self) -> Set[str]:
        return self._read(self.question_path)

    def fetch_answer_words(self) -> Set[str]:
        return self._read(self.answer_path)


class RemoteWordSource(WordSource):
    """Downloads the word pools as JSON arrays over HTTP. Failures are not retried."""

    def __init__(self, question_url: str, answer_url: str, timeout: float = 10):
        self.question_url = question_url
        self.answer_url = answer_url
        self.timeout = timeout

    def _get(self, url: str) -> Set[str]:
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise WordSourceError(f"Failed to download word list from {url}: {e}")
        except ValueError as e:
            raise WordSourceError(f"Invalid JSON from {url}: {e}")
        return _parse_word_array(data, url)

    def fetch_question_words(self) -> Set[str]:
        return self._get(self.question_url)

    def fetch_answer_words(self) -> Set[str]:
        return self._get(self.answer_url)


def select_random_word(pool: Iterable[str], rng: random.Random) -> str:
    """
    Uniform random choice over `pool`.

    The pool is sorted first so that a seeded `rng` always picks the same word.
    """
    words = sorted(pool)
    if not words:
        raise ValueError("Cannot select a word from an empty pool")
    return rng.choice(words)


def normalize_words(words: Iterable[str]) -> Set[str]:
    """Uppercase every word and drop anything that is not a playable word."""
    normalized = set()
    dropped: List[str] = []
    for word in words:
        candidate = word.strip().upper()
        if is_well_formed_word(candidate):
            normalized.add(candidate)
        else:
            dropped.append(word)
    if dropped:
        logger.warning("Dropped %d malformed words from word list: %s", len(dropped), dropped[:10])
    return normalized


class WordBank:
    """
    The loaded word pools plus their PENDING/READY/ERROR status.

    `load()` is the single initialization step. It may run on a background
    thread; readers only ever see a fully loaded bank or none at all.
    """

    def __init__(self, source: WordSource):
        self.source = source
        self.status = LoadStatus.PENDING
        self.error: Optional[str] = None
        self.question_words: Set[str] = set()
        self.answer_words: Set[str] = set()
        self._lock = threading.Lock()

    @property
    def ready(self) -> bool:
        return self.status == LoadStatus.READY

    @property
    def all_words(self) -> Set[str]:
        return self.question_words | self.answer_words

    def load(self) -> LoadStatus:
        """Fetch both pools once. Errors leave the bank in ERROR; calling again retries."""
        with self._lock:
            if self.status == LoadStatus.READY:
                return self.status
            self.status = LoadStatus.PENDING
            self.error = None
            try:
                question_words = normalize_words(self.source.fetch_question_words())
                answer_words = normalize_words(self.source.fetch_answer_words())
                if not question_words:
                    raise WordSourceError("Question word list is empty")
            except WordSourceError as e:
                logger.error("Word list initialization failed: %s", e)
                self.status = LoadStatus.ERROR
                self.error = str(e)
                return self.status

            self.question_words = question_words
            self.answer_words = answer_words
            self.status = LoadStatus.READY
            logger.info(
                "Word lists loaded: %d question words, %d answer words",
                len(question_words), len(answer_words)
            )
            return self.status


def build_word_source(app_config) -> WordSource:
    """Remote source when both URLs are configured, bundled files otherwise."""
    question_url = getattr(app_config, 'QUESTION_WORDS_URL', None)
    answer_url = getattr(app_config, 'ANSWER_WORDS_URL', None)
    if question_url and answer_url:
        return RemoteWordSource(
            question_url, answer_url,
            timeout=getattr(app_config, 'WORD_FETCH_TIMEOUT_SECONDS', 10)
        )
    return FileWordSource()
