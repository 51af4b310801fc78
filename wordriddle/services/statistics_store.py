"""
Statistics Store

Persists the win/loss tally for a player between sessions.
"""

import json
import os
import threading
from typing import Dict

from ..models.errors import PersistenceError
from ..models.statistics import Statistics


class StatisticsStore:
    """Interface: load the tally at startup, save it after each finished game."""

    def load(self) -> Statistics:
        raise NotImplementedError

    def save(self, statistics: Statistics) -> None:
        raise NotImplementedError


class InMemoryStatisticsStore(StatisticsStore):
    """Non-durable store, used in tests and when no file is configured."""

    def __init__(self, statistics: Statistics = None):
        self._statistics = statistics or Statistics()
        self.save_count = 0

    def load(self) -> Statistics:
        return self._statistics

    def save(self, statistics: Statistics) -> None:
        self._statistics = statistics
        self.save_count += 1


# One lock per file so players sharing a file do not clobber each other
_file_locks: Dict[str, threading.Lock] = {}
_file_locks_guard = threading.Lock()


def _lock_for(path: str) -> threading.Lock:
    with _file_locks_guard:
        return _file_locks.setdefault(os.path.abspath(path), threading.Lock())


class JsonFileStatisticsStore(StatisticsStore):
    """
    Stores every player's tally in one JSON object on disk:

        {"player": {"wins": 3, "losses": 1}, ...}

    A missing file reads as an empty tally. Unreadable or malformed content
    raises PersistenceError.
    """

    def __init__(self, path: str, key: str):
        self.path = path
        self.key = key
        self._lock = _lock_for(path)

    def _read_all(self) -> Dict[str, Dict[str, int]]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Could not read statistics from {self.path}: {e}")
        if not isinstance(data, dict):
            raise PersistenceError(f"Statistics file {self.path} must contain a JSON object")
        return data

    def load(self) -> Statistics:
        with self._lock:
            entry = self._read_all().get(self.key)
        if entry is None:
            return Statistics()
        try:
            return Statistics(wins=int(entry['wins']), losses=int(entry['losses']))
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Malformed statistics for '{self.key}': {e}")

    def save(self, statistics: Statistics) -> None:
        with self._lock:
            data = self._read_all()
            data[self.key] = {'wins': statistics.wins, 'losses': statistics.losses}
            directory = os.path.dirname(self.path)
            tmp_path = f"{self.path}.tmp"
            try:
                if directory:
                    os.makedirs(directory, exist_ok=True)
                with open(tmp_path, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2, sort_keys=True)
                os.replace(tmp_path, self.path)
            except OSError as e:
                raise PersistenceError(f"Could not write statistics to {self.path}: {e}")
