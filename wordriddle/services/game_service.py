"""
Game Service

Manages game sessions for the server: word list initialization, session
creation by game id, guess submission and per-player statistics.
"""

import logging
import random
import threading
import uuid
from typing import Callable, Dict, Optional

from ..config.game_settings import MAX_ATTEMPTS, get_word_statistics
from ..models.errors import PersistenceError
from ..models.game import GameState, GuessResult, ShareCard
from ..models.statistics import Statistics
from .session import GameSession
from .statistics_store import InMemoryStatisticsStore, JsonFileStatisticsStore, StatisticsStore
from .word_source import WordBank, WordSource, build_word_source

logger = logging.getLogger(__name__)

StoreFactory = Callable[[str], StatisticsStore]


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Word list initialization (once, possibly on a background thread)
    - Session management with unique game IDs
    - Guess submission and reset, serialized per service
    - Statistics store lookup per player
    """

    def __init__(self,
                 word_source: WordSource,
                 store_factory: Optional[StoreFactory] = None,
                 rng: Optional[random.Random] = None,
                 default_player_id: str = 'player',
                 max_attempts: int = MAX_ATTEMPTS):
        self.word_bank = WordBank(word_source)
        self.store_factory = store_factory or (lambda player_id: InMemoryStatisticsStore())
        self.rng = rng or random.Random()
        self.default_player_id = default_player_id
        self.max_attempts = max_attempts
        self.games: Dict[str, GameSession] = {}
        self._stores: Dict[str, StatisticsStore] = {}
        self._lock = threading.RLock()

    def load_word_lists(self):
        """Run the word list initialization phase. Safe to call again after an error."""
        return self.word_bank.load()

    def start_background_load(self) -> threading.Thread:
        thread = threading.Thread(target=self.load_word_lists, name='word-list-loader', daemon=True)
        thread.start()
        return thread

    def _store_for(self, player_id: str) -> StatisticsStore:
        if player_id not in self._stores:
            self._stores[player_id] = self.store_factory(player_id)
        return self._stores[player_id]

    def create_new_game(self, player_id: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        with self._lock:
            session = GameSession(
                game_id=game_id,
                word_bank=self.word_bank,
                statistics_store=self._store_for(player_id or self.default_player_id),
                rng=self.rng,
                max_attempts=self.max_attempts,
            )
            self.games[game_id] = session
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """Current state without the answer, or None if the game does not exist."""
        with self._lock:
            session = self.games.get(game_id)
            return session.snapshot() if session else None

    def submit_guess(self, game_id: str, guess: str) -> Optional[GuessResult]:
        """Submit a guess. None if the game does not exist."""
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            return session.submit_guess(guess)

    def reset_game(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            session = self.games.get(game_id)
            if session is None:
                return None
            session.reset()
            return session.snapshot()

    def get_share_card(self, game_id: str) -> Optional[ShareCard]:
        with self._lock:
            session = self.games.get(game_id)
            return session.share_card() if session else None

    def get_statistics(self, player_id: str) -> Statistics:
        """Persisted tally for a player; empty when the store cannot be read."""
        try:
            return self._store_for(player_id).load()
        except PersistenceError as e:
            logger.warning("Could not load statistics for %s: %s", player_id, e)
            return Statistics()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False

    def health(self) -> Dict:
        return {
            'word_lists': self.word_bank.status.value,
            'word_list_error': self.word_bank.error,
            'question_words': len(self.word_bank.question_words),
            'dictionary_words': len(self.word_bank.all_words),
            'active_games': len(self.games),
            'max_attempts': self.max_attempts,
            'word_statistics': get_word_statistics(self.word_bank.question_words) if self.word_bank.ready else None,
        }


def build_game_service(app_config) -> GameService:
    """Service wired from a Config class: word source, stats file, RNG seed and attempt limit."""
    stats_file = getattr(app_config, 'STATS_FILE', None)
    if stats_file:
        def store_factory(player_id):
            return JsonFileStatisticsStore(stats_file, player_id)
    else:
        store_factory = None
    return GameService(
        word_source=build_word_source(app_config),
        store_factory=store_factory,
        rng=random.Random(getattr(app_config, 'RANDOM_SEED', None)),
        default_player_id=getattr(app_config, 'DEFAULT_PLAYER_ID', 'player'),
        max_attempts=getattr(app_config, 'MAX_ATTEMPTS', MAX_ATTEMPTS),
    )


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(app_config=None, service: Optional[GameService] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if service is None:
        from ..config import Config
        service = build_game_service(app_config or Config)
    _game_service = service
    return _game_service
