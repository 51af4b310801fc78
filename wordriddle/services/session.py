"""
Game Session

The state machine for one target word across up to max_attempts attempts:

    ONGOING --(guess == target)--------------> WON
    ONGOING --(last attempt, not the target)---> LOST

Invalid input never raises; submit_guess reports a GuessRejection and leaves
the session untouched.
"""

import logging
import random
from typing import List, Optional

from ..config.game_settings import GAME_SUBTITLE, GAME_TITLE, MAX_ATTEMPTS
from ..models.errors import PersistenceError
from ..models.game import (
    Attempt, GameOutcome, GameState, GuessRejection, GuessResult, ShareCard
)
from ..models.statistics import Statistics
from .dictionary import DictionaryValidator
from .evaluator import (
    evaluate, feedback_to_text, initial_letter_status, is_solved, merge_letter_status
)
from .statistics_store import StatisticsStore
from .word_source import WordBank, select_random_word

logger = logging.getLogger(__name__)


class GameSession:
    """
    A single game. Created empty; gets its target as soon as the word bank
    is ready, which may be after construction.
    """

    def __init__(self,
                 game_id: str,
                 word_bank: WordBank,
                 statistics_store: StatisticsStore,
                 rng: Optional[random.Random] = None,
                 dictionary: Optional[DictionaryValidator] = None,
                 max_attempts: int = MAX_ATTEMPTS):
        self.game_id = game_id
        self.word_bank = word_bank
        self.dictionary = dictionary or DictionaryValidator(word_bank)
        self.statistics_store = statistics_store
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

        self.target_word: Optional[str] = None
        self.attempts: List[Attempt] = []
        self.outcome = GameOutcome.ONGOING
        self.letter_status = initial_letter_status()
        self.statistics = self._load_statistics()

        self._ensure_target()

    @property
    def ready(self) -> bool:
        return self.target_word is not None

    @property
    def is_over(self) -> bool:
        return self.outcome != GameOutcome.ONGOING

    @property
    def guesses(self) -> List[str]:
        return [attempt.guess for attempt in self.attempts]

    @property
    def current_round(self) -> int:
        return len(self.attempts)

    def _load_statistics(self) -> Statistics:
        try:
            return self.statistics_store.load()
        except PersistenceError as e:
            logger.warning("Statistics unavailable, keeping session-local tally: %s", e)
            return Statistics()

    def _ensure_target(self, exclude: Optional[str] = None) -> None:
        if self.target_word is not None or not self.word_bank.ready:
            return
        pool = self.word_bank.question_words
        if exclude and len(pool) > 1:
            pool = pool - {exclude}
        self.target_word = select_random_word(pool, self.rng)

    def submit_guess(self, raw_guess) -> GuessResult:
        """
        Validate, evaluate and record one guess.

        Checks run in order: readiness, game over, format, dictionary,
        duplicate. The first failing check decides the rejection.
        """
        self._ensure_target()
        if not self.ready:
            if self.word_bank.error:
                message = f"Word lists failed to load: {self.word_bank.error}"
            else:
                message = "Word lists are still loading"
            return GuessResult.rejected(GuessRejection.NOT_READY, message)

        if self.is_over:
            return GuessResult.rejected(GuessRejection.GAME_OVER, "Game is already over")

        guess = raw_guess.strip().upper() if isinstance(raw_guess, str) else ""

        if not self.dictionary.is_well_formed(guess):
            return GuessResult.rejected(GuessRejection.INVALID_FORMAT, "Guess must be exactly 5 letters")

        if not self.dictionary.is_valid_word(guess):
            return GuessResult.rejected(GuessRejection.NOT_IN_DICTIONARY, f"'{guess}' is not in word list")

        # Re-entering an earlier guess costs nothing and shows no notice
        if guess in self.guesses:
            return GuessResult.rejected(
                GuessRejection.DUPLICATE_GUESS, f"'{guess}' was already guessed", silent=True
            )

        feedback = evaluate(guess, self.target_word)
        attempt = Attempt(index=len(self.attempts), guess=guess, feedback=feedback)
        self.attempts.append(attempt)
        merge_letter_status(self.letter_status, guess, feedback)

        # Win is checked before exhaustion: a correct last guess still wins
        if is_solved(feedback):
            self._finish(GameOutcome.WON)
        elif len(self.attempts) >= self.max_attempts:
            self._finish(GameOutcome.LOST)

        return GuessResult(accepted=True, message=self.message or "Valid guess.", attempt=attempt)

    def _finish(self, outcome: GameOutcome) -> None:
        self.outcome = outcome
        # Increment the stored tally; other sessions of this player may have finished meanwhile
        try:
            base = self.statistics_store.load()
        except PersistenceError as e:
            logger.warning("Statistics unavailable, keeping session-local tally: %s", e)
            base = self.statistics
        if outcome == GameOutcome.WON:
            self.statistics = base.record_win()
        else:
            self.statistics = base.record_loss()
        logger.info(
            "Game %s %s after %d attempt(s)", self.game_id, outcome.value.lower(), len(self.attempts)
        )
        try:
            self.statistics_store.save(self.statistics)
        except PersistenceError as e:
            logger.error("Failed to persist statistics for game %s: %s", self.game_id, e)

    def reset(self) -> None:
        """Start over with a new target. Statistics are kept as they are."""
        previous = self.target_word
        self.target_word = None
        self.attempts = []
        self.outcome = GameOutcome.ONGOING
        self.letter_status = initial_letter_status()
        self._ensure_target(exclude=previous)

    @property
    def message(self) -> Optional[str]:
        """End-of-game message, None while the game is running."""
        if not self.is_over:
            return None
        headline = "You won!" if self.outcome == GameOutcome.WON else "You lost!"
        return f"{headline} The word was: {self.target_word}"

    def snapshot(self) -> GameState:
        """Current state for the renderer; the answer is only revealed once the game is over."""
        self._ensure_target()
        return GameState(
            game_id=self.game_id,
            ready=self.ready,
            current_round=self.current_round,
            max_rounds=self.max_attempts,
            outcome=self.outcome.value,
            game_over=self.is_over,
            won=self.outcome == GameOutcome.WON,
            guesses=self.guesses,
            guess_results=[attempt.as_pairs() for attempt in self.attempts],
            letter_status=dict(self.letter_status),
            statistics=self.statistics.to_dict(),
            answer=self.target_word if self.is_over else None,
            message=self.message,
            init_error=self.word_bank.error if not self.ready else None,
        )

    def share_card(self) -> Optional[ShareCard]:
        """Export data for a finished game, None while it is still running."""
        if not self.is_over:
            return None
        rows = [feedback_to_text(attempt.feedback) for attempt in self.attempts]
        rows.extend("." * len(self.target_word) for _ in range(self.max_attempts - len(rows)))
        score = str(len(self.attempts)) if self.outcome == GameOutcome.WON else "X"
        text_grid = "\n".join([f"{GAME_TITLE} {score}/{self.max_attempts}"] + rows)
        return ShareCard(
            title=GAME_TITLE,
            subtitle=GAME_SUBTITLE,
            guesses=tuple(self.guesses),
            feedback=tuple(attempt.feedback for attempt in self.attempts),
            target_word=self.target_word,
            outcome=self.outcome,
            max_rounds=self.max_attempts,
            text_grid=text_grid,
        )
