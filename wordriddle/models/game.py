"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter evaluation status."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"  # keyboard only, never part of a Feedback


Feedback = Tuple[LetterStatus, ...]


class GameOutcome(Enum):
    """Terminal state of a session."""
    ONGOING = "ONGOING"
    WON = "WON"
    LOST = "LOST"


class GuessRejection(Enum):
    """Reasons a submitted guess is turned away without changing the session."""
    NOT_READY = "NOT_READY"
    GAME_OVER = "GAME_OVER"
    INVALID_FORMAT = "INVALID_FORMAT"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    DUPLICATE_GUESS = "DUPLICATE_GUESS"


@dataclass(frozen=True)
class Attempt:
    """One accepted guess and the feedback computed for it."""
    index: int
    guess: str
    feedback: Feedback

    def as_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs for JSON serialization."""
        return [(letter, status.value) for letter, status in zip(self.guess, self.feedback)]


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a single submit_guess call."""
    accepted: bool
    message: str
    rejection: Optional[GuessRejection] = None
    silent: bool = False
    attempt: Optional[Attempt] = None

    @classmethod
    def rejected(cls, reason: GuessRejection, message: str, silent: bool = False) -> "GuessResult":
        return cls(accepted=False, message=message, rejection=reason, silent=silent)


@dataclass
class GameState:
    """Session state as handed to the renderer."""
    game_id: str
    ready: bool
    current_round: int
    max_rounds: int
    outcome: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    statistics: Dict[str, float]
    answer: Optional[str] = None  # Only included when game is over
    message: Optional[str] = None
    init_error: Optional[str] = None


@dataclass(frozen=True)
class ShareCard:
    """
    Read-only data handed to the image exporter.

    Carries the finished grid, the target word and the outcome. How it is
    turned into an image is up to the exporter.
    """
    title: str
    subtitle: str
    guesses: Tuple[str, ...]
    feedback: Tuple[Feedback, ...]
    target_word: str
    outcome: GameOutcome
    max_rounds: int
    text_grid: str = field(default="")

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "guesses": list(self.guesses),
            "feedback": [[status.value for status in row] for row in self.feedback],
            "target_word": self.target_word,
            "outcome": self.outcome.value,
            "max_rounds": self.max_rounds,
            "text_grid": self.text_grid,
        }
