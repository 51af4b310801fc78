"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm and the keyboard letter
tracking built on top of it. Everything here is a pure function.
"""

from collections import Counter
from typing import Dict, List, Optional, Sequence

from ..config.game_settings import ALPHABET
from ..models.game import Feedback, LetterStatus

# Keyboard state can only move up this ladder
_STATUS_PRIORITY = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.HIT: 3,
}


def evaluate(guess: str, target: str) -> Feedback:
    """
    Compare `guess` against `target` and return one status per position.

    Exact matches are marked first. Every unmatched target letter goes into a
    pool, and the remaining guess positions claim from that pool left to
    right, so a repeated guess letter is never credited more often than it
    occurs unmatched in the target.

    Both words must be the same length and uppercase; callers validate.
    """
    result: List[Optional[LetterStatus]] = [None] * len(target)
    remaining: Counter = Counter()

    # First pass: exact position matches (HIT)
    for i, (guessed, expected) in enumerate(zip(guess, target)):
        if guessed == expected:
            result[i] = LetterStatus.HIT
        else:
            remaining[expected] += 1

    # Second pass: PRESENT while the pool lasts, otherwise ABSENT
    for i, guessed in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[guessed] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[guessed] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return tuple(result)  # type: ignore[arg-type]


def is_solved(feedback: Sequence[LetterStatus]) -> bool:
    """True if every position is a HIT."""
    return bool(feedback) and all(status == LetterStatus.HIT for status in feedback)


def initial_letter_status() -> Dict[str, str]:
    return {letter: LetterStatus.UNUSED.value for letter in ALPHABET}


def merge_letter_status(letter_status: Dict[str, str], word: str, feedback: Sequence[LetterStatus]) -> None:
    """
    Updates keyboard letter status tracking based on one guess result.

    Status can only progress in priority order (UNUSED -> ABSENT -> PRESENT -> HIT).
    """
    for letter, new_status in zip(word, feedback):
        current_status = LetterStatus(letter_status.get(letter, LetterStatus.UNUSED.value))
        if _STATUS_PRIORITY[new_status] > _STATUS_PRIORITY[current_status]:
            letter_status[letter] = new_status.value


_GRID_SYMBOLS = {
    LetterStatus.HIT: "G",
    LetterStatus.PRESENT: "Y",
    LetterStatus.ABSENT: "X",
}


def feedback_to_text(feedback: Sequence[LetterStatus]) -> str:
    """Compact text rendering of one feedback row, e.g. 'GYXXG'."""
    return "".join(_GRID_SYMBOLS[status] for status in feedback)
