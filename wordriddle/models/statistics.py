"""
Statistics Data Models

Contains the running win/loss tally kept across sessions.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Statistics:
    """Win/loss counters for one player."""
    wins: int = 0
    losses: int = 0

    def __post_init__(self) -> None:
        if self.wins < 0 or self.losses < 0:
            raise ValueError("Statistics counters must be non-negative")

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Win percentage, 0.0 when no games have finished."""
        if not self.games_played:
            return 0.0
        return round(self.wins / self.games_played * 100.0, 1)

    def record_win(self) -> "Statistics":
        return Statistics(wins=self.wins + 1, losses=self.losses)

    def record_loss(self) -> "Statistics":
        return Statistics(wins=self.wins, losses=self.losses + 1)

    def to_dict(self) -> Dict[str, float]:
        return {
            'wins': self.wins,
            'losses': self.losses,
            'games_played': self.games_played,
            'win_rate': self.win_rate,
        }
