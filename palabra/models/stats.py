"""
Stats Data Models

Contains the persisted win/loss record.
"""

from dataclasses import dataclass


@dataclass
class Stats:
    """Win/loss record kept by the stats store."""
    wins: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses

    @property
    def win_percentage(self) -> int:
        """Whole-number share of games won, halves rounded up."""
        if self.total == 0:
            return 0
        return int(self.wins * 100 / self.total + 0.5)

    def to_dict(self) -> dict:
        return {'wins': self.wins, 'losses': self.losses}

    @classmethod
    def from_dict(cls, data: dict) -> "Stats":
        return cls(wins=int(data.get('wins', 0)), losses=int(data.get('losses', 0)))
