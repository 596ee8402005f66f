"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple


class LetterState(Enum):
    """Classification of a single letter position within a guess."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


@dataclass
class GameState:
    """Server-side game state for one session. Holds the secret word."""
    game_id: str
    secret: str
    guesses: List[str] = field(default_factory=list)
    results: List[List[LetterState]] = field(default_factory=list)
    current_guess: str = ""
    disabled_keys: Set[str] = field(default_factory=set)
    game_over: bool = False
    won: bool = False
    stats_recorded: bool = False


@dataclass
class GameStateView:
    """Client-facing game state representation."""
    game_id: str
    attempts: int
    max_attempts: int
    word_length: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter state as string for JSON serialization
    current_guess: str
    disabled_keys: List[str]
    answer: Optional[str] = None  # Only included when game is over
