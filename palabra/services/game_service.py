"""
Game Service

Contains the game session logic: secret selection, key events, guess
submission and end-of-game stats recording.
"""

import random
import uuid
from typing import Dict, List, Optional, Tuple

from ..models.game import GameState, GameStateView
from ..config.game_settings import WORD_LIST, WORD_SET, WORD_LENGTH, MAX_ATTEMPTS, normalize_word
from .keyboard_service import DELETE_KEY, ENTER_KEY, normalize_key, is_key_disabled
from .scoring import classify, update_disabled
from .stats_service import StatsService
from ..utils.game_logger import game_logger


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Key events (letters, DELETE, ENTER) against the current guess
    - Guess validation and evaluation
    - Recording wins and losses once a game finishes
    """

    def __init__(self,
                 stats_service: Optional[StatsService] = None,
                 word_list: Optional[List[str]] = None,
                 max_attempts: int = MAX_ATTEMPTS,
                 rng: Optional[random.Random] = None):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        if word_list is not None:
            self.word_list = [normalize_word(word) for word in word_list]
            self.word_set = frozenset(self.word_list)
        else:
            self.word_list = WORD_LIST.copy()
            self.word_set = WORD_SET
        self.max_attempts = max_attempts
        self.stats_service = stats_service
        self.rng = rng or random.Random()

    def _pick_secret(self) -> str:
        return self.rng.choice(self.word_list)

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GameState(game_id=game_id, secret=self._pick_secret())
        return game_id

    def reset_game(self, game_id: str) -> Optional[GameStateView]:
        """
        Starts a fresh round in an existing session ("play again").

        Returns:
            The new GameStateView or None if game not found
        """
        if game_id not in self.games:
            return None
        self._record_result(self.games[game_id])
        self.games[game_id] = GameState(game_id=game_id, secret=self._pick_secret())
        return self.get_game_state(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameStateView]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameStateView object or None if game not found
        """
        game = self.games.get(game_id)
        if game is None:
            return None

        return GameStateView(
            game_id=game_id,
            attempts=len(game.guesses),
            max_attempts=self.max_attempts,
            word_length=WORD_LENGTH,
            game_over=game.game_over,
            won=game.won,
            guesses=list(game.guesses),
            guess_results=[
                [(letter, state.value) for letter, state in zip(guess, result)]
                for guess, result in zip(game.guesses, game.results)
            ],
            current_guess=game.current_guess,
            disabled_keys=sorted(game.disabled_keys),
            answer=game.secret if game.game_over else None
        )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a whole-word guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        game = self.games.get(game_id)
        if game is None:
            return False, "Game not found"

        if game.game_over:
            self._record_result(game)
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        normalized_guess = normalize_word(guess)

        if len(normalized_guess) != WORD_LENGTH:
            return False, f"Guess must be exactly {WORD_LENGTH} letters"

        if not all(normalize_key(letter) for letter in normalized_guess):
            return False, "Guess must contain only letters"

        if normalized_guess not in self.word_set:
            return False, "Word not in word list"

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> Tuple[Optional[GameStateView], str]:
        """
        Submits a whole word, replacing any letters typed so far.

        Args:
            game_id: Unique game identifier
            guess: The 5-letter word guess

        Returns:
            Tuple of (updated GameStateView or None, error_message)
        """
        is_valid, error = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return (self.get_game_state(game_id) if game_id in self.games else None), error

        game = self.games[game_id]
        game.current_guess = normalize_word(guess)
        error = self._submit_current_guess(game)
        return self.get_game_state(game_id), error

    def press_key(self, game_id: str, key: str) -> Tuple[Optional[GameStateView], str]:
        """
        Applies one keyboard event to a game.

        Letters are appended to the current guess unless it is full or the
        key is disabled, DELETE removes the last letter and ENTER submits.

        Args:
            game_id: Unique game identifier
            key: Key name as sent by the client

        Returns:
            Tuple of (GameStateView or None if game not found, error_message)
        """
        game = self.games.get(game_id)
        if game is None:
            return None, "Game not found"

        if game.game_over:
            self._record_result(game)
            return self.get_game_state(game_id), "Game is already over"

        normalized_key = normalize_key(key)
        if normalized_key is None:
            return self.get_game_state(game_id), "Invalid key"

        error = ""
        if normalized_key == ENTER_KEY:
            error = self._submit_current_guess(game)
        elif normalized_key == DELETE_KEY:
            game.current_guess = game.current_guess[:-1]
        elif (len(game.current_guess) < WORD_LENGTH
              and not is_key_disabled(normalized_key, game.disabled_keys)):
            game.current_guess += normalized_key.lower()

        return self.get_game_state(game_id), error

    def _submit_current_guess(self, game: GameState) -> str:
        """
        Scores the current guess and updates game state.

        Returns:
            Error message, empty when the guess was accepted
        """
        guess = game.current_guess
        if len(guess) != WORD_LENGTH:
            return "Not enough letters"

        if guess not in self.word_set:
            return "Word not in word list"

        result = classify(guess, game.secret)
        game.disabled_keys = set(update_disabled(guess, result, game.secret, game.disabled_keys))
        game.guesses.append(guess)
        game.results.append(result)
        game.current_guess = ""

        if guess == game.secret:
            game.won = True
            game.game_over = True
        elif len(game.guesses) >= self.max_attempts:
            game.game_over = True

        if game.game_over:
            self._record_result(game)

        return ""

    def _record_result(self, game: GameState) -> bool:
        """
        Writes a finished game to the stats store once.

        A failed write is logged and left pending; it is retried on the
        next event for the same game.

        Returns:
            bool: True once the result is stored (or there is no stats service)
        """
        if game.stats_recorded or not game.game_over:
            return game.stats_recorded
        if self.stats_service is None:
            game.stats_recorded = True
            return True
        try:
            self.stats_service.record_result(game.won)
        except Exception as e:
            game_logger.log_error(None, e, "record_result", game.game_id)
            return False
        game.stats_recorded = True
        return True

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(stats_service: Optional[StatsService] = None, **kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(stats_service=stats_service, **kwargs)
    return _game_service
