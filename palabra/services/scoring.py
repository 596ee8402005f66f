"""
Scoring

Pure guess evaluation and keyboard-disabling rules. Nothing here holds
state or performs I/O; the disabled key set is passed in and returned.
"""

import unicodedata
from collections import Counter
from typing import AbstractSet, FrozenSet, List, Sequence

from ..models.game import LetterState

VOWELS = frozenset('AEIOU')


class InvalidInput(ValueError):
    """Raised when the words handed to the scorer cannot be compared."""


def _normalize(word: str) -> str:
    return unicodedata.normalize('NFC', word).lower()


def base_letter(ch: str) -> str:
    """
    Returns the uppercase letter with diacritics removed (É -> E, ñ -> N).
    """
    decomposed = unicodedata.normalize('NFD', ch)
    return ''.join(c for c in decomposed if not unicodedata.combining(c)).upper()


def key_for_letter(ch: str) -> str:
    """
    Returns the keyboard key a letter lives on.

    Accented vowels share their base vowel's key; every other letter,
    Ñ included, is its own key.
    """
    base = base_letter(ch)
    if base in VOWELS:
        return base
    return unicodedata.normalize('NFC', ch).upper()


def classify(guess: str, secret: str) -> List[LetterState]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact position matches consume the secret's letter budget before
    out-of-place matches, so no letter is reported more times than it
    occurs in the secret.

    Args:
        guess: The guessed word
        secret: The secret word

    Returns:
        One LetterState per position of the guess

    Raises:
        InvalidInput: If the words differ in length
    """
    guess = _normalize(guess)
    secret = _normalize(secret)
    if len(guess) != len(secret):
        raise InvalidInput(
            f"Guess '{guess}' has {len(guess)} letters, secret has {len(secret)}"
        )

    remaining = Counter(secret)
    result = [LetterState.ABSENT] * len(guess)

    # First pass: exact position matches
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            result[i] = LetterState.CORRECT
            remaining[g] -= 1

    # Second pass: out-of-place letters with budget left
    for i, g in enumerate(guess):
        if result[i] is LetterState.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = LetterState.PRESENT
            remaining[g] -= 1

    return result


def update_disabled(guess: str,
                    classification: Sequence[LetterState],
                    secret: str,
                    prior_disabled: AbstractSet[str]) -> FrozenSet[str]:
    """
    Derives the keyboard keys to grey out after a scored guess.

    A vowel key stays enabled while the secret still holds an accented (or
    unaccented) variant of it other than the letter just guessed, since that
    variant is reachable from the long-press popup. Keys found correct or
    present anywhere in this guess are never disabled.

    Args:
        guess: The scored guess
        classification: Result of classify(guess, secret)
        secret: The secret word
        prior_disabled: Keys disabled by earlier guesses

    Returns:
        The new disabled key set, always a superset of prior_disabled
    """
    guess = _normalize(guess)
    secret = _normalize(secret)
    if len(classification) != len(guess):
        raise InvalidInput(
            f"Classification has {len(classification)} entries for a {len(guess)}-letter guess"
        )

    confirmed = {
        key_for_letter(letter)
        for letter, state in zip(guess, classification)
        if state is not LetterState.ABSENT
    }

    disabled = set(prior_disabled)
    for letter, state in zip(guess, classification):
        if state is not LetterState.ABSENT:
            continue
        key = key_for_letter(letter)
        if key in confirmed:
            continue
        if key in VOWELS:
            has_variant = any(
                base_letter(s) == key and s != letter for s in secret
            )
            if has_variant:
                continue
        disabled.add(key)

    return frozenset(disabled)
