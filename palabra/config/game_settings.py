"""
Game Configuration Constants Module

This module defines all game configuration constants. All game parameters
are centralized here to enable easy modification.

"""

import json
import os
import unicodedata
from typing import FrozenSet, List, Final

from .app_config import Config

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and guess.
"""

MAX_ATTEMPTS: Final[int] = Config.MAX_ATTEMPTS
"""
Maximum number of guesses allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""


def normalize_word(word: str) -> str:
    """Trim, lowercase and NFC-normalise a word so accented letters compare as one character."""
    return unicodedata.normalize('NFC', word.strip()).lower()


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from words.json file.

    Returns:
        List[str]: List of lowercase 5-letter words, in file order

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If JSON is malformed, the word list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = [normalize_word(word) for word in word_list]

    for word in words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return words

# Word dictionary loaded from JSON file. The list keeps file order for
# random selection; the set is used for membership checks.
WORD_LIST: Final[List[str]] = _load_word_list()
WORD_SET: Final[FrozenSet[str]] = frozenset(WORD_LIST)


def validate_word_list_integrity() -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase NFC formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if not WORD_LIST:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(WORD_LIST):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if word != normalize_word(word):
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase NFC format")

    if len(WORD_LIST) != len(WORD_SET):
        duplicates = sorted({word for word in WORD_LIST if WORD_LIST.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Analyzes word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - accented_words: Words containing an accented letter or Ñ
            - avg_vowel_count: Average vowels per word (accented vowels included)
            - letter_frequency: Distribution of letters across all words

    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    vowels = set('aeiouáéíóú')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORD_LIST)
    accented = [word for word in WORD_LIST if not word.isascii()]

    letter_frequency = {}
    for word in WORD_LIST:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORD_LIST),
        "accented_words": len(accented),
        "avg_vowel_count": round(total_vowels / len(WORD_LIST), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
