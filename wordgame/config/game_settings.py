"""
Game Configuration Constants Module

This module defines the game rules and loads the static word list that
secret words are drawn from.
"""

import json
import os
from typing import Final, List, Optional

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and every guess."""

MAX_GUESSES: Final[int] = 6
"""
Default number of guesses allowed per session.
Type: Final[int] - Immutable to prevent accidental modification
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def is_valid_word(word) -> bool:
    """True for a WORD_LENGTH string made only of ASCII letters."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
    )


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a JSON array file.

    Args:
        path: JSON file to read; defaults to the packaged words.json

    Returns:
        List[str]: Lowercase 5-letter words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, empty or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    words = [word.lower() for word in word_list if isinstance(word, str)]
    validate_word_list_integrity(words)
    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    Checks that the list is non-empty, that every word is exactly five
    lowercase letters, and that there are no duplicates.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not is_valid_word(word):
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} letters long")
        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


if __name__ == "__main__":
    try:
        words = load_word_list()
        print(f" Word list validation passed ({len(words)} words)")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
