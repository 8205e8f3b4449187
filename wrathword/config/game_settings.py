"""
Game Configuration Constants Module

This module defines the game rules shared by every layer (valid word
lengths, default board size) and the loading and integrity checks for the
bundled word lists.

Word lists live in ``answers-<N>.json`` / ``allowed-<N>.json`` files, one
JSON array of words per file.
"""

import json
import os
from collections import Counter
from typing import Dict, Final, Iterable, List, Set, Tuple

# Word lengths a board can be built for
VALID_LENGTHS: Final[Tuple[int, ...]] = (4, 5, 6)

# Default word length for new games
DEFAULT_LENGTH: Final[int] = 5

# Default number of guess rows
DEFAULT_MAX_ROWS: Final[int] = 6


def is_valid_length(length: int) -> bool:
    """Check if a number is a supported word length."""
    return length in VALID_LENGTHS


def _load_json_words(path: str, length: int) -> List[str]:
    """
    Load one word file.

    Args:
        path: Path to a JSON file containing an array of words
        length: Length every word must have

    Returns:
        List[str]: Uppercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {os.path.basename(path)}: {e}")

    if not isinstance(words, list):
        raise ValueError(f"{os.path.basename(path)} must contain an array of words")

    if not words:
        raise ValueError(f"Word list {os.path.basename(path)} cannot be empty")

    uppercase_words = []
    for word in words:
        if not isinstance(word, str):
            raise ValueError(f"Non-string entry {word!r} in {os.path.basename(path)}")
        word = word.strip().upper()
        if len(word) != length:
            raise ValueError(f"Word '{word}' in {os.path.basename(path)} is not {length} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' in {os.path.basename(path)} contains non-alphabetic characters")
        uppercase_words.append(word)

    return uppercase_words


def load_word_lists(words_dir: str) -> Tuple[Dict[int, List[str]], Dict[int, Set[str]]]:
    """
    Load answer and allowed-guess lists for every valid length.

    Args:
        words_dir: Directory holding answers-N.json / allowed-N.json

    Returns:
        Tuple of (answers by length, allowed guesses by length). Allowed
        sets are lowercase and always include the answers.
    """
    answers: Dict[int, List[str]] = {}
    allowed: Dict[int, Set[str]] = {}

    for length in VALID_LENGTHS:
        answers[length] = _load_json_words(os.path.join(words_dir, f'answers-{length}.json'), length)
        extra = _load_json_words(os.path.join(words_dir, f'allowed-{length}.json'), length)
        allowed[length] = {w.lower() for w in extra} | {w.lower() for w in answers[length]}

    return answers, allowed


def validate_word_list_integrity(answers: Iterable[str], allowed: Iterable[str]) -> bool:
    """
    Validates the integrity and consistency of one length's word lists.

    Checks that:
    1. The answer list is not empty
    2. Every word has the same length and only alphabetic characters
    3. Answers are uppercase and contain no duplicates
    4. Every answer is also an allowed guess

    Returns:
        bool: True if the lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    answers = list(answers)
    allowed_set = {w.lower() for w in allowed}

    if not answers:
        raise ValueError("Word list cannot be empty")

    length = len(answers[0])
    for index, word in enumerate(answers):
        if len(word) != length:
            raise ValueError(f"Word at index {index} '{word}' is not {length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(answers) != len(set(answers)):
        duplicates = sorted(w for w, count in Counter(answers).items() if count > 1)
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    missing = [w for w in answers if w.lower() not in allowed_set]
    if missing:
        raise ValueError(f"Answers missing from allowed guesses: {missing[:5]}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters with counts
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word.upper() if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word.upper():
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
