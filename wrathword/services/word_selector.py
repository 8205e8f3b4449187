"""
Word Selector

Picks the puzzle answer deterministically from the game configuration.

The seed string (``GameConfig.to_seed_string()``) is hashed with 32-bit
FNV-1a and the hash seeds a mulberry32 generator; its first output picks
the index. The same config always yields the same word on any machine.
"""

from typing import Callable, List, Optional, Sequence

from ..models.game_config import GameConfig

_MASK32 = 0xFFFFFFFF
_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & _MASK32


def fnv1a_32(text: str) -> int:
    """FNV-1a hash of a string, as an unsigned 32-bit integer."""
    h = _FNV_OFFSET_BASIS
    for ch in text:
        h ^= ord(ch)
        h = _imul(h, _FNV_PRIME)
    return h


def mulberry32(seed: int) -> Callable[[], float]:
    """
    Mulberry32 PRNG.

    Returns:
        A function producing successive floats in [0, 1)
    """
    state = seed & _MASK32

    def next_float() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & _MASK32
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296

    return next_float


def seeded_index(seed: str, size: int) -> int:
    """Deterministic index in [0, size) derived from a seed string."""
    if size <= 0:
        raise ValueError("size must be positive")
    rnd = mulberry32(fnv1a_32(seed))()
    return int(rnd * size)


def select_word(config: GameConfig, candidate_answers: Sequence[str]) -> str:
    """
    Select the answer for a config from a candidate list.

    Raises:
        ValueError: If there are no candidates
    """
    if not candidate_answers:
        raise ValueError(f"No answers available for length {config.length}")
    return candidate_answers[seeded_index(config.to_seed_string(), len(candidate_answers))]


class WordSelector:
    """Selects the answer for a config from the configured word list."""

    def __init__(self, word_list=None):
        self.word_list = word_list

    def select_word(self, config: GameConfig, candidate_answers: Optional[List[str]] = None) -> str:
        """
        Same config always produces the same word.

        Args:
            config: Game configuration supplying the seed
            candidate_answers: Answers to choose from; defaults to the word
                list's answers for ``config.length``
        """
        if candidate_answers is None:
            if self.word_list is None:
                raise ValueError("WordSelector needs a word list or explicit candidates")
            candidate_answers = self.word_list.get_answers(config.length)
        return select_word(config, candidate_answers)

    def select_for(self, config: GameConfig) -> str:
        """Select from the word list's answers for the config's length."""
        return self.select_word(config)
