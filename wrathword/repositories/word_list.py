"""
Static Word List

WordList backed by the bundled JSON word files.
"""

from typing import Dict, List, Optional, Set

from ..config import Config
from ..config.game_settings import load_word_lists, validate_word_list_integrity
from .interfaces import WordList


class StaticWordList(WordList):
    """
    Word lists loaded once from ``answers-N.json`` / ``allowed-N.json``.

    Allowed guesses are kept as lowercase sets for O(1) checks.
    """

    def __init__(self, words_dir: Optional[str] = None,
                 answers: Optional[Dict[int, List[str]]] = None,
                 allowed: Optional[Dict[int, Set[str]]] = None):
        if answers is None:
            answers, allowed = load_word_lists(words_dir or Config.WORDS_DIR)
            for length, words in answers.items():
                validate_word_list_integrity(words, allowed[length])

        self._answers: Dict[int, List[str]] = {
            length: [w.upper() for w in words] for length, words in answers.items()
        }
        self._allowed: Dict[int, Set[str]] = {
            length: {w.lower() for w in (allowed or {}).get(length, ())} | {w.lower() for w in words}
            for length, words in self._answers.items()
        }

    @classmethod
    def from_words(cls, answers: Dict[int, List[str]],
                   allowed: Optional[Dict[int, List[str]]] = None) -> "StaticWordList":
        """Build a word list from in-memory lists (tests, tools)."""
        return cls(answers=answers, allowed={k: set(v) for k, v in (allowed or {}).items()})

    def get_answers(self, length: int) -> List[str]:
        answers = self._answers.get(length)
        if not answers:
            raise ValueError(f"No answers available for length {length}")
        return list(answers)

    def is_valid_guess(self, word: str, length: int) -> bool:
        allowed = self._allowed.get(length)
        if not allowed or len(word) != length:
            return False
        return word.lower() in allowed

    def get_answer_count(self, length: int) -> int:
        return len(self._answers.get(length, ()))
