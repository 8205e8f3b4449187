"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm (two passes, duplicate
aware).

Pass 1 marks exact position matches as correct and counts the answer's
letters that were not matched. Pass 2 marks a letter present only while an
unmatched copy of it remains, so a repeated letter is never credited more
often than it occurs in the answer.
"""

from collections import Counter
from typing import List

from ..models.feedback import Feedback
from ..models.tile_state import TileState


class GuessEvaluator:
    """Scores a guess against the answer."""

    def evaluate(self, answer: str, guess: str) -> Feedback:
        """
        Evaluate a guess against the answer.

        Args:
            answer: Target word
            guess: Guessed word, same length as the answer

        Returns:
            Feedback with one TileState per position

        Examples:
            evaluate("HELLO", "LLLAA") -> present, absent, correct, absent, absent
            evaluate("BABES", "ABBEY") -> present, present, correct, correct, absent
        """
        ans = answer.lower()
        gss = guess.lower()
        n = len(ans)
        result: List[TileState] = [TileState.ABSENT] * n

        # Pass 1: exact matches, count leftover answer letters
        remaining = Counter()
        for i in range(n):
            if gss[i] == ans[i]:
                result[i] = TileState.CORRECT
            else:
                remaining[ans[i]] += 1

        # Pass 2: present only while an unmatched copy remains
        for i in range(n):
            if result[i] is TileState.CORRECT:
                continue
            ch = gss[i]
            if remaining[ch] > 0:
                result[i] = TileState.PRESENT
                remaining[ch] -= 1

        return Feedback(tuple(result))
