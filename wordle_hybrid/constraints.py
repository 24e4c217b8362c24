"""
Letter constraints learned from feedback, and the dictionary filter that
eliminates words inconsistent with it.
"""

from typing import Optional

import numpy as np

from .feedback import WORD_LENGTH, feedback_row, normalize_pattern, normalize_word, pattern_to_code, word_to_chars
from .pool import WordPool


VOWELS = "AEIOUY"


def _letter_index(c: str) -> int:
    return ord(c) - 65


class ConstraintState:
    """
    Minimum known count of each letter in the answer.

    A letter reported Green or Yellow k times in one guess is known to appear
    at least k times. Counts only ever rise within a game.
    """

    def __init__(self):
        self.min_counts = np.zeros(26, dtype=np.int32)

    def reset(self):
        self.min_counts[:] = 0

    def min_count(self, letter: str) -> int:
        return int(self.min_counts[_letter_index(letter.upper())])

    def update(self, guess: str, feedback: str):
        g = normalize_word(guess)
        p = normalize_pattern(feedback)
        tally = np.zeros(26, dtype=np.int32)
        for i in range(WORD_LENGTH):
            if p[i] in "GY":
                tally[_letter_index(g[i])] += 1
        np.maximum(self.min_counts, tally, out=self.min_counts)

    def is_risky(self, word: str) -> bool:
        """True if `word` repeats a letter more often than the answer is known to hold it."""
        for c in set(word):
            n = word.count(c)
            if n > 1 and n > self.min_counts[_letter_index(c)]:
                return True
        return False

    def known_vowel_count(self) -> int:
        return sum(1 for v in VOWELS if self.min_counts[_letter_index(v)] > 0)

    def new_vowel_count(self, word: str) -> int:
        return sum(1 for c in set(word) if c in VOWELS and self.min_counts[_letter_index(c)] == 0)

    def new_letter_coverage(self, word: str) -> int:
        """Distinct letters of `word` not yet seen as Green or Yellow."""
        return sum(1 for c in set(word) if self.min_counts[_letter_index(c)] == 0)

    def __repr__(self) -> str:
        known = {chr(65 + i): int(n) for i, n in enumerate(self.min_counts) if n > 0}
        return f"ConstraintState({known})"


def apply_feedback(pool: WordPool, guess: str, feedback: str, count: Optional[int] = None) -> int:
    """
    Eliminate every surviving word in the first `count` entries that would not
    have produced `feedback` had it been the answer.

    Returns:
        number of newly eliminated entries
    """
    n = len(pool) if count is None else count
    target = pattern_to_code(feedback)
    codes = feedback_row(word_to_chars(guess), pool.chars[:n])

    removed = 0
    entries = pool.entries
    for i in range(n):
        e = entries[i]
        if not e.eliminated and codes[i] != target:
            e.eliminated = True
            removed += 1
    return removed
