"""
One-ply lookahead bonus.

Scores how safely a candidate splits the surviving answers: the effective
branching factor ``n^2 / sum(bucket^2)`` on a log10 scale, plus a small
reward for buckets of one (guesses that would pin the answer next turn).
A bucket larger than the guesses left is treated as a likely loss.
"""

import math

import numpy as np

from .config import MAX_GUESSES
from .entropy import pattern_histogram
from .feedback import words_to_chars
from .pool import View, WordEntry


# ============================================================================
# CONSTANTS
# ============================================================================

SNIPER_BONUS = 0.04
DOOMSDAY_PENALTY = 100.0
WIDE_BUCKET_PENALTY = 5.0


def lookahead_score_chars(candidate: WordEntry, answer_chars: np.ndarray, turn: int) -> float:
    """
    Lookahead bonus of `candidate` against a letter code matrix of answers.

    Args:
        candidate: word being considered for `turn`
        answer_chars: shape (n, 5) codes of the surviving answers
        turn: 1-based turn the candidate would be played on

    Returns:
        bonus added to the candidate's entropy
    """
    n = answer_chars.shape[0]
    if n <= 1:
        return 0.0

    guess = words_to_chars([candidate.word])[0]
    bins = pattern_histogram(guess, answer_chars)
    filled = bins[bins > 0]

    sum_squares = float(np.sum(filled.astype(np.float64) ** 2))
    singles = int(np.sum(filled == 1))
    max_bucket = int(filled.max())

    safety = math.log10((float(n) * float(n)) / sum_squares)
    sniper = singles * SNIPER_BONUS if turn > 1 else 0.0
    total = safety + sniper

    if max_bucket > MAX_GUESSES - turn:
        return total - DOOMSDAY_PENALTY
    if n > 4 and max_bucket > n // 2 + 1:
        return total - WIDE_BUCKET_PENALTY
    return total


def lookahead_score(candidate: WordEntry, answer_view: View, valid_answer_count: int, turn: int) -> float:
    """Lookahead bonus against the first `valid_answer_count` entries of `answer_view`."""
    if valid_answer_count <= 1:
        return 0.0
    answers = [e.word for e in answer_view[:valid_answer_count]]
    return lookahead_score_chars(candidate, words_to_chars(answers), turn)
