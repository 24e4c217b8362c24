"""
Entropy Engine
==============

Shannon entropy of a guess over the feedback buckets it would produce against
a set of possible answers:

    H(guess) = -sum(p * log2(p))  where p = |bucket| / |answers|

Two scopes are used by the solver:

- ``recompute_full``: guesses and answers are both the surviving words
  (hard mode, and the opener on a fresh pool)
- ``recompute_candidates_vs_answers``: every word is scored against the
  surviving answers, so eliminated words can still be played for information
"""

import numpy as np
from numba import jit, prange
from typing import Iterable, Optional

from .feedback import N_PATTERNS, feedback_code, word_to_chars, words_to_chars
from .pool import WordEntry, WordPool


# ============================================================================
# NUMBA KERNELS
# ============================================================================

@jit(nopython=True, cache=True)
def pattern_histogram(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """Count how many answers fall into each of the 243 feedback buckets."""
    counts = np.zeros(N_PATTERNS, dtype=np.int64)
    for j in range(answer_chars.shape[0]):
        counts[feedback_code(guess, answer_chars[j])] += 1
    return counts


@jit(nopython=True, cache=True)
def entropy_from_histogram(counts: np.ndarray, total: int) -> float:
    """Shannon entropy in bits of a bucket histogram."""
    if total <= 1:
        return 0.0
    entropy = 0.0
    inv_total = 1.0 / total
    for k in range(counts.shape[0]):
        if counts[k] > 0:
            p = counts[k] * inv_total
            entropy -= p * np.log2(p)
    return entropy


@jit(nopython=True, parallel=True, cache=True)
def batch_entropy(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Entropy of every guess against the same answer set.

    Args:
        guess_chars: shape (n_guesses, 5) letter codes
        answer_chars: shape (n_answers, 5) letter codes

    Returns:
        shape (n_guesses,) float64 entropies
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros(n_guesses, dtype=np.float64)
    if n_answers <= 1:
        return result

    for i in prange(n_guesses):
        counts = pattern_histogram(guess_chars[i], answer_chars)
        result[i] = entropy_from_histogram(counts, n_answers)

    return result


# ============================================================================
# POOL-LEVEL OPERATIONS
# ============================================================================

def entropy_of(guess: str, answers: Iterable[str]) -> float:
    """Entropy in bits of `guess` against a list of answer words."""
    answer_list = list(answers)
    if len(answer_list) <= 1:
        return 0.0
    counts = pattern_histogram(word_to_chars(guess), words_to_chars(answer_list))
    return float(entropy_from_histogram(counts, len(answer_list)))


def recompute_full(pool: WordPool, count: Optional[int] = None):
    """
    Hard-mode scope: score each surviving word in the first `count` entries
    against all surviving words of that prefix, the word itself included.
    Eliminated entries are set to 0.0.
    """
    n = len(pool) if count is None else count
    valid = pool.valid_indices(n)
    chars = pool.chars
    valid_chars = chars[valid]
    scores = batch_entropy(valid_chars, valid_chars)

    entries = pool.entries
    for i in range(n):
        entries[i].entropy = 0.0
    for idx, h in zip(valid.tolist(), scores.tolist()):
        entries[idx].entropy = h


def recompute_candidates_vs_answers(pool: WordPool, answers: Iterable[WordEntry]):
    """Normal-mode scope: score every entry, eliminated or not, against `answers`."""
    answer_chars = words_to_chars([a.word for a in answers])
    scores = batch_entropy(pool.chars, answer_chars)
    for entry, h in zip(pool.entries, scores.tolist()):
        entry.entropy = h
