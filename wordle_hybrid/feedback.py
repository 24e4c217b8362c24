"""
Feedback Codec
==============

Green/Yellow/Black feedback for a guess against an answer, in two forms:

- a human-readable pattern string such as ``"GYBBB"`` (``compute_feedback``)
- a compact base-3 integer in ``[0, 243)`` (``encode``)

Position i contributes ``digit * 3**i`` (Black=0, Yellow=1, Green=2), so the
least-significant digit belongs to the first letter and all-green is 242.

The hot paths run on ``(n, 5)`` arrays of letter codes (A=0 .. Z=25) through
numba kernels; the string functions are thin wrappers for callers that deal
in words.
"""

import numpy as np
from numba import jit
from typing import Sequence


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
N_PATTERNS = 243  # 3^5 possible feedback patterns
CORRECT_PATTERN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242 (all green)

BLACK = 0
YELLOW = 1
GREEN = 2

PATTERN_CHARS = "BYG"  # indexed by digit value
ALL_GREEN = "G" * WORD_LENGTH


# ============================================================================
# NUMBA KERNELS
# ============================================================================

@jit(nopython=True, cache=True)
def feedback_states(guess: np.ndarray, answer: np.ndarray) -> np.ndarray:
    """
    Per-position feedback digits for one guess/answer pair.

    Args:
        guess: shape (5,) array of letter codes (0-25)
        answer: shape (5,) array of letter codes

    Returns:
        shape (5,) array with values BLACK / YELLOW / GREEN
    """
    states = np.zeros(5, dtype=np.int32)
    unmatched = np.zeros(26, dtype=np.int32)

    # First pass: greens, and tally answer letters not matched in place
    for i in range(5):
        if guess[i] == answer[i]:
            states[i] = 2
        else:
            unmatched[answer[i]] += 1

    # Second pass: yellows consume the tally
    for i in range(5):
        if states[i] == 0:
            c = guess[i]
            if unmatched[c] > 0:
                states[i] = 1
                unmatched[c] -= 1

    return states


@jit(nopython=True, cache=True)
def feedback_code(guess: np.ndarray, answer: np.ndarray) -> int:
    """Integer feedback pattern (0-242) for one guess/answer pair."""
    states = feedback_states(guess, answer)
    return states[0] + 3*states[1] + 9*states[2] + 27*states[3] + 81*states[4]


@jit(nopython=True, cache=True)
def feedback_row(guess: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Feedback codes of one guess against every answer.

    Args:
        guess: shape (5,) letter codes
        answer_chars: shape (n_answers, 5) letter codes

    Returns:
        shape (n_answers,) uint8 array of codes
    """
    n_answers = answer_chars.shape[0]
    row = np.zeros(n_answers, dtype=np.uint8)
    for j in range(n_answers):
        row[j] = feedback_code(guess, answer_chars[j])
    return row


# ============================================================================
# WORD HELPERS
# ============================================================================

def normalize_word(word: str) -> str:
    """Upper-case a word and check it is five letters A-Z."""
    if not isinstance(word, str):
        raise TypeError(f"word must be a string, got {type(word).__name__}")
    w = word.strip().upper()
    if len(w) != WORD_LENGTH or not w.isascii() or not w.isalpha():
        raise ValueError(f"'{word}' is not a {WORD_LENGTH}-letter word")
    return w


def word_to_chars(word: str) -> np.ndarray:
    """Convert one word to a shape (5,) letter code array."""
    w = normalize_word(word)
    return np.frombuffer(w.encode("ascii"), dtype=np.uint8).astype(np.int32) - 65


def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to a shape (n, 5) letter code array."""
    if len(words) == 0:
        return np.zeros((0, WORD_LENGTH), dtype=np.int32)
    joined = "".join(normalize_word(w) for w in words)
    codes = np.frombuffer(joined.encode("ascii"), dtype=np.uint8).astype(np.int32) - 65
    return codes.reshape(len(words), WORD_LENGTH)


# ============================================================================
# PATTERN HELPERS
# ============================================================================

def normalize_pattern(pattern: str) -> str:
    """Upper-case a feedback pattern and check it uses only B/Y/G."""
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a string, got {type(pattern).__name__}")
    p = pattern.strip().upper()
    if len(p) != WORD_LENGTH:
        raise ValueError(f"pattern '{pattern}' must be {WORD_LENGTH} characters")
    for c in p:
        if c not in PATTERN_CHARS:
            raise ValueError(f"Invalid pattern char: {c}")
    return p


def pattern_to_code(pattern: str) -> int:
    """Convert pattern string (e.g., 'BBYGG') to integer (0-242)."""
    result = 0
    multiplier = 1
    for c in normalize_pattern(pattern):
        result += PATTERN_CHARS.index(c) * multiplier
        multiplier *= 3
    return result


def code_to_pattern(code: int) -> str:
    """Convert integer (0-242) to pattern string."""
    if not 0 <= code < N_PATTERNS:
        raise ValueError(f"pattern code out of range: {code}")
    chars = []
    for _ in range(WORD_LENGTH):
        chars.append(PATTERN_CHARS[code % 3])
        code //= 3
    return "".join(chars)


# ============================================================================
# PUBLIC CODEC
# ============================================================================

def compute_feedback(guess: str, answer: str) -> str:
    """
    Feedback pattern for `guess` against `answer`.

    Greens are marked first so they consume answer letters; a repeated guess
    letter only turns yellow while unmatched copies remain. Guessing "SPEED"
    against "ABIDE" gives "BBYBY": a single yellow E.
    """
    states = feedback_states(word_to_chars(guess), word_to_chars(answer))
    return "".join(PATTERN_CHARS[s] for s in states)


def encode(guess: str, answer: str) -> int:
    """Integer feedback code in [0, 243) for `guess` against `answer`."""
    return int(feedback_code(word_to_chars(guess), word_to_chars(answer)))
