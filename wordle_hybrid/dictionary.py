"""
Dictionary file loading.

Each line of the dictionary is fixed width::

    ABACK042NN
    |    |  ||
    |    |  |+- verb tag  (N, P, S, T)
    |    |  +-- noun tag  (R, S, N, P)
    |    +----- frequency rank, 3 digits (0-100)
    +---------- word

Lines shorter than 10 characters after trimming are ignored.
"""

import re
from typing import Iterable, List, Optional, Set

from .entropy import recompute_full
from .pool import NounClass, VerbClass, WordEntry, WordPool


MIN_LINE_LENGTH = 10


def parse_entry(line: str) -> Optional[WordEntry]:
    """
    Parse one dictionary line.

    Returns:
        the entry, or None for a short / blank line

    Raises:
        ValueError: malformed word, rank or tag
    """
    line = line.rstrip()
    if len(line) < MIN_LINE_LENGTH:
        return None

    word = line[0:5]
    rank_str = line[5:8].strip()
    if not rank_str.isdigit():
        raise ValueError(f"bad frequency rank '{line[5:8]}' in line '{line}'")
    return WordEntry(word, int(rank_str), NounClass(line[8].upper()), VerbClass(line[9].upper()))


def load_used_words(filepath: str) -> Set[str]:
    """Load previously used answers: 5-letter tokens separated by whitespace or commas."""
    with open(filepath, 'r') as f:
        text = f.read()
    return {tok.upper() for tok in re.split(r"[\s,]+", text) if len(tok) == 5 and tok.isalpha()}


def load_dictionary(filepath: str, used_words: Optional[Iterable[str]] = None,
                    compute_entropy: bool = True, verbose: bool = False) -> WordPool:
    """
    Load the dictionary into a WordPool.

    Args:
        filepath: path to the fixed-width dictionary
        used_words: answers to drop (already played)
        compute_entropy: score every word against the full list
        verbose: print load summary

    Returns:
        WordPool whose reset state includes the computed entropy
    """
    used = {w.upper() for w in used_words} if used_words else set()
    entries: List[WordEntry] = []
    total = 0
    skipped = 0

    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, 1):
            try:
                entry = parse_entry(line)
            except ValueError as e:
                raise ValueError(f"{filepath}:{lineno}: {e}") from e
            if entry is None:
                continue
            total += 1
            if entry.word in used:
                skipped += 1
                continue
            entries.append(entry)

    if not entries:
        raise ValueError(f"No words loaded from {filepath}")

    pool = WordPool(entries)
    if verbose:
        print(f"Loaded {len(pool)} words from {filepath}")
        if used:
            print(f"Filtered out {skipped} used words from {total} loaded")

    if compute_entropy:
        if verbose:
            print("Calculating entropy for each word in the dictionary...")
        recompute_full(pool)
        pool.checkpoint()
    return pool
