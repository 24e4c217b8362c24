"""
Orderings over a word pool.

Each ordering is a sort key; words are unique inside a pool so every key ends
in the word itself and the resulting order is total.
"""

from enum import Enum
from typing import Callable, Dict, Optional

from .pool import NounClass, VerbClass, View, WordEntry, WordPool


# Preferred tags sort first
NOUN_ORDER: Dict[NounClass, int] = {
    NounClass.PRONOUN: 0,
    NounClass.SINGULAR: 1,
    NounClass.NOT_NOUN: 2,
    NounClass.PLURAL: 3,
}

VERB_ORDER: Dict[VerbClass, int] = {
    VerbClass.NOT_VERB: 0,
    VerbClass.PRESENT: 1,
    VerbClass.THIRD_PERSON: 2,
    VerbClass.PAST: 3,
}


def entropy_desc_key(e: WordEntry):
    return (e.eliminated, -e.entropy, e.has_duplicate_letters,
            NOUN_ORDER[e.noun_class], VERB_ORDER[e.verb_class],
            -e.frequency_rank, e.word)


def rank_desc_key(e: WordEntry):
    return (e.eliminated, -e.frequency_rank, e.has_duplicate_letters,
            NOUN_ORDER[e.noun_class], VERB_ORDER[e.verb_class],
            -e.entropy, e.word)


def entropy_no_filter_desc_key(e: WordEntry):
    # Entropy first; at equal entropy (0.0 late in a game) a live word beats a burner
    return (-e.entropy, e.eliminated, e.has_duplicate_letters,
            NOUN_ORDER[e.noun_class], VERB_ORDER[e.verb_class],
            -e.frequency_rank, e.word)


def eliminated_then_alpha_key(e: WordEntry):
    return (e.eliminated, e.word)


class Ordering(Enum):
    ENTROPY_DESC = "entropy_desc"
    RANK_DESC = "rank_desc"
    ENTROPY_NO_FILTER_DESC = "entropy_no_filter_desc"
    ELIMINATED_THEN_ALPHA = "eliminated_then_alpha"

    @property
    def key(self) -> Callable[[WordEntry], tuple]:
        return _KEYS[self]


_KEYS = {
    Ordering.ENTROPY_DESC: entropy_desc_key,
    Ordering.RANK_DESC: rank_desc_key,
    Ordering.ENTROPY_NO_FILTER_DESC: entropy_no_filter_desc_key,
    Ordering.ELIMINATED_THEN_ALPHA: eliminated_then_alpha_key,
}


def build_view(pool: WordPool, ordering: Ordering, count: Optional[int] = None) -> View:
    """
    Sorted view over the first `count` entries of `pool`.

    The pool itself is not touched; the view only holds indices into it.
    """
    n = len(pool) if count is None else count
    if not 0 <= n <= len(pool):
        raise ValueError(f"count {n} outside pool of {len(pool)}")
    key = ordering.key
    entries = pool.entries
    order = sorted(range(n), key=lambda i: key(entries[i]))
    return View(pool, order)


def compact(pool: WordPool, count: Optional[int] = None) -> int:
    """
    Move surviving words to the front of the first `count` entries, sorted
    alphabetically, and return how many survived.

    The pool is physically reordered, so views built before the call are stale.
    """
    n = len(pool) if count is None else count
    if not 0 <= n <= len(pool):
        raise ValueError(f"count {n} outside pool of {len(pool)}")
    entries = pool.entries
    prefix = sorted(range(n), key=lambda i: eliminated_then_alpha_key(entries[i]))
    pool.reorder(prefix + list(range(n, len(pool))))

    for i in range(n):
        if pool.entries[i].eliminated:
            return i
    return n
