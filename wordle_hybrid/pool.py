"""
Word pool data model.

A ``WordPool`` is the private, mutable word list of one game. ``View`` objects
are ordered projections over a pool: they hold indices, never entry copies,
and refuse to be read once the pool has been physically reordered.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np

from .feedback import normalize_word, words_to_chars


class NounClass(Enum):
    """Noun tag from the dictionary file."""
    PRONOUN = "R"
    SINGULAR = "S"
    NOT_NOUN = "N"
    PLURAL = "P"


class VerbClass(Enum):
    """Verb tag from the dictionary file."""
    NOT_VERB = "N"
    PRESENT = "P"
    THIRD_PERSON = "S"
    PAST = "T"


class StaleViewError(RuntimeError):
    """Raised when a view is read after its pool was reordered."""


def has_duplicate_letters(word: str) -> bool:
    return len(set(word)) != len(word)


class WordEntry:
    """One dictionary word and its per-game state."""

    __slots__ = ("word", "entropy", "frequency_rank", "noun_class",
                 "verb_class", "has_duplicate_letters", "eliminated")

    def __init__(self, word: str, frequency_rank: int = 0,
                 noun_class: NounClass = NounClass.NOT_NOUN,
                 verb_class: VerbClass = VerbClass.NOT_VERB,
                 entropy: float = 0.0, eliminated: bool = False):
        if not 0 <= int(frequency_rank) <= 100:
            raise ValueError(f"frequency rank out of range for {word}: {frequency_rank}")
        self.word = normalize_word(word)
        self.frequency_rank = int(frequency_rank)
        self.noun_class = NounClass(noun_class)
        self.verb_class = VerbClass(verb_class)
        self.has_duplicate_letters = has_duplicate_letters(self.word)
        self.entropy = float(entropy)
        self.eliminated = bool(eliminated)

    def copy(self) -> "WordEntry":
        clone = WordEntry.__new__(WordEntry)
        for name in WordEntry.__slots__:
            setattr(clone, name, getattr(self, name))
        return clone

    def __getstate__(self):
        return tuple(getattr(self, name) for name in WordEntry.__slots__)

    def __setstate__(self, state):
        for name, value in zip(WordEntry.__slots__, state):
            setattr(self, name, value)

    def __repr__(self) -> str:
        flag = " eliminated" if self.eliminated else ""
        return (f"WordEntry({self.word} H={self.entropy:.4f} R={self.frequency_rank:03d} "
                f"{self.noun_class.value}{self.verb_class.value}{flag})")


class WordPool:
    """
    Ordered collection of WordEntry owned by a single game.

    The pool keeps a letter code matrix aligned with entry order for the
    numba kernels, and remembers its load-time state so `reset()` can reuse
    the same private copy for the next game.
    """

    def __init__(self, entries: Iterable[WordEntry]):
        self.entries: List[WordEntry] = list(entries)
        seen = set()
        for e in self.entries:
            if e.word in seen:
                raise ValueError(f"duplicate word in pool: {e.word}")
            seen.add(e.word)
        self.generation = 0
        self._chars: Optional[np.ndarray] = None
        self.checkpoint()

    @classmethod
    def from_words(cls, words: Sequence[str]) -> "WordPool":
        """Untagged pool, mostly useful for tests and quick experiments."""
        return cls(WordEntry(w) for w in words)

    def checkpoint(self):
        """Make the current order, entropy and flags the state `reset()` returns to."""
        self._initial_order = list(self.entries)
        self._initial_entropy = [e.entropy for e in self.entries]
        self._initial_eliminated = [e.eliminated for e in self.entries]
        self._initial_chars = self._chars

    # ---------- sequence protocol ----------

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, idx):
        return self.entries[idx]

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self.entries)

    def __contains__(self, word: str) -> bool:
        return self.find(word) is not None

    # ---------- lookups ----------

    @property
    def chars(self) -> np.ndarray:
        """Letter codes of the entries in current order, shape (n, 5)."""
        if self._chars is None:
            self._chars = words_to_chars([e.word for e in self.entries])
        return self._chars

    def find(self, word: str) -> Optional[WordEntry]:
        w = word.upper()
        for e in self.entries:
            if e.word == w:
                return e
        return None

    def valid_indices(self, count: Optional[int] = None) -> np.ndarray:
        n = len(self.entries) if count is None else count
        return np.array([i for i in range(n) if not self.entries[i].eliminated], dtype=np.int64)

    def valid_entries(self, count: Optional[int] = None) -> List[WordEntry]:
        n = len(self.entries) if count is None else count
        return [e for e in self.entries[:n] if not e.eliminated]

    def valid_count(self, count: Optional[int] = None) -> int:
        n = len(self.entries) if count is None else count
        return sum(1 for e in self.entries[:n] if not e.eliminated)

    def words(self) -> List[str]:
        return [e.word for e in self.entries]

    # ---------- mutation ----------

    def reorder(self, order: Sequence[int]):
        """Physically permute the entries. Existing views become stale."""
        chars = self._chars
        self.entries = [self.entries[i] for i in order]
        if chars is not None and len(order) == chars.shape[0]:
            self._chars = chars[np.asarray(order, dtype=np.int64)]
        else:
            self._chars = None
        self.generation += 1

    def copy(self) -> "WordPool":
        """Private deep copy whose load-time state is the current state."""
        clone = WordPool([e.copy() for e in self.entries])
        clone._chars = self._chars
        clone._initial_chars = self._chars
        return clone

    def reset(self):
        """Restore order, entropy and elimination flags to the load-time state."""
        if self.entries != self._initial_order:
            self.entries = list(self._initial_order)
            self._chars = self._initial_chars
            self.generation += 1
        for e, h, gone in zip(self.entries, self._initial_entropy, self._initial_eliminated):
            e.entropy = h
            e.eliminated = gone
        if self._initial_chars is None:
            self._initial_chars = self.chars

    def __getstate__(self):
        return {"entries": self.entries}

    def __setstate__(self, state):
        self.entries = state["entries"]
        self.generation = 0
        self._chars = None
        self.checkpoint()


class View:
    """
    Ordered, non-owning projection over a WordPool.

    A view is only valid for the pool layout it was built against; reading it
    after the pool was compacted or reset raises StaleViewError.
    """

    __slots__ = ("pool", "indices", "generation")

    def __init__(self, pool: WordPool, indices: Sequence[int]):
        self.pool = pool
        self.indices = list(indices)
        self.generation = pool.generation

    def _check(self):
        if self.generation != self.pool.generation:
            raise StaleViewError("view was built before the pool was reordered")

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, idx):
        self._check()
        if isinstance(idx, slice):
            return [self.pool.entries[i] for i in self.indices[idx]]
        return self.pool.entries[self.indices[idx]]

    def __iter__(self) -> Iterator[WordEntry]:
        self._check()
        entries = self.pool.entries
        return (entries[i] for i in self.indices)

    def words(self, n: Optional[int] = None) -> List[str]:
        return [e.word for e in self[:n]]

    def first_valid(self) -> Optional[WordEntry]:
        for e in self:
            if not e.eliminated:
                return e
        return None
