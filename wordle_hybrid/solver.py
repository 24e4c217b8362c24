"""
Hybrid Wordle Solver
====================

Runs one game for one strategy. After every guess the pool is filtered and
re-scored, then the strategy picks the next word.

Two scan modes:

- Normal scan (normal mode, Smart / Entropy Raw / Entropy Filtered): the whole
  dictionary stays playable and every word is scored against the surviving
  answers, so an eliminated "burner" word can be the best probe.
- Hard scan (hard mode, or the rank-based simple strategies): the pool is
  compacted to the surviving words, which are both the guesses and the answers.
"""

from typing import List, NamedTuple, Optional, Tuple

from .config import MAX_GUESSES, BaseStrategy, StrategyConfig
from .constraints import ConstraintState, apply_feedback
from .entropy import recompute_candidates_vs_answers, recompute_full
from .feedback import ALL_GREEN, compute_feedback, normalize_pattern, normalize_word
from .pool import WordEntry, WordPool
from .ranking import Ordering, build_view, compact
from .strategy import Recommendation, best_guess_candidates, recommendation_for, select_guess


NORMAL_SCAN_STRATEGIES = (BaseStrategy.SMART, BaseStrategy.ENTROPY_RAW, BaseStrategy.ENTROPY_FILTERED)


class GameResult(NamedTuple):
    won: bool
    guesses: int
    history: List[Tuple[str, str]]


class HybridSolver:
    """
    Per-game solver session.

    The solver owns `pool` for the duration of a game and mutates it;
    pass a private copy when the same word list is shared.
    """

    def __init__(self, pool: WordPool, config: StrategyConfig, hard_mode: bool = False,
                 opener: Optional[str] = None):
        """
        Args:
            pool: word pool with entropy already computed over the full list
            config: strategy to play
            hard_mode: compact the pool to surviving words every turn
            opener: precomputed first guess; computed from the pool if None
        """
        if len(pool) == 0:
            raise ValueError("Cannot solve with an empty word pool")
        self.pool = pool
        self.config = config
        self.hard_mode = hard_mode
        self.normal_scan = not hard_mode and config.base_strategy in NORMAL_SCAN_STRATEGIES
        self.constraints = ConstraintState()
        self._opener = normalize_word(opener) if opener else None
        self.reset()

    def reset(self):
        """Restore the pool to its load-time state for a new game."""
        self.pool.reset()
        self.constraints.reset()
        self.count = len(self.pool)
        self.valid_count = self.pool.valid_count()
        self.turn = 0
        self.history: List[Tuple[str, str]] = []
        self.entropy_view = None
        self.rank_view = None

    # ---------- views ----------

    def _build_views(self):
        if self.turn > 0 and self.normal_scan:
            self.entropy_view = build_view(self.pool, Ordering.ENTROPY_NO_FILTER_DESC, self.count)
        else:
            self.entropy_view = build_view(self.pool, Ordering.ENTROPY_DESC, self.count)
        self.rank_view = build_view(self.pool, Ordering.RANK_DESC, self.count)

    def _ensure_views(self):
        if self.entropy_view is None or self.entropy_view.generation != self.pool.generation:
            self._build_views()

    def candidates(self) -> List[WordEntry]:
        """Words that are still possible answers."""
        return self.pool.valid_entries(self.count)

    def recommendations(self) -> List[Recommendation]:
        """The four standard recommendations for the current position."""
        self._ensure_views()
        return best_guess_candidates(self.entropy_view, self.rank_view, self.count)

    # ---------- turn loop ----------

    def opening_guess(self) -> str:
        """First guess: the override word, the standard pick, or the smart pick at turn 1."""
        if self._opener:
            return self._opener
        if self.config.opener_override:
            return self.config.opener_override

        self._ensure_views()
        base = self.config.base_strategy
        if base.is_simple:
            pick = recommendation_for(base, self.entropy_view, self.rank_view, self.count)
        else:
            pick = select_guess(self.entropy_view, self.rank_view, self.count, self.config,
                                self.constraints, self.count, 1)
        return pick.word

    def update(self, guess: str, feedback: str) -> int:
        """
        Apply feedback for `guess`, then re-score and re-sort the pool.

        Returns:
            number of answers still possible
        """
        guess = normalize_word(guess)
        feedback = normalize_pattern(feedback)
        if self.turn >= MAX_GUESSES:
            raise RuntimeError(f"No guesses left after {MAX_GUESSES} turns")

        self.constraints.update(guess, feedback)
        apply_feedback(self.pool, guess, feedback, self.count)
        self.history.append((guess, feedback))
        self.turn += 1

        if self.normal_scan:
            answers = self.pool.valid_entries(self.count)
            self.valid_count = len(answers)
            recompute_candidates_vs_answers(self.pool, answers)
        else:
            self.count = compact(self.pool, self.count)
            self.valid_count = self.count
            recompute_full(self.pool, self.count)

        self._build_views()
        return self.valid_count

    def next_guess(self) -> Optional[str]:
        """
        Guess for the upcoming turn, or None when no answer is left.

        On the sixth turn a normal-scan Entropy Raw or Smart pick is always a
        surviving word: a burner there can only lose the game.
        """
        if self.turn == 0:
            return self.opening_guess()
        if self.valid_count == 0:
            return None

        self._ensure_views()
        config = self.config
        base = config.base_strategy
        upcoming = self.turn + 1

        if self.normal_scan:
            if upcoming == 2 and config.second_opener_override:
                return config.second_opener_override

            if base is BaseStrategy.ENTROPY_RAW:
                if upcoming == MAX_GUESSES:
                    pick = self.entropy_view.first_valid()
                else:
                    pick = self.entropy_view[0]
            elif base is BaseStrategy.ENTROPY_FILTERED:
                pick = self.entropy_view.first_valid()
            else:
                pick = select_guess(self.entropy_view, self.rank_view, self.count, config,
                                    self.constraints, self.valid_count, upcoming)
                # Last chance: never spend it on a word that cannot be the answer
                if upcoming == MAX_GUESSES and pick.eliminated:
                    pick = self.rank_view.first_valid()
        elif base.is_simple:
            pick = recommendation_for(base, self.entropy_view, self.rank_view, self.count)
        else:
            pick = select_guess(self.entropy_view, self.rank_view, self.count, config,
                                self.constraints, self.count, upcoming)

        return pick.word if pick is not None else None

    def play(self, target: str, verbose: bool = False) -> GameResult:
        """
        Play a full game against `target` from the current (fresh) state.

        Args:
            target: the hidden answer
            verbose: print each turn

        Returns:
            GameResult; `guesses` counts the guesses made
        """
        target = normalize_word(target)

        for turn in range(1, MAX_GUESSES + 1):
            guess = self.next_guess()
            if guess is None:
                break

            if guess == target:
                self.history.append((guess, ALL_GREEN))
                if verbose:
                    print(f"Turn {turn}: {guess} {ALL_GREEN}")
                return GameResult(True, turn, list(self.history))

            feedback = compute_feedback(guess, target)
            if turn == MAX_GUESSES:
                self.history.append((guess, feedback))
                if verbose:
                    print(f"Turn {turn}: {guess} {feedback}")
                break

            remaining = self.update(guess, feedback)
            if verbose:
                print(f"Turn {turn}: {guess} {feedback} ({remaining} candidates)")

        return GameResult(False, len(self.history), list(self.history))
