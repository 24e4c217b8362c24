"""
Strategy Engine
===============

Picks the next guess from two sorted views of the pool. Stages are tried in
order and the first one that finds a candidate wins:

1. Turn-2 coverage (most unseen letters among common words)
2. Vowel contingency (turn 2 with fewer than two vowels known)
3. Early bias (anchor letters or unique vowels on turns 1-2)
4. Positional heatmap
5. Main loop: entropy plus optional one-ply lookahead
6. Rank tie-break: prefer a common word when it costs little entropy

Once 20 or fewer answers remain ("panic"), the linguistic filter, the risk
filter and the lookahead bonus are all switched off and the pick is pure
entropy.
"""

from collections import namedtuple
from typing import List, Optional

import numpy as np

from .config import BaseStrategy, StrategyConfig
from .constraints import VOWELS, ConstraintState
from .feedback import words_to_chars
from .lookahead import lookahead_score_chars
from .pool import NounClass, VerbClass, View, WordEntry


# ============================================================================
# CONSTANTS
# ============================================================================

COVERAGE_SCAN = 100
CONTINGENCY_SCAN = 30
EARLY_BIAS_SCAN = 30
HEATMAP_SCAN = 20
PRUNE_COUNT = 60

PANIC_THRESHOLD = 20
ENDGAME_SOLVER_THRESHOLD = 10

Recommendation = namedtuple("Recommendation", ["label", "entry"])

RECOMMENDATION_LABELS = (
    "Entropy Raw (Max Info)",
    "Entropy Filtered",
    "Rank Raw (Most Common)",
    "Rank Filtered",
)


# ============================================================================
# FILTERS AND SCORES
# ============================================================================

def is_linguistically_sound(entry: WordEntry) -> bool:
    """Plural nouns and past / third-person verbs are unlikely answers."""
    if entry.noun_class is NounClass.PLURAL:
        return False
    return entry.verb_class not in (VerbClass.PAST, VerbClass.THIRD_PERSON)


def meets_filtered_criteria(entry: WordEntry) -> bool:
    """Stricter test used for the "Filtered" recommendations."""
    if entry.has_duplicate_letters:
        return False
    if entry.noun_class in (NounClass.PLURAL, NounClass.PRONOUN):
        return False
    return entry.verb_class in (VerbClass.NOT_VERB, VerbClass.PRESENT)


def passes_filters(entry: WordEntry, config: StrategyConfig, constraints: ConstraintState,
                   turn: int, panic: bool = False) -> bool:
    apply_ling = config.use_linguistic_filter and turn >= config.linguistic_filter_start_turn
    if apply_ling and not panic and not is_linguistically_sound(entry):
        return False
    if config.use_risk_filter and not panic and constraints.is_risky(entry.word):
        return False
    return True


def anchor_score(word: str) -> int:
    score = 0
    if word[4] == "Y":
        score += 3
    elif word[4] == "E":
        score += 2
    if word[2] in "AEIOU":
        score += 1
    return score


def unique_vowel_count(word: str) -> int:
    return sum(1 for c in set(word) if c in VOWELS)


def build_heatmap(entries: List[WordEntry]) -> np.ndarray:
    """5 x 26 count of letters per position over the surviving entries."""
    live = [e.word for e in entries if not e.eliminated]
    heatmap = np.zeros((5, 26), dtype=np.int64)
    if live:
        chars = words_to_chars(live)
        for pos in range(5):
            heatmap[pos] += np.bincount(chars[:, pos], minlength=26)
    return heatmap


def heatmap_score(word: str, heatmap: np.ndarray) -> int:
    return int(sum(heatmap[pos, ord(c) - 65] for pos, c in enumerate(word)))


# ============================================================================
# STAGES
# ============================================================================

def _coverage_pick(rank_view, pool_size, config, constraints, turn) -> Optional[WordEntry]:
    best, best_cov = None, -1
    for cand in rank_view[:min(pool_size, COVERAGE_SCAN)]:
        if cand.eliminated or not passes_filters(cand, config, constraints, turn):
            continue
        cov = constraints.new_letter_coverage(cand.word)
        if cov > best_cov:
            best, best_cov = cand, cov
    return best


def _best_by_score(entropy_view, pool_size, scan, score_fn, config, constraints, turn) -> Optional[WordEntry]:
    """Highest score among the first `scan` filter-passing entries; ties go to higher entropy."""
    best, best_score, best_ent = None, -1, -1.0
    for cand in entropy_view[:min(pool_size, scan)]:
        if not passes_filters(cand, config, constraints, turn):
            continue
        sc = score_fn(cand.word)
        if sc > best_score or (sc == best_score and cand.entropy > best_ent):
            best, best_score, best_ent = cand, sc, cand.entropy
    return best


def _heatmap_pick(entropy_view, pool_size, config, constraints, turn) -> Optional[WordEntry]:
    heatmap = build_heatmap(entropy_view[:pool_size])
    best, best_score, scanned = None, -1, 0
    for cand in entropy_view[:pool_size]:
        if scanned >= HEATMAP_SCAN:
            break
        if not passes_filters(cand, config, constraints, turn):
            continue
        score = heatmap_score(cand.word, heatmap)
        if score > best_score:
            best, best_score = cand, score
        scanned += 1
    return best


def select_guess(entropy_view: View, rank_view: View, pool_size: int, config: StrategyConfig,
                 constraints: ConstraintState, valid_answer_count: int, turn: int) -> Optional[WordEntry]:
    """
    Choose the guess for `turn`.

    Args:
        entropy_view: candidates sorted by entropy
        rank_view: candidates sorted by frequency rank; its first
            `valid_answer_count` entries are the surviving answers
        pool_size: number of candidates in both views
        config: strategy switches
        constraints: letter minimums learned so far
        valid_answer_count: answers still possible
        turn: 1-based turn being chosen for

    Returns:
        the chosen entry, or None when the pool is empty
    """
    if pool_size == 0:
        return None

    if config.turn2_coverage_priority and turn == 2:
        pick = _coverage_pick(rank_view, pool_size, config, constraints, turn)
        if pick is not None:
            return pick

    if config.prioritize_vowel_contingency and turn == 2 and constraints.known_vowel_count() < 2:
        pick = _best_by_score(entropy_view, pool_size, CONTINGENCY_SCAN,
                              constraints.new_vowel_count, config, constraints, turn)
        if pick is not None:
            return pick

    if turn <= 2 and (config.prioritize_new_vowels or config.prioritize_anchors):
        score_fn = anchor_score if config.prioritize_anchors else unique_vowel_count
        pick = _best_by_score(entropy_view, pool_size, EARLY_BIAS_SCAN,
                              score_fn, config, constraints, turn)
        if pick is not None:
            return pick

    if config.heatmap_priority and valid_answer_count > 2:
        pick = _heatmap_pick(entropy_view, pool_size, config, constraints, turn)
        if pick is not None:
            return pick

    # Main loop
    panic = valid_answer_count <= PANIC_THRESHOLD
    use_lookahead = config.lookahead_depth > 0 and not panic
    max_evals = PRUNE_COUNT if use_lookahead else pool_size
    answer_chars = words_to_chars(rank_view.words(valid_answer_count)) if use_lookahead else None

    best, best_score, evaluated = None, -1000.0, 0
    for cand in entropy_view[:pool_size]:
        if evaluated >= max_evals:
            break
        endgame_solver = not cand.eliminated and valid_answer_count <= ENDGAME_SOLVER_THRESHOLD
        if not endgame_solver and not passes_filters(cand, config, constraints, turn, panic):
            continue
        score = cand.entropy
        if use_lookahead:
            score += lookahead_score_chars(cand, answer_chars, turn)
        if score > best_score:
            best, best_score = cand, score
        evaluated += 1
    if best is None:
        best = entropy_view[0]

    # Rank tie-break
    if config.rank_priority_tolerance > 0 and not panic:
        rank_pick = rank_view[0]
        for cand in rank_view[:pool_size]:
            endgame_solver = not cand.eliminated and valid_answer_count <= ENDGAME_SOLVER_THRESHOLD
            if endgame_solver or passes_filters(cand, config, constraints, turn):
                rank_pick = cand
                break
        if best.entropy - rank_pick.entropy < config.rank_priority_tolerance:
            return rank_pick

    return best


# ============================================================================
# STANDARD RECOMMENDATIONS
# ============================================================================

def find_filtered_candidate(view: View, count: int) -> Optional[WordEntry]:
    """First surviving entry meeting the filtered criteria; stops at the first eliminated one."""
    for entry in view[:count]:
        if entry.eliminated:
            break
        if meets_filtered_criteria(entry):
            return entry
    return None


def best_guess_candidates(entropy_view: View, rank_view: View, count: int) -> List[Recommendation]:
    """
    The four standard picks, indexed by the simple BaseStrategy values:
    Entropy Raw, Entropy Filtered, Rank Raw, Rank Filtered.
    """
    if count == 0:
        return []
    entropy_raw = entropy_view[0]
    rank_raw = rank_view[0]
    entropy_filtered = find_filtered_candidate(entropy_view, count) or entropy_raw
    rank_filtered = find_filtered_candidate(rank_view, count) or rank_raw
    picks = (entropy_raw, entropy_filtered, rank_raw, rank_filtered)
    return [Recommendation(label, entry) for label, entry in zip(RECOMMENDATION_LABELS, picks)]


def recommendation_for(base: BaseStrategy, entropy_view: View, rank_view: View, count: int) -> Optional[WordEntry]:
    """Standard recommendation a simple strategy plays."""
    if not base.is_simple:
        raise ValueError(f"{base.name} has no standard recommendation")
    recs = best_guess_candidates(entropy_view, rank_view, count)
    return recs[int(base)].entry if recs else None
