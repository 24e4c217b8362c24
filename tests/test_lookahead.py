import math

import pytest

from wordle_hybrid.lookahead import lookahead_score, lookahead_score_chars
from wordle_hybrid.feedback import words_to_chars
from wordle_hybrid.pool import WordEntry, WordPool
from wordle_hybrid.ranking import Ordering, build_view


def _answers(words):
    pool = WordPool.from_words(words)
    return build_view(pool, Ordering.RANK_DESC)


def test_no_bonus_with_one_answer_left():
    view = _answers(["TRACE", "CRANE"])
    assert lookahead_score(WordEntry("CRANE"), view, 1, 3) == 0.0
    assert lookahead_score(WordEntry("CRANE"), view, 0, 3) == 0.0


def test_perfect_split_scores_branching_and_sniper_bonus():
    # four distinct feedback patterns, all buckets of one
    view = _answers(["CRANE", "TRACE", "ZZZZZ", "SPEED"])
    cand = WordEntry("CRANE")
    assert lookahead_score(cand, view, 4, 1) == pytest.approx(math.log10(4))
    assert lookahead_score(cand, view, 4, 2) == pytest.approx(math.log10(4) + 4 * 0.04)


def test_doomsday_penalty_when_bucket_exceeds_guesses_left():
    # one bucket of three with two guesses left
    view = _answers(["ZZZZZ", "QQQQQ", "JJJJJ"])
    assert lookahead_score(WordEntry("CRANE"), view, 3, 4) == pytest.approx(-100.0)


def test_wide_bucket_penalty():
    # five answers share BBBBB, one is the guess itself: max bucket 5 > 6 // 2 + 1
    words = ["ZZZZZ", "QQQQQ", "JJJJJ", "XXXXX", "VVVVV", "CRANE"]
    view = _answers(words)
    expected = math.log10(36 / 26) - 5.0
    assert lookahead_score(WordEntry("CRANE"), view, 6, 1) == pytest.approx(expected)


def test_only_the_answer_prefix_is_used():
    view = _answers(["CRANE", "TRACE", "ZZZZZ", "SPEED"])
    cand = WordEntry("CRANE")
    prefix_words = [e.word for e in view[:2]]
    assert lookahead_score(cand, view, 2, 1) == pytest.approx(
        lookahead_score_chars(cand, words_to_chars(prefix_words), 1))
