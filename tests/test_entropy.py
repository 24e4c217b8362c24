import math

import numpy as np
import pytest

from wordle_hybrid.entropy import (
    batch_entropy,
    entropy_of,
    recompute_candidates_vs_answers,
    recompute_full,
)
from wordle_hybrid.feedback import words_to_chars
from wordle_hybrid.pool import WordPool


def test_zero_or_one_answer_has_no_information():
    assert entropy_of("CRANE", []) == 0.0
    assert entropy_of("CRANE", ["TRACE"]) == 0.0


def test_four_distinct_patterns_is_two_bits():
    # CRANE gives GGGGG, YGGBG, BBBBB, BBBBY against these
    answers = ["CRANE", "TRACE", "ZZZZZ", "SPEED"]
    assert entropy_of("CRANE", answers) == pytest.approx(2.0)


def test_single_bucket_is_zero():
    assert entropy_of("CRANE", ["ZZZZZ", "QQQQQ", "JJJJJ"]) == pytest.approx(0.0)


def test_entropy_is_order_invariant():
    answers = ["CRANE", "TRACE", "ZZZZZ", "SPEED", "SLATE", "GRACE"]
    assert entropy_of("SLATE", answers) == pytest.approx(entropy_of("SLATE", list(reversed(answers))))


def test_batch_entropy_handles_empty_inputs():
    empty = words_to_chars([])
    some = words_to_chars(["CRANE", "TRACE"])
    assert batch_entropy(empty, some).shape == (0,)
    assert np.all(batch_entropy(some, empty) == 0.0)


def test_recompute_full_scores_against_surviving_words_only():
    pool = WordPool.from_words(["CRANE", "TRACE", "ZZZZZ", "SPEED"])
    pool.find("SPEED").eliminated = True

    recompute_full(pool)

    assert pool.find("SPEED").entropy == 0.0
    # survivors score against survivors, themselves included
    assert pool.find("CRANE").entropy == pytest.approx(math.log2(3))
    assert pool.find("CRANE").entropy == pytest.approx(entropy_of("CRANE", ["CRANE", "TRACE", "ZZZZZ"]))


def test_recompute_full_respects_prefix():
    pool = WordPool.from_words(["CRANE", "TRACE", "ZZZZZ", "SPEED"])
    pool.find("SPEED").entropy = 7.0

    recompute_full(pool, count=3)

    assert pool.find("SPEED").entropy == 7.0
    assert pool.find("CRANE").entropy == pytest.approx(math.log2(3))


def test_candidates_vs_answers_scores_eliminated_words_too():
    pool = WordPool.from_words(["CRANE", "TRACE", "ZZZZZ", "SPEED"])
    pool.find("CRANE").eliminated = True
    answers = [e for e in pool if e.word in ("TRACE", "ZZZZZ", "SPEED")]

    recompute_candidates_vs_answers(pool, answers)

    assert pool.find("CRANE").entropy == pytest.approx(entropy_of("CRANE", ["TRACE", "ZZZZZ", "SPEED"]))
    assert pool.find("CRANE").entropy > 0.0
