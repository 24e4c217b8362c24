from wordle_hybrid.constraints import ConstraintState, apply_feedback
from wordle_hybrid.feedback import compute_feedback
from wordle_hybrid.pool import WordPool


def test_update_tracks_green_and_yellow_counts():
    c = ConstraintState()
    c.update("SPEED", "BBYBY")
    assert c.min_count("E") == 1
    assert c.min_count("D") == 1
    assert c.min_count("S") == 0


def test_counts_never_decrease():
    c = ConstraintState()
    c.update("SPEED", "BBGGB")
    assert c.min_count("E") == 2
    c.update("CRANE", "BBBBY")
    assert c.min_count("E") == 2


def test_risky_guess_repeats_unconfirmed_letter():
    c = ConstraintState()
    assert c.is_risky("SPEED")
    assert not c.is_risky("CRANE")
    c.update("SPEED", "BBYBY")
    assert c.is_risky("SPEED")
    c.update("EERIE", "GGBBB")
    assert not c.is_risky("SPEED")


def test_vowel_helpers():
    c = ConstraintState()
    c.update("CRANE", "BBYBB")
    assert c.known_vowel_count() == 1
    assert c.new_vowel_count("AUDIO") == 3
    c.update("FUNNY", "BBBBY")
    assert c.known_vowel_count() == 2


def test_new_letter_coverage():
    c = ConstraintState()
    c.update("CRANE", "GBBBB")
    assert c.new_letter_coverage("CLOTH") == 4
    assert c.new_letter_coverage("BUMPY") == 5
    assert c.new_letter_coverage("SPEED") == 4


def test_apply_feedback_keeps_only_consistent_words():
    words = ["TRACE", "CRANE", "GRACE", "BRACE", "SLATE", "CRATE"]
    pool = WordPool.from_words(words)
    fb = compute_feedback("CRANE", "TRACE")

    removed = apply_feedback(pool, "CRANE", fb)

    survivors = [e.word for e in pool if not e.eliminated]
    assert "TRACE" in survivors
    assert removed == len(words) - len(survivors)
    for w in survivors:
        assert compute_feedback("CRANE", w) == fb


def test_apply_feedback_is_monotonic():
    pool = WordPool.from_words(["TRACE", "CRANE", "GRACE", "BRACE", "SLATE", "CRATE"])
    apply_feedback(pool, "CRANE", compute_feedback("CRANE", "TRACE"))
    first = {e.word for e in pool if not e.eliminated}

    # feedback inconsistent with everything: never revives a word
    removed = apply_feedback(pool, "SLATE", "GGGGG")
    second = {e.word for e in pool if not e.eliminated}

    assert second <= first
    assert removed == len(first)
    assert apply_feedback(pool, "CRANE", compute_feedback("CRANE", "TRACE")) == 0


def test_apply_feedback_respects_prefix():
    pool = WordPool.from_words(["TRACE", "ZZZZZ"])
    assert apply_feedback(pool, "CRANE", "YGGBG", count=1) == 0
    assert not pool.find("ZZZZZ").eliminated
