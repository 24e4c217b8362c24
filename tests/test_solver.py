import pytest

from wordle_hybrid.config import STRATEGIES, BaseStrategy, get_strategy
from wordle_hybrid.feedback import ALL_GREEN, compute_feedback
from wordle_hybrid.pool import WordPool
from wordle_hybrid.solver import HybridSolver


def test_scan_mode_selection(ten_word_pool):
    assert HybridSolver(ten_word_pool, STRATEGIES[0]).normal_scan
    assert HybridSolver(ten_word_pool, STRATEGIES[1]).normal_scan
    assert not HybridSolver(ten_word_pool, STRATEGIES[11]).normal_scan
    assert not HybridSolver(ten_word_pool, STRATEGIES[0], hard_mode=True).normal_scan


def test_empty_pool_rejected():
    with pytest.raises(ValueError):
        HybridSolver(WordPool([]), STRATEGIES[0])


def test_opening_guess_for_simple_and_override(ten_word_pool):
    assert HybridSolver(ten_word_pool, get_strategy("Rank Raw")).opening_guess() == "CRANE"
    assert HybridSolver(ten_word_pool, get_strategy("Vowel Hunter (Adieu)")).opening_guess() == "ADIEU"
    assert HybridSolver(ten_word_pool, STRATEGIES[0], opener="slate").opening_guess() == "SLATE"
    assert HybridSolver(ten_word_pool, STRATEGIES[0]).opening_guess() in ten_word_pool


def test_update_returns_surviving_answers(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0])
    remaining = solver.update("SHINE", compute_feedback("SHINE", "TRACE"))
    words = sorted(e.word for e in solver.candidates())
    assert remaining == len(words)
    assert words == ["BRACE", "CRATE", "GRACE", "TRACE"]
    # normal scan keeps the whole pool playable
    assert solver.count == 10


def test_hard_mode_compacts_pool(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0], hard_mode=True)
    remaining = solver.update("SHINE", compute_feedback("SHINE", "TRACE"))
    assert remaining == solver.count == 4
    assert [e.word for e in ten_word_pool[:4]] == ["BRACE", "CRATE", "GRACE", "TRACE"]
    assert not any(e.eliminated for e in ten_word_pool[:4])
    assert solver.next_guess() in {"BRACE", "CRATE", "GRACE", "TRACE"}


def test_no_guess_when_nothing_survives(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0])
    assert solver.update("CRANE", "GGGGB") == 0
    assert solver.next_guess() is None


def test_second_opener_in_normal_mode(ten_word_pool):
    config = get_strategy("Double Barrel (Salet/Courd)")
    solver = HybridSolver(ten_word_pool, config)
    assert solver.next_guess() == "SALET"
    solver.update("SALET", compute_feedback("SALET", "GHOST"))
    assert solver.next_guess() == "COURD"


def test_final_turn_never_wastes_guess_on_burner(ten_word_pool):
    for config in (STRATEGIES[0], STRATEGIES[1], STRATEGIES[9]):
        solver = HybridSolver(ten_word_pool, config)
        solver.update("SHINE", compute_feedback("SHINE", "TRACE"))
        for _ in range(4):
            solver.update("ZZZZZ", "BBBBB")
        assert solver.turn == 5
        guess = solver.next_guess()
        assert not ten_word_pool.find(guess).eliminated


def test_entropy_raw_plays_burner_until_the_last_turn():
    # CBGOO splits the four survivors into singletons but cannot be the answer
    pool = WordPool.from_words(["TRACE", "BRACE", "GRACE", "CRATE", "SHINE", "CBGOO"])
    solver = HybridSolver(pool, STRATEGIES[1])
    solver.update("SHINE", compute_feedback("SHINE", "TRACE"))
    for _ in range(3):
        solver.update("ZZZZZ", "BBBBB")
    assert solver.turn == 4
    assert solver.next_guess() == "CBGOO"

    solver.update("ZZZZZ", "BBBBB")
    guess = solver.next_guess()
    assert guess != "CBGOO"
    assert guess in [e.word for e in solver.candidates()]


def test_too_many_updates(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0])
    for _ in range(6):
        solver.update("ZZZZZ", "BBBBB")
    with pytest.raises(RuntimeError):
        solver.update("ZZZZZ", "BBBBB")


def test_play_every_answer(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0])
    for target in ten_word_pool.words():
        solver.reset()
        result = solver.play(target)
        assert 1 <= result.guesses <= 6
        assert len(result.history) == result.guesses
        if result.won:
            assert result.history[-1] == (target, ALL_GREEN)


def test_reset_starts_a_fresh_game(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0], hard_mode=True)
    first = solver.next_guess()
    solver.play("GHOST")

    solver.reset()
    assert solver.turn == 0
    assert len(solver.candidates()) == 10
    assert solver.next_guess() == first


def test_recommendations_follow_base_strategy_indices(ten_word_pool):
    solver = HybridSolver(ten_word_pool, STRATEGIES[0])
    recs = solver.recommendations()
    assert len(recs) == 4
    assert recs[BaseStrategy.RANK_RAW].entry.word == "CRANE"
