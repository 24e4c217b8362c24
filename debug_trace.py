"""Debug script for tracing solver behavior."""

import sys

from wordle_hybrid.config import get_strategy
from wordle_hybrid.dictionary import load_dictionary
from wordle_hybrid.feedback import ALL_GREEN, compute_feedback
from wordle_hybrid.solver import HybridSolver


def trace_solve(pool, answer, strategy=0, hard_mode=False):
    config = get_strategy(strategy)
    solver = HybridSolver(pool, config, hard_mode=hard_mode)
    answer = answer.upper()

    print(f"\n=== Tracing solve for: {answer} ({config.name}) ===\n")

    max_guesses = 6
    for i in range(max_guesses):
        cands = solver.candidates()
        print(f"Turn {i+1}: {len(cands)} candidates")
        if len(cands) <= 10:
            print(f"  Candidates: {[e.word for e in cands]}")

        for rec in solver.recommendations():
            print(f"    {rec.label:<24} {rec.entry.word} (entropy={rec.entry.entropy:.4f})")

        guess = solver.next_guess()
        if guess is None:
            print("  ERROR: no candidates left")
            break
        fb = compute_feedback(guess, answer)
        chosen = pool.find(guess)
        ent = chosen.entropy if chosen is not None else 0.0
        print(f"  Guess: {guess} -> {fb} (entropy={ent:.4f})")

        if fb == ALL_GREEN:
            print(f"\n✓ Solved in {i+1} guesses!")
            return i + 1

        if i + 1 == max_guesses:
            break
        solver.update(guess, fb)

        # Check if answer is still in candidates
        if answer not in [e.word for e in solver.candidates()]:
            print(f"  ERROR: {answer} not in remaining candidates!")
            break

    print(f"\n✗ Failed to solve in {max_guesses} guesses")
    return max_guesses + 1


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("usage: python debug_trace.py DICTIONARY WORD [WORD ...]")
        sys.exit(1)
    pool = load_dictionary(sys.argv[1])
    for word in sys.argv[2:]:
        trace_solve(pool, word)
