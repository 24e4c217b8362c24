"""
Command line entry point.

Usage:
    python -m wordle_hybrid simulate AllWords.txt --strategies 0 9 --processes 8
    python -m wordle_hybrid suggest AllWords.txt SALET=BBYBG CRONY=BGGBB
    python -m wordle_hybrid list
"""

import argparse
from typing import List, Optional, Tuple

from .config import DEFAULT_ROSTER, MAX_GUESSES, STRATEGIES, get_strategy
from .dictionary import load_dictionary, load_used_words
from .feedback import normalize_pattern, normalize_word
from .simulation import print_results, run_tournament
from .solver import HybridSolver


def parse_turn(text: str) -> Tuple[str, str]:
    """Parse a 'GUESS=PATTERN' argument."""
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"expected GUESS=PATTERN, got '{text}'")
    guess, pattern = text.split("=", 1)
    try:
        return normalize_word(guess), normalize_pattern(pattern)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def cmd_list():
    print("=" * 60)
    print("STRATEGY ROSTER")
    print("=" * 60)
    for i, s in enumerate(STRATEGIES):
        marker = "*" if i in DEFAULT_ROSTER else " "
        print(f"{marker}{i:3d}  {s.name:<30} {s.describe()}")
    print("\n* = default tournament roster")


def cmd_simulate(args):
    used = load_used_words(args.used) if args.used else None
    pool = load_dictionary(args.dictionary, used_words=used, verbose=True)
    keys = args.strategies or DEFAULT_ROSTER
    configs = [get_strategy(k) for k in keys]
    targets = pool.words()[:args.limit] if args.limit else None

    results = run_tournament(configs, pool, hard_mode=args.hard, processes=args.processes,
                             verbose=True, targets=targets)
    print_results(results)


def cmd_suggest(args):
    pool = load_dictionary(args.dictionary, verbose=False)
    config = get_strategy(args.strategy)
    solver = HybridSolver(pool, config, hard_mode=args.hard)

    for guess, pattern in args.turns:
        remaining = solver.update(guess, pattern)
        print(f"{guess} {pattern} -> {remaining} candidates")

    candidates = solver.candidates()
    if not candidates:
        print("No candidates remain; the feedback is inconsistent with the dictionary.")
        return
    if len(candidates) <= 10:
        print(f"Candidates: {', '.join(e.word for e in candidates)}")

    print("\nRecommendations:")
    for rec in solver.recommendations():
        print(f"  {rec.label:<24} {rec.entry.word}  H={rec.entry.entropy:.4f}  R={rec.entry.frequency_rank:03d}")
    print(f"\n{config.name} plays: {solver.next_guess()}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="wordle_hybrid",
        description="Hybrid Wordle solver and strategy tournament.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_sim = subparsers.add_parser(
        "simulate", help="Run a strategy tournament over every word",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser_sim.add_argument("dictionary", help="Fixed-width dictionary file")
    parser_sim.add_argument("--strategies", nargs="+", default=None,
                            help="Roster indices or names (default: the standard roster)")
    parser_sim.add_argument("--hard", action="store_true", help="Play in hard mode")
    parser_sim.add_argument("--processes", type=int, default=None,
                            help="Worker processes (default: CPU count)")
    parser_sim.add_argument("--limit", type=int, default=None,
                            help="Only play the first N words as answers")
    parser_sim.add_argument("--used", default=None,
                            help="File of already used answers to drop")

    parser_suggest = subparsers.add_parser(
        "suggest", help="Suggest the next guess from feedback so far",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser_suggest.add_argument("dictionary", help="Fixed-width dictionary file")
    parser_suggest.add_argument("turns", nargs="*", type=parse_turn, metavar="GUESS=PATTERN",
                                help="Guesses so far with their G/Y/B feedback")
    parser_suggest.add_argument("--strategy", default="0", help="Roster index or name")
    parser_suggest.add_argument("--hard", action="store_true", help="Play in hard mode")

    subparsers.add_parser("list", help="Show the strategy roster")

    args = parser.parse_args(argv)

    if args.command == "list":
        cmd_list()
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "suggest":
        if len(args.turns) > MAX_GUESSES:
            parser_suggest.error(f"at most {MAX_GUESSES} GUESS=PATTERN turns allowed, got {len(args.turns)}")
        cmd_suggest(args)
    else:
        raise AssertionError("argument-parsing bug")


if __name__ == "__main__":
    main()
