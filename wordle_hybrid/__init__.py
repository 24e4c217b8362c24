"""
Hybrid Wordle Solver
====================

Entropy-driven Wordle solver with linguistic, risk and lookahead heuristics,
plus a parallel tournament that plays every strategy against every answer.
"""

__version__ = "1.0.0"

from .config import BaseStrategy, StrategyConfig, STRATEGIES, DEFAULT_ROSTER, get_strategy
from .dictionary import load_dictionary, load_used_words
from .feedback import compute_feedback, encode
from .pool import WordEntry, WordPool, View, StaleViewError
from .solver import HybridSolver, GameResult
from .strategy import select_guess, best_guess_candidates
from .simulation import SimStats, run_strategy, run_tournament, print_results
