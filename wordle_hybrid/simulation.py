"""
Simulation Harness
==================

Plays one full game per possible answer for a strategy and aggregates the
results. Targets are split into chunks; each chunk runs in a worker process
with its own private copy of the pool, and returns local stats that the
parent merges once.
"""

import math
import multiprocessing
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numba
from tqdm import tqdm

from .config import MAX_GUESSES, StrategyConfig
from .entropy import recompute_full
from .feedback import normalize_word
from .pool import WordPool
from .solver import GameResult, HybridSolver


# ============================================================================
# STATS
# ============================================================================

@dataclass
class SimStats:
    name: str
    wins: int = 0
    losses: int = 0
    total_guesses: int = 0
    guess_distribution: List[int] = field(default_factory=lambda: [0] * (MAX_GUESSES + 1))
    excluded_games: int = 0
    average_guesses: float = 0.0
    win_percent: float = 0.0
    time_taken: float = 0.0
    opener: Optional[str] = None

    @property
    def games_played(self) -> int:
        return self.wins + self.losses

    def record(self, result: GameResult):
        if result.won:
            self.wins += 1
            self.total_guesses += result.guesses
            self.guess_distribution[result.guesses] += 1
        else:
            self.losses += 1

    def merge(self, other: "SimStats"):
        self.wins += other.wins
        self.losses += other.losses
        self.total_guesses += other.total_guesses
        self.excluded_games += other.excluded_games
        for i in range(1, MAX_GUESSES + 1):
            self.guess_distribution[i] += other.guess_distribution[i]

    def finalize(self):
        """Fill in the averages; win % is over games actually played."""
        self.average_guesses = self.total_guesses / self.wins if self.wins > 0 else 0.0
        played = self.games_played
        self.win_percent = 100.0 * self.wins / played if played > 0 else 0.0
        return self


# ============================================================================
# WORKERS
# ============================================================================

_worker_solver: Optional[HybridSolver] = None
_worker_name: str = ""


def _init_worker(master_pool: WordPool, config: StrategyConfig, opener: str, hard_mode: bool):
    """Give each worker one private pool arena, reused across its games."""
    global _worker_solver, _worker_name
    # Parallelism comes from the processes; keep numba single-threaded inside each
    numba.set_num_threads(1)
    _worker_solver = HybridSolver(master_pool.copy(), config, hard_mode, opener=opener)
    _worker_name = config.name


def _play_chunk(solver: HybridSolver, name: str, targets: Sequence[str]) -> SimStats:
    stats = SimStats(name)
    try:
        for target in targets:
            solver.reset()
            stats.record(solver.play(target))
    except MemoryError:
        return SimStats(name, excluded_games=len(targets))
    return stats


def _run_chunk(targets: Sequence[str]) -> SimStats:
    return _play_chunk(_worker_solver, _worker_name, targets)


# ============================================================================
# SIMULATION
# ============================================================================

def determine_opener(config: StrategyConfig, master_pool: WordPool, hard_mode: bool = False) -> str:
    """
    Opening word for `config`, computed once on a private copy of the pool
    with entropy recomputed over the full word list.
    """
    if config.opener_override:
        return config.opener_override
    scratch = master_pool.copy()
    recompute_full(scratch)
    scratch.checkpoint()
    return HybridSolver(scratch, config, hard_mode).opening_guess()


def run_strategy(config: StrategyConfig, master_pool: WordPool, hard_mode: bool = False,
                 processes: Optional[int] = None, chunk_size: Optional[int] = None,
                 verbose: bool = True, targets: Optional[Sequence[str]] = None) -> SimStats:
    """
    Simulate `config` against every target word.

    Args:
        config: strategy to evaluate
        master_pool: loaded dictionary; never modified
        hard_mode: play every game in hard mode
        processes: worker processes (default: CPU count); 1 runs inline
        chunk_size: targets per task (default: about four tasks per worker)
        verbose: print phase messages and a progress bar
        targets: answers to play (default: every word in the pool)

    Returns:
        finalized SimStats
    """
    if len(master_pool) == 0:
        raise ValueError("Cannot simulate on an empty word pool")
    if targets is None:
        targets = master_pool.words()
    else:
        targets = [normalize_word(t) for t in targets]

    processes = processes or os.cpu_count() or 1
    if processes < 1:
        raise ValueError(f"processes must be >= 1, got {processes}")
    if chunk_size is None:
        chunk_size = max(1, math.ceil(len(targets) / (processes * 4)))
    elif chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    chunks = [targets[i:i + chunk_size] for i in range(0, len(targets), chunk_size)]

    if verbose:
        print(f">>> Simulating Bot: {config.name} ...")
        print("    Determining optimal opening guess...")
    opener = determine_opener(config, master_pool, hard_mode)
    if verbose:
        print(f"    Opener: {opener}")

    stats = SimStats(config.name, opener=opener)
    start = time.time()

    with tqdm(total=len(targets), desc="    Progress", unit="game", disable=not verbose) as bar:
        if processes == 1:
            solver = HybridSolver(master_pool.copy(), config, hard_mode, opener=opener)
            for chunk in chunks:
                stats.merge(_play_chunk(solver, config.name, chunk))
                bar.update(len(chunk))
        else:
            # spawn: never fork a parent whose numba threading layer is live
            ctx = multiprocessing.get_context("spawn")
            with ctx.Pool(processes=processes, initializer=_init_worker,
                          initargs=(master_pool, config, opener, hard_mode)) as pool:
                for part in pool.imap_unordered(_run_chunk, chunks):
                    stats.merge(part)
                    bar.update(part.games_played + part.excluded_games)

    stats.time_taken = time.time() - start
    stats.finalize()

    if verbose:
        print(f"    Finished. Wins: {stats.wins} ({stats.win_percent:.2f}%) Avg: {stats.average_guesses:.4f}")
        if stats.excluded_games:
            print(f"    Excluded {stats.excluded_games} games (out of memory)")
    return stats


def run_tournament(configs: Sequence[StrategyConfig], master_pool: WordPool, hard_mode: bool = False,
                   processes: Optional[int] = None, chunk_size: Optional[int] = None,
                   verbose: bool = True, targets: Optional[Sequence[str]] = None) -> List[SimStats]:
    """Run every strategy and rank them by win % (desc), then average guesses (asc)."""
    n_targets = len(master_pool) if targets is None else len(targets)
    if verbose:
        print("\n" + "=" * 60)
        print("STARTING TOURNAMENT")
        print(f"Targeting {n_targets} words. Mode: {'HARD' if hard_mode else 'NORMAL'}")
        print("=" * 60 + "\n")

    results = [
        run_strategy(c, master_pool, hard_mode=hard_mode, processes=processes,
                     chunk_size=chunk_size, verbose=verbose, targets=targets)
        for c in configs
    ]
    return sorted(results, key=lambda s: (-s.win_percent, s.average_guesses))


# ============================================================================
# REPORTING
# ============================================================================

def print_distribution(stats: SimStats):
    """Guess distribution of the wins."""
    print(f"  {stats.name} Distribution:")
    if stats.wins == 0:
        print("    N/A (0 wins)")
        return
    for n in range(1, MAX_GUESSES + 1):
        count = stats.guess_distribution[n]
        if count > 0:
            pct = 100 * count / stats.wins
            bar = "█" * int(pct / 2)
            label = "guess  " if n == 1 else "guesses"
            print(f"    {n} {label} | {count:5d} ({pct:5.2f}%) {bar}")
    print()


def print_results(results: Sequence[SimStats]):
    """Pretty print a ranked tournament."""
    width = 92
    print("\n" + "=" * width)
    print("FINAL TOURNAMENT RESULTS")
    print("=" * width)
    print(f"| {'STRATEGY':<30} | {'OPENER':<6} | {'WINS':<5} | {'LOSSES':<6} | "
          f"{'WIN %':<8} | {'AVG':<7} | {'TIME (s)':<8} |")
    print("|" + "-" * 32 + "|" + "-" * 8 + "|" + "-" * 7 + "|" + "-" * 8 + "|"
          + "-" * 10 + "|" + "-" * 9 + "|" + "-" * 10 + "|")
    for s in results:
        print(f"| {s.name:<30} | {s.opener or '-':<6} | {s.wins:<5d} | {s.losses:<6d} | "
              f"{s.win_percent:7.2f}% | {s.average_guesses:7.4f} | {s.time_taken:8.1f} |")
    print("=" * width)

    if not results:
        return
    champion = results[0]
    print(f"\n*** TOURNAMENT CHAMPION: {champion.name} ***")
    print("\n--- Detailed Distribution for Champion ---")
    print_distribution(champion)
    if len(results) == 2:
        print_distribution(results[1])
