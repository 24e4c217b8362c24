"""
Strategy configuration and the tournament roster.

A strategy is an immutable ``StrategyConfig``; every switch is independent,
so new bots are made by combining flags rather than writing code.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Union

from .feedback import normalize_word


# ============================================================================
# CONSTANTS
# ============================================================================

MAX_GUESSES = 6


class BaseStrategy(IntEnum):
    """
    Guess policy family. The simple strategies double as indices into the
    four standard recommendations.
    """
    SMART = -1
    ENTROPY_RAW = 0
    ENTROPY_FILTERED = 1
    RANK_RAW = 2
    RANK_FILTERED = 3

    @property
    def is_simple(self) -> bool:
        return self is not BaseStrategy.SMART


@dataclass(frozen=True)
class StrategyConfig:
    name: str
    base_strategy: BaseStrategy = BaseStrategy.SMART
    use_linguistic_filter: bool = False
    linguistic_filter_start_turn: int = 1
    use_risk_filter: bool = False
    prioritize_new_vowels: bool = False
    prioritize_anchors: bool = False
    prioritize_vowel_contingency: bool = False
    lookahead_depth: int = 0
    rank_priority_tolerance: float = 0.0
    opener_override: Optional[str] = None
    heatmap_priority: bool = False
    second_opener_override: Optional[str] = None
    turn2_coverage_priority: bool = False

    def __post_init__(self):
        object.__setattr__(self, "base_strategy", BaseStrategy(self.base_strategy))
        if self.lookahead_depth not in (0, 1):
            raise ValueError(f"lookahead_depth must be 0 or 1, got {self.lookahead_depth}")
        if self.rank_priority_tolerance < 0:
            raise ValueError(f"rank_priority_tolerance must be >= 0, got {self.rank_priority_tolerance}")
        if self.linguistic_filter_start_turn < 1:
            raise ValueError(f"linguistic_filter_start_turn must be >= 1, got {self.linguistic_filter_start_turn}")
        if self.opener_override is not None:
            object.__setattr__(self, "opener_override", normalize_word(self.opener_override))
        if self.second_opener_override is not None:
            object.__setattr__(self, "second_opener_override", normalize_word(self.second_opener_override))

    def describe(self) -> str:
        """One-line summary of the switches that are turned on."""
        parts = [self.base_strategy.name]
        if self.use_linguistic_filter:
            parts.append(f"ling>=T{self.linguistic_filter_start_turn}")
        if self.use_risk_filter:
            parts.append("risk")
        if self.prioritize_new_vowels:
            parts.append("vowels")
        if self.prioritize_anchors:
            parts.append("anchors")
        if self.prioritize_vowel_contingency:
            parts.append("contingency")
        if self.lookahead_depth:
            parts.append(f"lookahead={self.lookahead_depth}")
        if self.rank_priority_tolerance > 0:
            parts.append(f"tol={self.rank_priority_tolerance:.2f}")
        if self.heatmap_priority:
            parts.append("heatmap")
        if self.turn2_coverage_priority:
            parts.append("coverage")
        if self.opener_override:
            parts.append(f"open={self.opener_override}")
        if self.second_opener_override:
            parts.append(f"then={self.second_opener_override}")
        return " ".join(parts)


# ============================================================================
# ROSTER
# ============================================================================

def _smart(name: str, **flags) -> StrategyConfig:
    """Smart bot with the strict linguistic filter on from turn 1."""
    flags.setdefault("use_linguistic_filter", True)
    return StrategyConfig(name=name, base_strategy=BaseStrategy.SMART, **flags)


def _simple(name: str, base: BaseStrategy) -> StrategyConfig:
    return StrategyConfig(name=name, base_strategy=base, linguistic_filter_start_turn=99)


STRATEGIES: List[StrategyConfig] = [
    _smart("Entropy Linguist (Strict)"),
    _simple("Entropy Raw (Baseline)", BaseStrategy.ENTROPY_RAW),
    _smart("Legacy Reborn (Smart)", use_risk_filter=True, rank_priority_tolerance=0.50),
    _smart("Vowel Hunter (Audio)", prioritize_new_vowels=True, opener_override="AUDIO"),
    _smart("Vowel Hunter (Adieu)", prioritize_new_vowels=True, opener_override="ADIEU"),
    _smart("Vowel Contingency", prioritize_vowel_contingency=True),
    _smart("Pattern Hunter (Anchor)", prioritize_anchors=True),
    _smart("Progressive (Skip T1)", linguistic_filter_start_turn=2),
    _smart("Progressive (Skip T1-2)", linguistic_filter_start_turn=3),
    _smart("Look Ahead (Pruned)", lookahead_depth=1),
    _simple("Entropy Filtered", BaseStrategy.ENTROPY_FILTERED),
    _simple("Rank Raw", BaseStrategy.RANK_RAW),
    _simple("Rank Filtered", BaseStrategy.RANK_FILTERED),
    _smart("Hybrid Apex (Strict)", use_risk_filter=True, prioritize_vowel_contingency=True,
           lookahead_depth=1, rank_priority_tolerance=0.25),
    _smart("Deep Linguist", lookahead_depth=1),
    _smart("Hybrid Apex II (Safe)", lookahead_depth=1, rank_priority_tolerance=0.10),
    _smart("Heatmap Seeker", heatmap_priority=True),
    _smart("Dynamic Two-Step (Coverage)", turn2_coverage_priority=True),
    _smart("Double Barrel (Salet/Courd)", opener_override="SALET", second_opener_override="COURD"),
]

# Champion first
DEFAULT_ROSTER: List[int] = [0, 9, 5, 2]


def get_strategy(key: Union[int, str]) -> StrategyConfig:
    """
    Look a strategy up by roster index or by name (case-insensitive).

    Raises:
        ValueError: if no strategy matches
    """
    if isinstance(key, int) or (isinstance(key, str) and key.strip().isdigit()):
        idx = int(key)
        if not 0 <= idx < len(STRATEGIES):
            raise ValueError(f"strategy index out of range: {idx} (0-{len(STRATEGIES) - 1})")
        return STRATEGIES[idx]

    wanted = key.strip().lower()
    for s in STRATEGIES:
        if s.name.lower() == wanted:
            return s
    raise ValueError(f"unknown strategy: {key}")
