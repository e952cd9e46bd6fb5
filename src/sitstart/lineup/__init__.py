"""Lineup assignment and flex-swap advice."""

from .assign import BENCH_LABEL, fill_lineup, lineup_from_actual
from .swaps import DEFAULT_FLEX_SLOTS, suggest_flex_swaps

__all__ = [
    "BENCH_LABEL",
    "DEFAULT_FLEX_SLOTS",
    "fill_lineup",
    "lineup_from_actual",
    "suggest_flex_swaps",
]
