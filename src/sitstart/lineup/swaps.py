"""Bench-for-flex swap suggestions."""

from __future__ import annotations

from typing import Collection, List, Sequence, Tuple

from sitstart.config import DEFAULT_TABLES, ScoringTables
from sitstart.models import FLEX_POSITIONS, FlexSwapSuggestion, ScoredPlayer


DEFAULT_FLEX_SLOTS = frozenset({"FLEX", "W/R/T"})


def suggest_flex_swaps(
    starters: Sequence[ScoredPlayer],
    bench: Sequence[ScoredPlayer],
    *,
    flex_slots: Collection[str] = DEFAULT_FLEX_SLOTS,
    tables: ScoringTables = DEFAULT_TABLES,
) -> Tuple[FlexSwapSuggestion, ...]:
    """Suggest benching the weakest flex starters for clearly better bench players.

    Bench candidates are scanned best first against flex starters worst first.
    A swap needs more than ``tables.swap_margin`` points of improvement, and
    each player appears in at most one suggestion. Bye-week players are
    never suggested.
    """

    flex_starters = sorted(
        (p for p in starters if p.position in FLEX_POSITIONS and p.slot in flex_slots),
        key=lambda p: p.score,
    )
    candidates = sorted(
        (p for p in bench if p.position in FLEX_POSITIONS and not p.is_bye_week),
        key=lambda p: p.score,
        reverse=True,
    )

    suggestions: List[FlexSwapSuggestion] = []
    used_starters: set[int] = set()
    for candidate in candidates:
        if len(suggestions) >= tables.max_swaps:
            break
        for index, starter in enumerate(flex_starters):
            if index in used_starters:
                continue
            improvement = candidate.score - starter.score
            if improvement > tables.swap_margin:
                suggestions.append(
                    FlexSwapSuggestion(
                        out_name=starter.name,
                        in_name=candidate.name,
                        improvement=improvement,
                    )
                )
                used_starters.add(index)
                break
    return tuple(suggestions)


__all__ = ["DEFAULT_FLEX_SLOTS", "suggest_flex_swaps"]
