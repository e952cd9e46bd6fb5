"""Composite start/sit score: position z-score blended with context modifiers."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from statistics import fmean, pstdev
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from sitstart.config import DEFAULT_TABLES, ScoringTables
from sitstart.models import GameContext, InjuryStatus, Player


@dataclass(frozen=True)
class CohortStats:
    size: int
    mean: float
    stddev: float

    def z_score(self, value: float) -> float:
        if self.stddev == 0:
            return 0.0
        return (value - self.mean) / self.stddev


@dataclass(frozen=True)
class PositionCohorts:
    """Population EFP statistics per position over the non-bye roster."""

    stats: Mapping[str, CohortStats]

    @classmethod
    def from_estimates(cls, estimates: Iterable[Tuple[str, float]]) -> "PositionCohorts":
        grouped: dict[str, list[float]] = defaultdict(list)
        for position, efp in estimates:
            grouped[position].append(efp)
        stats = {
            position: CohortStats(
                size=len(values),
                mean=fmean(values),
                stddev=pstdev(values) if len(values) > 1 else 0.0,
            )
            for position, values in grouped.items()
        }
        return cls(stats=MappingProxyType(stats))

    def z_score(self, position: str, efp: float) -> float:
        cohort = self.stats.get(position)
        if cohort is None:
            return 0.0
        return cohort.z_score(efp)


def script_bonus(
    position: str,
    context: GameContext,
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> float:
    # Lean is read from the home team's side of the spread.
    if not context.spread:
        return 0.0
    pass_lean, run_lean = context.script_lean(context.home_team, tables.script_threshold)
    if position == "RB":
        return 0.6 if run_lean else 0.0
    if position in {"WR", "TE"}:
        return 0.6 if pass_lean else 0.0
    if position == "QB":
        return 0.4 if context.spread < 0 else 0.0
    return 0.0


def implied_total_bonus(context: GameContext, *, tables: ScoringTables = DEFAULT_TABLES) -> float:
    implied_total = context.home_implied_total
    if implied_total is None:
        return 0.0
    return (implied_total - tables.neutral_implied_total) / tables.composite_implied_total_step


def injury_penalty(status: Optional[InjuryStatus], *, tables: ScoringTables = DEFAULT_TABLES) -> float:
    return tables.injury_penalty_for(status)


def composite_score(
    efp: float,
    context: Optional[GameContext],
    player: Player,
    cohorts: PositionCohorts,
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> float:
    """Blend the position z-score with script, implied-total and injury modifiers.

    A player without a game context is unplayable and scores exactly zero.
    """

    if context is None:
        return 0.0

    z = cohorts.z_score(player.position, efp)
    return (
        z
        + tables.script_weight * script_bonus(player.position, context, tables=tables)
        + tables.implied_total_weight * implied_total_bonus(context, tables=tables)
        + tables.injury_weight * injury_penalty(player.status, tables=tables)
    )


__all__ = [
    "CohortStats",
    "PositionCohorts",
    "composite_score",
    "implied_total_bonus",
    "injury_penalty",
    "script_bonus",
]
