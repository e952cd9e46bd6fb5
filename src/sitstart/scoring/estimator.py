"""Expected fantasy points from prop lines, with heuristic fallbacks."""

from __future__ import annotations

from typing import Optional

from sitstart.config import DEFAULT_TABLES, ScoringTables
from sitstart.models import GameContext, PlayerProps, ScoringRules


def expected_fantasy_points(
    props: PlayerProps,
    rules: ScoringRules,
    position: str,
    context: Optional[GameContext],
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> float:
    """Convert prop lines to league points; absent fields contribute nothing."""

    if props.is_empty:
        return fallback_estimate(position, context, tables=tables)

    efp = 0.0
    if props.pass_yds:
        efp += props.pass_yds * rules.pass_yards
    if props.pass_tds:
        efp += props.pass_tds * rules.pass_td
    if props.interceptions:
        efp += props.interceptions * rules.pass_int
    if props.rush_yds:
        efp += props.rush_yds * rules.rush_yards
    if props.rec_yds:
        efp += props.rec_yds * rules.rec_yards
    if props.receptions:
        efp += props.receptions * rules.reception
    if props.anytime_td_prob:
        efp += props.anytime_td_prob * rules.touchdown_value(position)
    return efp


def fallback_estimate(
    position: str,
    context: Optional[GameContext],
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> float:
    """Position baseline nudged by the scoring environment and game script."""

    baseline = tables.baseline_for(position)
    if context is None:
        return baseline
    implied_total = context.home_implied_total
    if implied_total is None:
        return baseline

    it_bonus = max(0.0, (implied_total - tables.neutral_implied_total) / tables.fallback_implied_total_step)

    spread = context.spread
    script_bonus = 0.0
    if position == "QB":
        script_bonus = 1.0 if spread < 0 else 0.0
    elif position == "RB":
        script_bonus = 1.5 if spread <= -tables.script_threshold else 0.0
    elif position in {"WR", "TE"}:
        script_bonus = 1.0 if spread >= tables.script_threshold else 0.0

    return baseline + it_bonus + script_bonus


def ceiling_bonus(
    props: PlayerProps,
    rules: ScoringRules,
    position: str,
    *,
    tables: ScoringTables = DEFAULT_TABLES,
) -> float:
    """Position-weighted value of the two-plus touchdown upside."""

    weight = tables.ceiling_weight_for(position)
    if weight == 0 or not props.two_plus_td_prob:
        return 0.0
    return props.two_plus_td_prob * rules.touchdown_value(position) * weight


__all__ = ["ceiling_bonus", "expected_fantasy_points", "fallback_estimate"]
