"""End-to-end start/sit pipeline over one roster snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal, Mapping, Optional, Sequence, Tuple, Union

from sitstart.config import DEFAULT_SLOT_RULES, DEFAULT_TABLES, ScoringTables, SlotRules
from sitstart.lineup import DEFAULT_FLEX_SLOTS, fill_lineup, lineup_from_actual, suggest_flex_swaps
from sitstart.models import (
    EMPTY_PROPS,
    FlexSwapSuggestion,
    GameContext,
    Lineup,
    Player,
    PlayerProps,
    ScoredPlayer,
    ScoringRules,
    find_game_context,
)
from sitstart.scoring import (
    PositionCohorts,
    ceiling_bonus,
    classify_tier,
    composite_score,
    expected_fantasy_points,
    generate_reasons,
)


logger = logging.getLogger(__name__)

LineupMode = Literal["optimal", "actual"]
ExplainMode = Literal["all", "min"]

_LINEUP_MODES = ("optimal", "actual")
_EXPLAIN_MODES = ("all", "min")


@dataclass(frozen=True)
class _Estimate:
    player: Player
    props: PlayerProps
    context: Optional[GameContext]
    efp: float
    ceiling_bonus: float

    @property
    def is_bye_week(self) -> bool:
        return self.context is None


@dataclass(frozen=True)
class Recommendation:
    players: Tuple[ScoredPlayer, ...]
    lineup: Lineup
    flex_options: Tuple[FlexSwapSuggestion, ...]
    notes: Tuple[str, ...] = field(default_factory=tuple)


def _estimate(
    player: Player,
    rules: ScoringRules,
    games: Sequence[GameContext],
    props_by_name: Mapping[str, PlayerProps],
    tables: ScoringTables,
) -> _Estimate:
    context = find_game_context(games, player.team)
    if context is None:
        logger.debug("Player %s (%s) has no game context (bye week or game not found)", player.name, player.team)
        return _Estimate(player=player, props=EMPTY_PROPS, context=None, efp=0.0, ceiling_bonus=0.0)

    props = props_by_name.get(player.name, EMPTY_PROPS)
    base = expected_fantasy_points(props, rules, player.position, context, tables=tables)
    bonus = ceiling_bonus(props, rules, player.position, tables=tables)
    logger.debug(
        "Player %s (%s, %s): EFP=%.1f, ceiling=%.1f, hasProps=%s",
        player.name,
        player.position,
        player.team,
        base,
        bonus,
        not props.is_empty,
    )
    return _Estimate(player=player, props=props, context=context, efp=base + bonus, ceiling_bonus=bonus)


def score_roster(
    roster: Sequence[Player],
    rules: ScoringRules,
    games: Sequence[GameContext],
    props_by_name: Mapping[str, PlayerProps],
    *,
    explain: ExplainMode = "all",
    tables: ScoringTables = DEFAULT_TABLES,
) -> List[ScoredPlayer]:
    """Run estimate, ceiling, composite, tier and reason stages for every player.

    Every EFP is computed before any composite score because the z-score
    cohorts span the whole non-bye roster.
    """

    if explain not in _EXPLAIN_MODES:
        raise ValueError(f"explain must be one of {_EXPLAIN_MODES}, got {explain!r}")

    estimates = [_estimate(player, rules, games, props_by_name, tables) for player in roster]
    cohorts = PositionCohorts.from_estimates(
        (estimate.player.position, estimate.efp) for estimate in estimates if not estimate.is_bye_week
    )

    scored: List[ScoredPlayer] = []
    for estimate in estimates:
        score = composite_score(estimate.efp, estimate.context, estimate.player, cohorts, tables=tables)
        tier = classify_tier(score, is_bye_week=estimate.is_bye_week, tables=tables)
        reasons: Tuple[str, ...] = ()
        if explain == "all":
            reasons = generate_reasons(
                estimate.player,
                estimate.props,
                estimate.context,
                is_bye_week=estimate.is_bye_week,
                tables=tables,
            )
        scored.append(
            ScoredPlayer(
                player=estimate.player,
                props=estimate.props,
                context=estimate.context,
                efp=estimate.efp,
                ceiling_bonus=estimate.ceiling_bonus,
                score=score,
                tier=tier,
                reasons=reasons,
                is_bye_week=estimate.is_bye_week,
            )
        )

    logger.info(
        "Scored %s players (%s on bye) across %s position cohorts",
        len(scored),
        sum(1 for player in scored if player.is_bye_week),
        len(cohorts.stats),
    )
    return scored


def build_recommendation(
    roster: Sequence[Player],
    rules: ScoringRules,
    games: Sequence[GameContext],
    props_by_name: Mapping[str, PlayerProps],
    *,
    slot_rules: Union[SlotRules, Mapping[str, int], None] = None,
    mode: LineupMode = "optimal",
    explain: ExplainMode = "all",
    tables: ScoringTables = DEFAULT_TABLES,
) -> Recommendation:
    """Score the roster, split starters from bench and propose flex swaps."""

    if mode not in _LINEUP_MODES:
        raise ValueError(f"mode must be one of {_LINEUP_MODES}, got {mode!r}")

    if slot_rules is None:
        resolved_rules = DEFAULT_SLOT_RULES
    elif isinstance(slot_rules, SlotRules):
        resolved_rules = slot_rules
    else:
        resolved_rules = SlotRules.from_counts(slot_rules)

    if not props_by_name:
        logger.warning("No player props supplied; every player uses the fallback estimate")

    scored = score_roster(roster, rules, games, props_by_name, explain=explain, tables=tables)
    if mode == "actual":
        lineup = lineup_from_actual(scored)
    else:
        lineup = fill_lineup(scored, resolved_rules)

    flex_slots = DEFAULT_FLEX_SLOTS | set(resolved_rules.flex_slots)
    flex_options = suggest_flex_swaps(lineup.starters, lineup.bench, flex_slots=flex_slots, tables=tables)
    logger.info(
        "Lineup (%s): %s starters, %s bench, %s flex swap(s)",
        mode,
        len(lineup.starters),
        len(lineup.bench),
        len(flex_options),
    )

    notes: List[str] = []
    if flex_options:
        notes.append(f"{len(flex_options)} FLEX swap(s) suggested - see flex_options")
    if not props_by_name:
        notes.append("Warning: No player props available")

    return Recommendation(
        players=tuple(scored),
        lineup=lineup,
        flex_options=flex_options,
        notes=tuple(notes),
    )


__all__ = ["ExplainMode", "LineupMode", "Recommendation", "build_recommendation", "score_roster"]
