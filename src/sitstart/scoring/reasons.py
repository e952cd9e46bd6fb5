"""Short human-readable justifications for a start/sit call."""

from __future__ import annotations

from typing import List, Optional, Tuple

from sitstart.config import DEFAULT_TABLES, ScoringTables
from sitstart.models import GameContext, InjuryStatus, Player, PlayerProps


_INJURY_NOTES = {
    InjuryStatus.QUESTIONABLE: "Injury concern (Questionable)",
    InjuryStatus.DOUBTFUL: "Injury concern (Doubtful)",
    InjuryStatus.OUT: "OUT for this game",
}


def _pct(probability: float) -> str:
    return f"{probability * 100:.0f}%"


def summarize_props(props: PlayerProps) -> Optional[str]:
    parts: List[str] = []
    if props.pass_yds:
        parts.append(f"{props.pass_yds:g} pass yds")
    if props.rush_yds:
        parts.append(f"{props.rush_yds:g} rush yds")
    if props.rec_yds:
        parts.append(f"{props.rec_yds:g} rec yds")
    if props.receptions:
        parts.append(f"{props.receptions:g} rec")
    if props.anytime_td_prob:
        parts.append(f"{_pct(props.anytime_td_prob)} TD")
    if props.two_plus_td_prob:
        parts.append(f"{_pct(props.two_plus_td_prob)} 2+ TD")
    if not parts:
        return None
    return f"Props: {', '.join(parts)}"


def generate_reasons(
    player: Player,
    props: PlayerProps,
    context: Optional[GameContext],
    *,
    is_bye_week: bool = False,
    tables: ScoringTables = DEFAULT_TABLES,
) -> Tuple[str, ...]:
    """Build reasons in fixed priority order and keep the first few."""

    reasons: List[str] = []

    if not props.is_empty:
        summary = summarize_props(props)
        if summary:
            reasons.append(summary)

    implied_total = context.home_implied_total if context is not None else None
    if implied_total is not None:
        if implied_total >= tables.high_implied_total:
            reasons.append(f"High implied total ({implied_total:.1f})")
        elif implied_total <= tables.low_implied_total:
            reasons.append(f"Low implied total ({implied_total:.1f})")

    if context is not None and context.spread:
        pass_lean, run_lean = context.script_lean(player.team, tables.script_threshold)
        if pass_lean and player.position in {"WR", "TE", "QB"}:
            reasons.append("Pass-heavy game script (underdog)")
        if run_lean and player.position == "RB":
            reasons.append("Run-heavy game script (favorite)")

    if props.two_plus_td_prob and props.two_plus_td_prob > tables.ceiling_reason_threshold:
        reasons.append(f"High ceiling ({_pct(props.two_plus_td_prob)} 2+ TD)")

    injury_note = _INJURY_NOTES.get(player.status) if player.status is not None else None
    if injury_note:
        reasons.append(injury_note)

    if is_bye_week:
        reasons.append("BYE WEEK - DO NOT START")

    if props.is_empty:
        reasons.append("No props available (using fallback estimate)")

    return tuple(reasons[: tables.max_reasons])


__all__ = ["generate_reasons", "summarize_props"]
