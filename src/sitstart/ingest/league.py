"""Shape fantasy-league settings and roster payloads into core records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sitstart.config import DEFAULT_SLOT_COUNTS
from sitstart.models import Player, ScoringRules


logger = logging.getLogger(__name__)

DEFAULT_SCORING: Mapping[str, float] = MappingProxyType(
    {
        "pass_yards": 0.04,
        "pass_td": 4.0,
        "pass_int": -2.0,
        "rush_yards": 0.1,
        "rush_td": 6.0,
        "rec_yards": 0.1,
        "reception": 0.0,
        "rec_td": 6.0,
        "fumble": -2.0,
        "two_pt_conversion": 2.0,
    }
)

# stat_id -> (rules field, divisor converting "points per N yards" into points per yard)
STAT_ID_FIELDS: Mapping[int, tuple[str, float]] = MappingProxyType(
    {
        5: ("pass_yards", 25.0),
        4: ("pass_td", 1.0),
        19: ("pass_int", 1.0),
        9: ("rush_yards", 10.0),
        10: ("rush_td", 1.0),
        12: ("rec_yards", 10.0),
        11: ("reception", 1.0),
        13: ("rec_td", 1.0),
        18: ("fumble", 1.0),
        16: ("two_pt_conversion", 1.0),
    }
)


@dataclass(frozen=True)
class LeagueSettings:
    scoring_rules: ScoringRules
    slot_counts: Mapping[str, int]

    @property
    def ppr_label(self) -> str:
        return self.scoring_rules.ppr_label


def _stat_entries(stat_categories: Sequence[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    entries = []
    for item in stat_categories:
        stat = item.get("stat", item)
        if isinstance(stat, Mapping):
            entries.append(stat)
    return entries


def parse_scoring_rules(stat_categories: Sequence[Mapping[str, Any]]) -> ScoringRules:
    """Override standard-league defaults with the league's stat modifiers."""

    values: Dict[str, float] = dict(DEFAULT_SCORING)
    for stat in _stat_entries(stat_categories):
        try:
            stat_id = int(stat.get("stat_id"))
        except (TypeError, ValueError):
            continue
        field = STAT_ID_FIELDS.get(stat_id)
        if field is None:
            continue
        name, divisor = field
        values[name] = float(stat.get("value") or 0) / divisor
    return ScoringRules.from_mapping(values)


def parse_roster_positions(roster_positions: Sequence[Mapping[str, Any]]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for entry in roster_positions:
        position = entry.get("position")
        if not position:
            continue
        try:
            count = int(entry.get("count") or 0)
        except (TypeError, ValueError):
            count = 0
        counts[position] = counts.get(position, 0) + count
    return counts


def parse_league_settings(settings: Optional[Mapping[str, Any]]) -> LeagueSettings:
    if not settings:
        logger.warning("No league settings supplied; using standard scoring and roster defaults")
        return LeagueSettings(
            scoring_rules=ScoringRules.from_mapping(DEFAULT_SCORING),
            slot_counts=dict(DEFAULT_SLOT_COUNTS),
        )

    stat_categories = (settings.get("stat_categories") or {}).get("stats") or []
    roster_positions = (settings.get("roster_positions") or {}).get("roster_position") or []
    rules = parse_scoring_rules(stat_categories)
    counts = parse_roster_positions(roster_positions) or dict(DEFAULT_SLOT_COUNTS)
    logger.info(
        "League scoring: %s, passTD=%s, INT=%s, rushTD=%s, recTD=%s",
        rules.ppr_label,
        rules.pass_td,
        rules.pass_int,
        rules.rush_td,
        rules.rec_td,
    )
    return LeagueSettings(scoring_rules=rules, slot_counts=counts)


def parse_roster_entry(entry: Mapping[str, Any]) -> Player:
    """Convert one flattened roster entry from the league API into a ``Player``."""

    name = entry.get("name")
    if isinstance(name, Mapping):
        name = name.get("full")
    selected = entry.get("selected_position")
    if isinstance(selected, Mapping):
        selected = selected.get("position")
    bye = entry.get("bye_weeks")
    if isinstance(bye, Mapping):
        bye = bye.get("week")
    try:
        bye_week = int(bye) if bye not in (None, "") else None
    except (TypeError, ValueError):
        bye_week = None

    return Player(
        name=name or "",
        position=entry.get("display_position") or entry.get("position") or "",
        team=entry.get("editorial_team_abbr") or entry.get("team") or "",
        status=entry.get("status"),
        bye_week=bye_week,
        slot=selected or "BN",
        player_key=entry.get("player_key"),
    )


def parse_roster(entries: Sequence[Mapping[str, Any]]) -> List[Player]:
    players = [parse_roster_entry(entry) for entry in entries]
    logger.info("Parsed %s roster players", len(players))
    return players


__all__ = [
    "DEFAULT_SCORING",
    "LeagueSettings",
    "STAT_ID_FIELDS",
    "parse_league_settings",
    "parse_roster",
    "parse_roster_entry",
    "parse_roster_positions",
    "parse_scoring_rules",
]
