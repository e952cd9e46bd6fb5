"""Input adapters that shape collaborator payloads into core records."""

from .league import (
    LeagueSettings,
    parse_league_settings,
    parse_roster,
    parse_roster_entry,
    parse_scoring_rules,
)
from .odds import (
    american_to_probability,
    canonical_team,
    estimate_two_plus_td_probability,
    parse_game_lines,
    parse_player_props,
)

__all__ = [
    "LeagueSettings",
    "american_to_probability",
    "canonical_team",
    "estimate_two_plus_td_probability",
    "parse_game_lines",
    "parse_league_settings",
    "parse_player_props",
    "parse_roster",
    "parse_roster_entry",
    "parse_scoring_rules",
]
