"""Shape odds-API payloads into game contexts and player props."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from sitstart.models import GameContext, PlayerProps


logger = logging.getLogger(__name__)

NFL_TEAM_ALIAS_GROUPS: dict[str, list[str]] = {
    "ARI": ["ARI", "ARIZONA", "ARIZONA CARDINALS"],
    "ATL": ["ATL", "ATLANTA", "ATLANTA FALCONS"],
    "BAL": ["BAL", "BALTIMORE", "BALTIMORE RAVENS"],
    "BUF": ["BUF", "BUFFALO", "BUFFALO BILLS"],
    "CAR": ["CAR", "CAROLINA", "CAROLINA PANTHERS"],
    "CHI": ["CHI", "CHICAGO", "CHICAGO BEARS"],
    "CIN": ["CIN", "CINCINNATI", "CINCINNATI BENGALS"],
    "CLE": ["CLE", "CLEVELAND", "CLEVELAND BROWNS"],
    "DAL": ["DAL", "DALLAS", "DALLAS COWBOYS"],
    "DEN": ["DEN", "DENVER", "DENVER BRONCOS"],
    "DET": ["DET", "DETROIT", "DETROIT LIONS"],
    "GB": ["GB", "GNB", "GREEN BAY", "GREEN BAY PACKERS"],
    "HOU": ["HOU", "HOUSTON", "HOUSTON TEXANS"],
    "IND": ["IND", "INDIANAPOLIS", "INDIANAPOLIS COLTS"],
    "JAX": ["JAX", "JAC", "JACKSONVILLE", "JACKSONVILLE JAGUARS"],
    "KC": ["KC", "KAN", "KANSAS CITY", "KANSAS CITY CHIEFS"],
    "LAC": ["LAC", "LOS ANGELES CHARGERS", "LA CHARGERS"],
    "LAR": ["LAR", "LA", "LOS ANGELES RAMS", "LA RAMS"],
    "LV": ["LV", "LVR", "LAS VEGAS", "LAS VEGAS RAIDERS"],
    "MIA": ["MIA", "MIAMI", "MIAMI DOLPHINS"],
    "MIN": ["MIN", "MINNESOTA", "MINNESOTA VIKINGS"],
    "NE": ["NE", "NWE", "NEW ENGLAND", "NEW ENGLAND PATRIOTS"],
    "NO": ["NO", "NOR", "NEW ORLEANS", "NEW ORLEANS SAINTS"],
    "NYG": ["NYG", "NEW YORK GIANTS", "NY GIANTS"],
    "NYJ": ["NYJ", "NEW YORK JETS", "NY JETS"],
    "PHI": ["PHI", "PHILADELPHIA", "PHILADELPHIA EAGLES"],
    "PIT": ["PIT", "PITTSBURGH", "PITTSBURGH STEELERS"],
    "SEA": ["SEA", "SEATTLE", "SEATTLE SEAHAWKS"],
    "SF": ["SF", "SFO", "SAN FRANCISCO", "SAN FRANCISCO 49ERS"],
    "TB": ["TB", "TAM", "TAMPA BAY", "TAMPA BAY BUCCANEERS"],
    "TEN": ["TEN", "TENNESSEE", "TENNESSEE TITANS"],
    "WAS": ["WAS", "WSH", "WASHINGTON", "WASHINGTON COMMANDERS"],
}

# Each prop market fills (line field, implied-probability field); ``None`` skips that half.
PROP_MARKET_FIELDS: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "player_pass_yds": ("pass_yds", "pass_yds_prob"),
    "player_pass_tds": ("pass_tds", "pass_tds_prob"),
    "player_pass_interceptions": ("interceptions", "interceptions_prob"),
    "player_rush_yds": ("rush_yds", "rush_yds_prob"),
    "player_rec_yds": ("rec_yds", "rec_yds_prob"),
    "player_receiving_yards": ("rec_yds", "rec_yds_prob"),
    "player_reception_yds": ("rec_yds", "rec_yds_prob"),
    "player_receptions": ("receptions", "receptions_prob"),
    "player_anytime_td": (None, "anytime_td_prob"),
    "player_first_td": (None, "first_td_prob"),
}

_SKIPPED_OUTCOMES = {"UNDER", "NO"}


def _team_token(value: str) -> str:
    return re.sub(r"[^A-Z0-9]", "", value.upper())


def _build_alias_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for abbr, variants in NFL_TEAM_ALIAS_GROUPS.items():
        for variant in variants:
            key = _team_token(variant)
            if key:
                lookup.setdefault(key, abbr)
    return lookup


TEAM_ALIAS_LOOKUP = _build_alias_lookup()


def canonical_team(team: str) -> str:
    token = _team_token(team)
    return TEAM_ALIAS_LOOKUP.get(token, team.strip().upper())


def american_to_probability(american_odds: float) -> float:
    """Implied probability of American odds (``-150`` -> 0.6, ``+150`` -> 0.4)."""

    if american_odds < 0:
        return abs(american_odds) / (abs(american_odds) + 100)
    return 100 / (american_odds + 100)


def estimate_two_plus_td_probability(anytime_td_prob: float) -> float:
    return (anytime_td_prob ** 1.8) * 0.6


def _first_outcome(outcomes: Iterable[Mapping[str, Any]], name: str) -> Optional[Mapping[str, Any]]:
    for outcome in outcomes:
        if outcome.get("name") == name:
            return outcome
    return None


def parse_game_lines(events: Sequence[Mapping[str, Any]]) -> List[GameContext]:
    """Build one context per event; the first bookmaker quoting a market wins."""

    games: List[GameContext] = []
    for event in events:
        raw_home = event.get("home_team") or ""
        raw_away = event.get("away_team") or ""
        spread: Optional[float] = None
        total: Optional[float] = None
        home_ml: Optional[float] = None
        away_ml: Optional[float] = None

        for bookmaker in event.get("bookmakers") or []:
            for market in bookmaker.get("markets") or []:
                outcomes = market.get("outcomes") or []
                key = market.get("key")
                if key == "spreads" and spread is None:
                    home = _first_outcome(outcomes, raw_home)
                    if home is not None and home.get("point") is not None:
                        spread = float(home["point"])
                elif key == "totals" and total is None:
                    over = _first_outcome(outcomes, "Over")
                    if over is not None and over.get("point") is not None:
                        total = float(over["point"])
                elif key == "h2h" and home_ml is None:
                    home = _first_outcome(outcomes, raw_home)
                    away = _first_outcome(outcomes, raw_away)
                    if home is not None:
                        home_ml = float(home["price"])
                    if away is not None:
                        away_ml = float(away["price"])

        games.append(
            GameContext(
                home_team=canonical_team(raw_home),
                away_team=canonical_team(raw_away),
                spread=spread,
                total=total,
                home_ml=home_ml,
                away_ml=away_ml,
                game_id=event.get("id"),
                commence_time=event.get("commence_time"),
            )
        )
    logger.info("Parsed %s game lines", len(games))
    return games


def parse_player_props(events_by_market: Mapping[str, Sequence[Mapping[str, Any]]]) -> Dict[str, PlayerProps]:
    """Collect prop outcomes per player name across every requested market.

    Over/Yes outcomes are read; Under/No outcomes are skipped. The first
    bookmaker quoting a player's market wins.
    """

    collected: Dict[str, Dict[str, float]] = {}
    for market, events in events_by_market.items():
        fields = PROP_MARKET_FIELDS.get(market)
        if fields is None:
            logger.debug("Skipping unsupported prop market %s", market)
            continue
        line_field, prob_field = fields
        found = 0
        for event in events:
            for bookmaker in event.get("bookmakers") or []:
                for prop_market in bookmaker.get("markets") or []:
                    for outcome in prop_market.get("outcomes") or []:
                        player_name = outcome.get("description")
                        if not player_name:
                            continue
                        if str(outcome.get("name", "")).upper() in _SKIPPED_OUTCOMES:
                            continue
                        entry = collected.setdefault(player_name, {})
                        marker = prob_field or line_field
                        if marker in entry:
                            continue
                        found += 1
                        probability = american_to_probability(float(outcome["price"]))
                        if line_field is not None:
                            entry[line_field] = float(outcome.get("point") or 0)
                        if prob_field is not None:
                            entry[prob_field] = probability
                        if market == "player_anytime_td":
                            entry["two_plus_td_prob"] = estimate_two_plus_td_probability(probability)
        logger.info("%s: found %s props", market, found)

    if not collected:
        logger.warning("No player props found in any market")
    return {name: PlayerProps(**fields) for name, fields in collected.items()}


__all__ = [
    "PROP_MARKET_FIELDS",
    "american_to_probability",
    "canonical_team",
    "estimate_two_plus_td_probability",
    "parse_game_lines",
    "parse_player_props",
]
