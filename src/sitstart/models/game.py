"""Betting-market game context for one matchup."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict


class ImpliedTotals(BaseModel):
    home: float
    away: float

    model_config = ConfigDict(frozen=True)


class GameContext(BaseModel):
    """Spread is signed relative to the home team (negative means home is favored)."""

    home_team: str
    away_team: str
    spread: Optional[float] = None
    total: Optional[float] = None
    home_ml: Optional[float] = None
    away_ml: Optional[float] = None
    game_id: Optional[str] = None
    commence_time: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("home_team", "away_team")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def implied_totals(self) -> Optional[ImpliedTotals]:
        if self.spread is None or self.total is None:
            return None
        half_total = self.total / 2
        half_spread = self.spread / 2
        return ImpliedTotals(home=half_total - half_spread, away=half_total + half_spread)

    @property
    def home_implied_total(self) -> Optional[float]:
        totals = self.implied_totals
        return totals.home if totals is not None else None

    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)

    def opponent_of(self, team: str) -> str:
        return self.away_team if team == self.home_team else self.home_team

    def script_lean(self, team: str, threshold: float = 4.5) -> Tuple[bool, bool]:
        """Return ``(pass_lean, run_lean)`` for ``team``.

        Underdogs by at least ``threshold`` lean pass-heavy, favorites by at
        least ``threshold`` lean run-heavy. Games without a spread, or without
        implied totals, have no lean.
        """

        if not self.spread or self.implied_totals is None:
            return False, False
        team_spread = self.spread if team == self.home_team else -self.spread
        return team_spread >= threshold, team_spread <= -threshold


def find_game_context(games: Iterable[GameContext], team: str) -> Optional[GameContext]:
    """Return the first matchup containing ``team``; ``None`` means a bye week."""

    for game in games:
        if game.involves(team):
            return game
    return None
