"""Canonical player models shared across scoring, lineup and export layers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from .game import GameContext


logger = logging.getLogger(__name__)

FLEX_POSITIONS = frozenset({"RB", "WR", "TE"})
PASS_CATCHER_POSITIONS = frozenset({"WR", "TE"})

_POSITION_ALIASES = {
    "DST": "DEF",
    "D/ST": "DEF",
    "D": "DEF",
    "DEFENSE": "DEF",
    "PK": "K",
}


class InjuryStatus(str, Enum):
    QUESTIONABLE = "Q"
    DOUBTFUL = "D"
    OUT = "O"
    INJURED_RESERVE = "IR"
    PUP = "PUP"
    SUSPENDED = "SUSP"


_STATUS_ALIASES = {
    "Q": InjuryStatus.QUESTIONABLE,
    "QUESTIONABLE": InjuryStatus.QUESTIONABLE,
    "D": InjuryStatus.DOUBTFUL,
    "DOUBTFUL": InjuryStatus.DOUBTFUL,
    "O": InjuryStatus.OUT,
    "OUT": InjuryStatus.OUT,
    "IR": InjuryStatus.INJURED_RESERVE,
    "IR-R": InjuryStatus.INJURED_RESERVE,
    "INJURED RESERVE": InjuryStatus.INJURED_RESERVE,
    "PUP": InjuryStatus.PUP,
    "PUP-R": InjuryStatus.PUP,
    "SUSP": InjuryStatus.SUSPENDED,
    "SUSPENDED": InjuryStatus.SUSPENDED,
}


def parse_injury_status(value: Any) -> Optional[InjuryStatus]:
    """Normalize a roster status code; unknown codes count as healthy."""

    if value is None or isinstance(value, InjuryStatus):
        return value
    text = str(value).strip().upper()
    if not text:
        return None
    status = _STATUS_ALIASES.get(text)
    if status is None:
        logger.debug("Ignoring unrecognized injury status %r", value)
    return status


def canonical_position(value: str) -> str:
    token = value.strip().upper()
    return _POSITION_ALIASES.get(token, token)


class Player(BaseModel):
    """Roster entry for one team and week, as supplied by the league collaborator."""

    name: str = Field(..., min_length=1)
    position: str
    team: str
    status: Optional[InjuryStatus] = None
    bye_week: Optional[int] = None
    slot: str = "BN"
    player_key: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("position")
    @classmethod
    def _normalize_position(cls, value: str) -> str:
        return canonical_position(value)

    @field_validator("team", "slot")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> Optional[InjuryStatus]:
        return parse_injury_status(value)

    @field_validator("bye_week", mode="before")
    @classmethod
    def _coerce_bye(cls, value: Any) -> Optional[int]:
        if value in (None, "", 0, "0"):
            return None
        return value


class PlayerProps(BaseModel):
    """Sparse prop-market lines and implied probabilities for one player."""

    pass_yds: Optional[float] = None
    pass_yds_prob: Optional[float] = None
    pass_tds: Optional[float] = None
    pass_tds_prob: Optional[float] = None
    interceptions: Optional[float] = None
    interceptions_prob: Optional[float] = None
    rush_yds: Optional[float] = None
    rush_yds_prob: Optional[float] = None
    rec_yds: Optional[float] = None
    rec_yds_prob: Optional[float] = None
    receptions: Optional[float] = None
    receptions_prob: Optional[float] = None
    anytime_td_prob: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    two_plus_td_prob: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    first_td_prob: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


EMPTY_PROPS = PlayerProps()


class Tier(str, Enum):
    S = "S"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    BYE = "BYE"


class ScoredPlayer(BaseModel):
    """Player plus every value derived for them in one pipeline run."""

    player: Player
    props: PlayerProps = EMPTY_PROPS
    context: Optional[GameContext] = None
    efp: float = 0.0
    ceiling_bonus: float = 0.0
    score: float = 0.0
    tier: Tier = Tier.BYE
    reasons: Tuple[str, ...] = ()
    is_bye_week: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def position(self) -> str:
        return self.player.position

    @property
    def team(self) -> str:
        return self.player.team

    @property
    def slot(self) -> str:
        return self.player.slot

    @property
    def opponent(self) -> Optional[str]:
        if self.context is None:
            return None
        return self.context.opponent_of(self.player.team)

    def with_slot(self, slot: str) -> "ScoredPlayer":
        return self.model_copy(update={"player": self.player.model_copy(update={"slot": slot})})
