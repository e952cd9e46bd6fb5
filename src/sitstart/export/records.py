"""Output records handed to rendering collaborators."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from sitstart.models import FlexSwapSuggestion, ScoredPlayer

_ONE_DECIMAL = Decimal("0.1")


def round_half_up(value: float) -> float:
    """Round to one decimal with halves away from zero."""

    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


class PlayerOutput(BaseModel):
    name: str
    position: str
    team: str
    slot: str
    opponent: Optional[str]
    efp: float
    score: float
    tier: str
    status: Optional[str]
    bye_week: Optional[int]
    reasons: List[str] = Field(default_factory=list)


class FlexSwapOutput(BaseModel):
    action: str = "swap"
    out_name: str = Field(..., serialization_alias="out")
    in_name: str = Field(..., serialization_alias="in")
    improvement: float

    model_config = ConfigDict(populate_by_name=True)


def format_player(player: ScoredPlayer) -> PlayerOutput:
    status = player.player.status
    return PlayerOutput(
        name=player.name,
        position=player.position,
        team=player.team,
        slot=player.slot,
        opponent=player.opponent,
        efp=round_half_up(player.efp),
        score=round_half_up(player.score),
        tier=player.tier.value,
        status=status.value if status is not None else None,
        bye_week=player.player.bye_week,
        reasons=list(player.reasons),
    )


def format_players(players: Sequence[ScoredPlayer]) -> List[PlayerOutput]:
    return [format_player(player) for player in players]


def format_swap(swap: FlexSwapSuggestion) -> FlexSwapOutput:
    return FlexSwapOutput(
        out_name=swap.out_name,
        in_name=swap.in_name,
        improvement=round_half_up(swap.improvement),
    )


__all__ = ["FlexSwapOutput", "PlayerOutput", "format_player", "format_players", "format_swap", "round_half_up"]
