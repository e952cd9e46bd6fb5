from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from sitstart.export import FlexSwapOutput, PlayerOutput
from sitstart.models import GameContext, Player, PlayerProps


class RecommendationRequest(BaseModel):
    roster: List[Player]
    scoring_rules: Dict[str, float]
    games: List[GameContext] = Field(default_factory=list)
    props: Dict[str, PlayerProps] = Field(default_factory=dict)
    slot_counts: Dict[str, int] | None = None
    mode: Literal["optimal", "actual"] = "optimal"
    explain: Literal["all", "min"] = "all"


class RecommendationMeta(BaseModel):
    scoring: str
    scoring_summary: str
    mode: str
    generated_at: str


class RecommendationResponse(BaseModel):
    meta: RecommendationMeta
    starters: List[PlayerOutput]
    bench: List[PlayerOutput]
    flex_options: List[FlexSwapOutput]
    notes: List[str] = Field(default_factory=list)
