from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import ScoredPlayer


class Lineup(BaseModel):
    starters: Tuple[ScoredPlayer, ...] = ()
    bench: Tuple[ScoredPlayer, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.starters) + len(self.bench)


class FlexSwapSuggestion(BaseModel):
    out_name: str = Field(..., alias="out")
    in_name: str = Field(..., alias="in")
    improvement: float

    model_config = ConfigDict(frozen=True, populate_by_name=True)
