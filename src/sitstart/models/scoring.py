"""League scoring weights consumed by the estimator."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from .player import PASS_CATCHER_POSITIONS


class ScoringConfigError(ValueError):
    """Raised when league configuration is missing or malformed."""


class ScoringRules(BaseModel):
    """Per-unit point values; every field is required so nothing is silently defaulted."""

    pass_yards: float = Field(..., alias="passYards")
    pass_td: float = Field(..., alias="passTD")
    pass_int: float = Field(..., alias="passInt")
    rush_yards: float = Field(..., alias="rushYards")
    rush_td: float = Field(..., alias="rushTD")
    rec_yards: float = Field(..., alias="recYards")
    reception: float
    rec_td: float = Field(..., alias="recTD")
    fumble: float
    two_pt_conversion: float = Field(..., alias="twoPtConversion")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ScoringRules":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
            raise ScoringConfigError(
                f"scoring rules missing or invalid fields: {', '.join(fields)}"
            ) from exc

    def touchdown_value(self, position: str) -> float:
        """Receiving TD value for pass-catchers, rushing TD value otherwise."""

        return self.rec_td if position in PASS_CATCHER_POSITIONS else self.rush_td

    @property
    def ppr_label(self) -> str:
        if self.reception == 1:
            return "Full PPR"
        if self.reception == 0.5:
            return "Half PPR"
        if self.reception > 0:
            return f"{self.reception:g} PPR"
        return "Standard"

    def summary(self) -> str:
        return f"passTD={self.pass_td:g}, INT={self.pass_int:g}, reception={self.reception:g}"
