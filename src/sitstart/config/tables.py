"""Fixed lookup tables and weights owned by the scoring engine."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Tuple

from sitstart.models import InjuryStatus, Tier


logger = logging.getLogger(__name__)

_SWAP_MARGIN_ENV = "SITSTART_SWAP_MARGIN"
_MAX_SWAPS_ENV = "SITSTART_MAX_SWAPS"

# Evaluated top-down; anything below the last cutoff is tier D.
_TIER_CUTOFFS: Tuple[Tuple[Tier, float], ...] = (
    (Tier.S, 1.2),
    (Tier.A, 0.6),
    (Tier.B, -0.2),
    (Tier.C, -0.8),
)

_CEILING_WEIGHTS = {"RB": 0.8, "TE": 0.6, "WR": 0.35, "QB": 0.0, "K": 0.0, "DEF": 0.0}

_FALLBACK_BASELINES = {"QB": 15.0, "RB": 10.0, "WR": 8.0, "TE": 6.0, "K": 8.0, "DEF": 8.0}

_INJURY_PENALTIES = {
    InjuryStatus.QUESTIONABLE: -0.3,
    InjuryStatus.DOUBTFUL: -0.8,
    InjuryStatus.OUT: -999.0,
    InjuryStatus.INJURED_RESERVE: -999.0,
    InjuryStatus.PUP: -999.0,
    InjuryStatus.SUSPENDED: -999.0,
}


@dataclass(frozen=True)
class ScoringTables:
    tier_cutoffs: Tuple[Tuple[Tier, float], ...] = _TIER_CUTOFFS
    ceiling_weights: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(_CEILING_WEIGHTS))
    )
    fallback_baselines: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(_FALLBACK_BASELINES))
    )
    default_baseline: float = 5.0
    injury_penalties: Mapping[InjuryStatus, float] = field(
        default_factory=lambda: MappingProxyType(dict(_INJURY_PENALTIES))
    )
    script_threshold: float = 4.5
    neutral_implied_total: float = 21.0
    fallback_implied_total_step: float = 3.0
    composite_implied_total_step: float = 7.0
    script_weight: float = 0.35
    implied_total_weight: float = 0.25
    injury_weight: float = 0.20
    max_reasons: int = 4
    ceiling_reason_threshold: float = 0.15
    high_implied_total: float = 24.0
    low_implied_total: float = 18.0
    swap_margin: float = 1.0
    max_swaps: int = 3

    def baseline_for(self, position: str) -> float:
        return self.fallback_baselines.get(position, self.default_baseline)

    def ceiling_weight_for(self, position: str) -> float:
        return self.ceiling_weights.get(position, 0.0)

    def injury_penalty_for(self, status: InjuryStatus | None) -> float:
        if status is None:
            return 0.0
        return self.injury_penalties.get(status, 0.0)


DEFAULT_TABLES = ScoringTables()


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def tables_from_env(base: ScoringTables = DEFAULT_TABLES) -> ScoringTables:
    """Apply swap-advisor overrides from the environment to ``base``."""

    return replace(
        base,
        swap_margin=_env_float(_SWAP_MARGIN_ENV, base.swap_margin, clamp_min=0.0),
        max_swaps=_env_int(_MAX_SWAPS_ENV, base.max_swaps, min_value=0),
    )
