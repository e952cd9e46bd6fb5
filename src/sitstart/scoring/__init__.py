"""Scoring stages: estimate, ceiling, composite score, tier and reasons."""

from .composite import PositionCohorts, composite_score
from .estimator import ceiling_bonus, expected_fantasy_points, fallback_estimate
from .reasons import generate_reasons
from .tiers import classify_tier

__all__ = [
    "PositionCohorts",
    "ceiling_bonus",
    "classify_tier",
    "composite_score",
    "expected_fantasy_points",
    "fallback_estimate",
    "generate_reasons",
]
