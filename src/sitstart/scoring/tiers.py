from __future__ import annotations

from sitstart.config import DEFAULT_TABLES, ScoringTables
from sitstart.models import Tier


def classify_tier(score: float, *, is_bye_week: bool = False, tables: ScoringTables = DEFAULT_TABLES) -> Tier:
    """Map a composite score onto the ordinal tiers; bye weeks always map to BYE."""

    if is_bye_week:
        return Tier.BYE
    for tier, cutoff in tables.tier_cutoffs:
        if score >= cutoff:
            return tier
    return Tier.D


__all__ = ["classify_tier"]
