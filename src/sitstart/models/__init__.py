"""Typed records flowing through the start/sit pipeline."""

from .game import GameContext, ImpliedTotals, find_game_context
from .lineup import FlexSwapSuggestion, Lineup
from .player import (
    EMPTY_PROPS,
    FLEX_POSITIONS,
    InjuryStatus,
    Player,
    PlayerProps,
    ScoredPlayer,
    Tier,
    parse_injury_status,
)
from .scoring import ScoringConfigError, ScoringRules

__all__ = [
    "EMPTY_PROPS",
    "FLEX_POSITIONS",
    "FlexSwapSuggestion",
    "GameContext",
    "ImpliedTotals",
    "InjuryStatus",
    "Lineup",
    "Player",
    "PlayerProps",
    "ScoredPlayer",
    "ScoringConfigError",
    "ScoringRules",
    "Tier",
    "find_game_context",
    "parse_injury_status",
]
