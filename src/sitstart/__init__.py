"""Weekly fantasy football start/sit recommendations."""

from .pipeline import Recommendation, build_recommendation, score_roster

__all__ = ["Recommendation", "build_recommendation", "score_roster"]
