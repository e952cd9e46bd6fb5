"""Pydantic models for API I/O."""

from .recommendation import RecommendationMeta, RecommendationRequest, RecommendationResponse

__all__ = [
    "RecommendationMeta",
    "RecommendationRequest",
    "RecommendationResponse",
]
