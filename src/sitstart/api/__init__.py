"""REST API for start/sit recommendations."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from sitstart.api.schemas import RecommendationMeta, RecommendationRequest, RecommendationResponse
from sitstart.config import ScoringTables, tables_from_env
from sitstart.export import export_players_to_csv, format_players, format_swap
from sitstart.models import ScoringConfigError, ScoringRules
from sitstart.pipeline import Recommendation, build_recommendation


logger = logging.getLogger(__name__)


def _to_response(recommendation: Recommendation, rules: ScoringRules, mode: str) -> RecommendationResponse:
    meta = RecommendationMeta(
        scoring=rules.ppr_label,
        scoring_summary=rules.summary(),
        mode=mode,
        generated_at=datetime.now(timezone.utc).isoformat(),
    )
    return RecommendationResponse(
        meta=meta,
        starters=format_players(recommendation.lineup.starters),
        bench=format_players(recommendation.lineup.bench),
        flex_options=[format_swap(swap) for swap in recommendation.flex_options],
        notes=list(recommendation.notes),
    )


def create_app(tables: ScoringTables | None = None) -> FastAPI:
    app = FastAPI(title="sitstart recommendations")
    app.state.tables = tables or tables_from_env()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/recommend", response_model=RecommendationResponse)
    async def recommend(
        request: RecommendationRequest,
        format: str = Query("json", pattern="^(json|csv)$"),
    ):
        try:
            rules = ScoringRules.from_mapping(request.scoring_rules)
            recommendation = build_recommendation(
                request.roster,
                rules,
                request.games,
                request.props,
                slot_rules=request.slot_counts,
                mode=request.mode,
                explain=request.explain,
                tables=app.state.tables,
            )
        except (ScoringConfigError, ValueError) as exc:
            logger.warning("Rejected recommendation request: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        if format == "csv":
            lineup = recommendation.lineup
            csv_text = export_players_to_csv([*lineup.starters, *lineup.bench])
            return Response(
                content=csv_text,
                media_type="text/csv",
                headers={"Content-Disposition": "attachment; filename=sitstart.csv"},
            )
        return _to_response(recommendation, rules, request.mode)

    return app


__all__ = ["create_app"]
