# This project was developed with assistance from AI tools.
"""Model recommendation endpoint -- no authentication required."""

from fastapi import APIRouter

from ..schemas.recommendation import ModelRecommendation, RecommendModelRequest
from ..services.recommender import recommend_model

router = APIRouter()


@router.post("/recommend", response_model=ModelRecommendation)
async def recommend(req: RecommendModelRequest) -> ModelRecommendation:
    """Recommend a model for an intent, adjusted for budget and speed."""
    return recommend_model(req.intent_category, budget=req.budget, speed=req.speed)
