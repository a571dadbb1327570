# This project was developed with assistance from AI tools.
"""Intent analysis endpoint -- no authentication required."""

from fastapi import APIRouter

from ..schemas.intent import AnalyzeIntentRequest, IntentAnalysis
from ..services.intent import classify_intent

router = APIRouter()


@router.post("/analyze", response_model=IntentAnalysis)
async def analyze_intent(req: AnalyzeIntentRequest) -> IntentAnalysis:
    """Classify the purpose of a free-text request."""
    return classify_intent(req.text)
