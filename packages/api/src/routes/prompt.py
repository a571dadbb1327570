# This project was developed with assistance from AI tools.
"""Prompt generation and refinement endpoints -- no authentication required."""

from fastapi import APIRouter

from ..schemas.prompt import GeneratePromptRequest, PromptGeneration, RefinePromptRequest
from ..services.prompt import generate_prompt, refine_prompt

router = APIRouter()


@router.post("/generate", response_model=PromptGeneration)
async def generate(req: GeneratePromptRequest) -> PromptGeneration:
    """Build the initial prompt from an intent template."""
    return generate_prompt(req.model, req.intent, req.user_input)


@router.post("/refine", response_model=PromptGeneration)
async def refine(req: RefinePromptRequest) -> PromptGeneration:
    """Append tone and complexity instructions to a prompt."""
    return refine_prompt(req.prompt, req.tone, req.complexity)
