# This project was developed with assistance from AI tools.
"""LLM execution endpoints -- single request and concurrent batch."""

from fastapi import APIRouter, HTTPException, status

from ..inference.dispatcher import (
    BatchExecutionError,
    ProviderExecutionError,
    UnknownModelError,
    execute,
    execute_batch,
)
from ..schemas.execution import LLMRequest, LLMResponse

router = APIRouter()


@router.post("/llm", response_model=LLMResponse)
async def run_llm(req: LLMRequest) -> LLMResponse:
    """Execute one prompt against the model's provider."""
    try:
        return await execute(req)
    except UnknownModelError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ProviderExecutionError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc


@router.post("/batch", response_model=list[LLMResponse])
async def run_llm_batch(reqs: list[LLMRequest]) -> list[LLMResponse]:
    """Execute prompts concurrently; any failure fails the whole batch."""
    try:
        return await execute_batch(reqs)
    except BatchExecutionError as exc:
        status_code = (
            status.HTTP_400_BAD_REQUEST
            if isinstance(exc.cause, UnknownModelError)
            else status.HTTP_502_BAD_GATEWAY
        )
        raise HTTPException(status_code=status_code, detail=str(exc)) from exc
