# This project was developed with assistance from AI tools.
"""LLM execution dispatcher.

Routes a model to its provider handler, times the call, and estimates
token usage from text lengths. Batches fan out concurrently and fail as a
whole when any member fails -- successful siblings are discarded.

Nothing here retries; every failure reaches the caller.
"""

import asyncio
import logging
import time

from db.enums import MODEL_PROVIDERS, ModelName, ModelProvider

from ..schemas.execution import LLMRequest, LLMResponse, TokenUsage
from .providers import GenerationOptions, get_provider_handler
from .tokens import estimate_tokens

logger = logging.getLogger(__name__)


class UnknownModelError(Exception):
    """Raised when a model has no provider mapping."""


class ProviderExecutionError(Exception):
    """Raised when a provider call fails. Carries the time spent before failing."""

    def __init__(self, message: str, latency_ms: int) -> None:
        super().__init__(message)
        self.latency_ms = latency_ms


class BatchExecutionError(Exception):
    """Raised when any member of a batch fails; reports the first failing index."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Batch request {index} failed: {cause}")
        self.index = index
        self.cause = cause


def resolve_provider(model: ModelName) -> ModelProvider:
    """Return the provider for ``model`` or raise UnknownModelError."""
    provider = MODEL_PROVIDERS.get(model)
    if provider is None:
        raise UnknownModelError(f"Unknown model: {getattr(model, 'value', model)}")
    return provider


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


async def execute(request: LLMRequest) -> LLMResponse:
    """Run a single request against its provider.

    Raises:
        UnknownModelError: The model has no provider mapping.
        ProviderExecutionError: The provider call failed; ``latency_ms`` is
            the time spent before the failure.
    """
    provider = resolve_provider(request.model)
    handler = get_provider_handler(provider)
    options = GenerationOptions(max_tokens=request.max_tokens, temperature=request.temperature)

    start = time.perf_counter()
    try:
        output = await handler(request.model, request.prompt, options)
    except Exception as exc:
        latency = _elapsed_ms(start)
        logger.warning(
            "LLM execution failed: model=%s provider=%s latency=%dms error=%s",
            request.model.value,
            provider.value,
            latency,
            exc,
        )
        raise ProviderExecutionError(
            f"LLM execution failed after {latency}ms: {exc}", latency_ms=latency
        ) from exc
    latency = _elapsed_ms(start)

    logger.debug(
        "LLM execution complete: model=%s provider=%s latency=%dms",
        request.model.value,
        provider.value,
        latency,
    )
    return LLMResponse(
        output=output,
        usage=TokenUsage(
            prompt_tokens=estimate_tokens(request.prompt),
            completion_tokens=estimate_tokens(output),
            total_tokens=estimate_tokens(request.prompt + output),
        ),
        model=request.model,
        latency=latency,
    )


async def execute_batch(requests: list[LLMRequest]) -> list[LLMResponse]:
    """Run all requests concurrently and wait for every one to settle.

    Returns:
        Responses in input order when every request succeeded.

    Raises:
        BatchExecutionError: At least one request failed; wraps the failure
            with the lowest index.
    """
    results = await asyncio.gather(
        *(execute(request) for request in requests),
        return_exceptions=True,
    )

    for index, result in enumerate(results):
        if isinstance(result, BaseException):
            failed = sum(isinstance(r, BaseException) for r in results)
            logger.warning(
                "Batch of %d failed: %d member(s) errored, first at index %d",
                len(requests),
                failed,
                index,
            )
            raise BatchExecutionError(index, result) from result

    return list(results)
