# This project was developed with assistance from AI tools.
"""Inference module -- provider handlers, dispatch, and endpoint config."""

from .dispatcher import (
    BatchExecutionError,
    ProviderExecutionError,
    UnknownModelError,
    execute,
    execute_batch,
)
from .providers import get_provider_handler
from .tokens import estimate_tokens

__all__ = [
    "BatchExecutionError",
    "ProviderExecutionError",
    "UnknownModelError",
    "estimate_tokens",
    "execute",
    "execute_batch",
    "get_provider_handler",
]
