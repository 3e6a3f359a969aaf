# This project was developed with assistance from AI tools.
"""Inference module -- prompt grounding, response gate, and provider transport."""

from .client import get_completion
from .config import ProviderConfig, ProviderKind, get_provider, resolve_provider
from .errors import LLMConfigurationError, LLMTransportError
from .prompts import build_grounded_prompt
from .safety import ValidationOutcome, validate_response
from .simulated import simulate_response

__all__ = [
    "LLMConfigurationError",
    "LLMTransportError",
    "ProviderConfig",
    "ProviderKind",
    "ValidationOutcome",
    "build_grounded_prompt",
    "get_completion",
    "get_provider",
    "resolve_provider",
    "simulate_response",
    "validate_response",
]
