"""
Provider Adapters Layer

This layer contains all LLM provider-specific translation. Each adapter
maps between the normalized ChatRequest / ProviderOutcome shapes and one
provider's wire format.
"""

from .base import EncodedRequest, ProviderAdapter
from .errors import (
    ChorusError,
    ErrorTranslator,
    InvalidRequestError,
    UnknownProviderError,
    UpstreamFormatError,
)
from .anthropic.adapter import AnthropicAdapter
from .google.adapter import GoogleAdapter
from .groq.adapter import GroqAdapter
from .registry import ProviderRegistry, create_default_registry

__all__ = [
    "EncodedRequest",
    "ProviderAdapter",
    "ChorusError",
    "ErrorTranslator",
    "InvalidRequestError",
    "UnknownProviderError",
    "UpstreamFormatError",
    "AnthropicAdapter",
    "GoogleAdapter",
    "GroqAdapter",
    "ProviderRegistry",
    "create_default_registry",
]
