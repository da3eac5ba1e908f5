"""
llm-chorus - one chat endpoint, several LLM providers.

This package sends a chat request to one or more providers:
- Anthropic (Claude models)
- Google (Gemini models)
- Groq (OpenAI-compatible hosted models)

Features:
- One request shape, translated to each provider's wire format
- Concurrent fan-out that tolerates individual provider failures
- Configurable synthesis of several answers into one
- Uniform error taxonomy across providers
"""

__version__ = "0.1.0"

from .api.client import ChorusClient
from .config.settings import ChatDefaults, ChorusSettings, load_credentials, load_settings
from .core import Invoker, ResponseNormalizer, Synthesizer, normalize_request
from .models.chat import ChatMessage, ChatOptions, ChatRequest, TurnRole
from .models.responses import (
    DomainError,
    ErrorKind,
    ErrorResponse,
    OutcomeStatus,
    ProviderOutcome,
    UnifiedResponse,
)
from .providers import (
    InvalidRequestError,
    ProviderAdapter,
    ProviderRegistry,
    create_default_registry,
)

__all__ = [
    # Main client
    "ChorusClient",

    # Configuration
    "ChatDefaults",
    "ChorusSettings",
    "load_credentials",
    "load_settings",

    # Pipeline
    "Invoker",
    "ResponseNormalizer",
    "Synthesizer",
    "normalize_request",

    # Providers
    "ProviderAdapter",
    "ProviderRegistry",
    "create_default_registry",
    "InvalidRequestError",

    # Models
    "ChatMessage",
    "ChatOptions",
    "ChatRequest",
    "TurnRole",
    "DomainError",
    "ErrorKind",
    "ErrorResponse",
    "OutcomeStatus",
    "ProviderOutcome",
    "UnifiedResponse",
]
