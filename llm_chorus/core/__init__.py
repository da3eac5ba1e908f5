"""
Core layer: the multi-provider pipeline.

- normalization: raw body -> ChatRequest, outcomes -> UnifiedResponse
- invocation: settle-all fan-out across provider adapters
- synthesis: structural combination of several answers
"""

from .invocation import Invoker
from .normalization import ResponseNormalizer, normalize_request
from .synthesis import Synthesizer

__all__ = [
    "Invoker",
    "ResponseNormalizer",
    "normalize_request",
    "Synthesizer",
]
