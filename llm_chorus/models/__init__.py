from .chat import ChatMessage, ChatOptions, ChatRequest, TurnRole
from .responses import (
    Choice,
    ChoiceMessage,
    DomainError,
    ErrorKind,
    ErrorResponse,
    OutcomeStatus,
    ProviderOutcome,
    UnifiedResponse,
)

__all__ = [
    "ChatMessage",
    "ChatOptions",
    "ChatRequest",
    "TurnRole",
    "Choice",
    "ChoiceMessage",
    "DomainError",
    "ErrorKind",
    "ErrorResponse",
    "OutcomeStatus",
    "ProviderOutcome",
    "UnifiedResponse",
]
