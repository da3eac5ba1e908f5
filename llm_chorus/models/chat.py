from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TurnRole(str, Enum):
    """Conversation turn roles."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatMessage(BaseModel):
    """A single conversation turn after sanitizing."""

    role: TurnRole = TurnRole.USER
    content: str

    @field_validator("content")
    def validate_content(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("content must not be empty")
        return v


class ChatOptions(BaseModel):
    """Generation options with defaults already applied."""

    max_tokens: int = Field(..., ge=1, description="Requested output token limit")
    temperature: float = Field(..., ge=0.0, le=1.0, description="Sampling temperature")
    system_prompt: Optional[str] = Field(None, description="System instructions, if any")
    synthesis_policy: Optional[str] = Field(
        None,
        description="Per-request override of the synthesis policy"
    )


class ChatRequest(BaseModel):
    """Validated request handed to the invoker.

    `providers` keeps the caller's order; it drives both fan-out and the
    order in which outcomes are synthesized.
    """

    messages: List[ChatMessage] = Field(..., min_length=1)
    options: ChatOptions
    providers: List[str] = Field(..., min_length=1)

    @field_validator("messages")
    def validate_first_turn(cls, v):
        if v and v[0].role != TurnRole.USER:
            raise ValueError("conversation must start with a user message")
        return v

    @field_validator("providers")
    def validate_providers(cls, v):
        seen = []
        for provider_id in v:
            if provider_id not in seen:
                seen.append(provider_id)
        return seen

    @property
    def is_fan_out(self) -> bool:
        return len(self.providers) > 1
