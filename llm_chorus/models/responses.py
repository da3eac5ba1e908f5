from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from ..config.constants import RAW_DETAIL_LIMIT


class ErrorKind(str, Enum):
    """Domain error taxonomy shared by every provider."""
    INVALID_REQUEST = "invalid_request"
    PROVIDER_NOT_CONFIGURED = "provider_not_configured"
    AUTH_FAILED = "auth_failed"
    RATE_LIMITED = "rate_limited"
    BAD_REQUEST = "bad_request"
    UPSTREAM_FORMAT_ERROR = "upstream_format_error"
    UPSTREAM_ERROR = "upstream_error"


class DomainError(BaseModel):
    """Classified failure with bounded diagnostic detail."""

    kind: ErrorKind
    message: str
    raw_detail: str = Field(default="", max_length=RAW_DETAIL_LIMIT)
    status_code: Optional[int] = Field(default=None, description="Upstream HTTP status, if any")


class OutcomeStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"


class ProviderOutcome(BaseModel):
    """Result of one provider call within one invocation."""

    provider_id: str
    status: OutcomeStatus
    text: Optional[str] = None
    error: Optional[DomainError] = None

    @model_validator(mode="after")
    def check_payload(self):
        if self.status == OutcomeStatus.OK and self.text is None:
            raise ValueError("ok outcome requires text")
        if self.status == OutcomeStatus.FAILED and self.error is None:
            raise ValueError("failed outcome requires error")
        return self

    @classmethod
    def succeeded(cls, provider_id: str, text: str) -> "ProviderOutcome":
        return cls(provider_id=provider_id, status=OutcomeStatus.OK, text=text)

    @classmethod
    def failed(cls, provider_id: str, error: DomainError) -> "ProviderOutcome":
        return cls(provider_id=provider_id, status=OutcomeStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.OK


class ChoiceMessage(BaseModel):
    role: str = "assistant"
    content: str


class Choice(BaseModel):
    message: ChoiceMessage


class UnifiedResponse(BaseModel):
    """Externally visible success shape, identical for one or many providers."""

    choices: List[Choice]

    @classmethod
    def from_text(cls, text: str) -> "UnifiedResponse":
        return cls(choices=[Choice(message=ChoiceMessage(content=text))])

    @property
    def text(self) -> str:
        return self.choices[0].message.content


class ErrorResponse(BaseModel):
    """Externally visible failure shape."""

    error: str
    details: Optional[str] = None
    status_code: int = Field(default=500, exclude=True)
