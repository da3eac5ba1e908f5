"""
Error translation utilities for provider adapters.

This module classifies upstream HTTP and transport failures into the small
ErrorKind taxonomy, so every provider reports failures the same way.
"""

import asyncio
import json
from typing import Any, Dict, Optional

import httpx

from ..config.constants import RAW_DETAIL_LIMIT
from ..models.responses import DomainError, ErrorKind


class ChorusError(Exception):
    """Base exception for llm-chorus."""
    pass


class InvalidRequestError(ChorusError):
    """Raised when an incoming request cannot be processed.

    This aborts the whole request; no provider is contacted.
    """

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownProviderError(InvalidRequestError):
    """Raised when a request names a provider that is not registered."""

    def __init__(self, provider_id: str, available: Optional[list] = None):
        self.provider_id = provider_id
        self.available = available or []
        message = f"Unknown provider '{provider_id}'"
        if self.available:
            message += f". Available providers: {', '.join(self.available)}"
        super().__init__(message)


class UpstreamFormatError(ChorusError):
    """Raised by response parsers when the expected field path is missing.

    Adapters catch it in decode() and turn it into a failed outcome.
    """
    pass


class ErrorTranslator:
    """Maps upstream conditions to DomainError values."""

    STATUS_KINDS = {
        401: ErrorKind.AUTH_FAILED,
        429: ErrorKind.RATE_LIMITED,
        400: ErrorKind.BAD_REQUEST,
    }

    # HTTP status served to the caller when a single-provider request fails
    HTTP_STATUS = {
        ErrorKind.AUTH_FAILED: 401,
        ErrorKind.RATE_LIMITED: 429,
    }

    USER_MESSAGES = {
        ErrorKind.AUTH_FAILED: "Authentication failed. Please check the {name} API key.",
        ErrorKind.RATE_LIMITED: "Rate limit exceeded. Please try again later.",
        ErrorKind.BAD_REQUEST: "Invalid request format.",
        ErrorKind.PROVIDER_NOT_CONFIGURED: "{name} API key not configured.",
        ErrorKind.UPSTREAM_FORMAT_ERROR: "Invalid response format from {name} API.",
        ErrorKind.UPSTREAM_ERROR: "Server error",
    }

    @staticmethod
    def truncate(detail: Any, limit: int = RAW_DETAIL_LIMIT) -> str:
        """Bound diagnostic text so oversized payloads never leak through."""
        if detail is None:
            return ""
        text = str(detail)
        return text[:limit]

    @staticmethod
    def _upstream_message(body_text: str) -> Optional[str]:
        """Pull the provider's own error message out of a JSON error body."""
        try:
            data = json.loads(body_text)
        except (TypeError, ValueError):
            return None
        if not isinstance(data, dict):
            return None

        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        if data.get("message"):
            return str(data["message"])
        return None

    @staticmethod
    def is_json(body_text: str) -> bool:
        try:
            json.loads(body_text)
        except (TypeError, ValueError):
            return False
        return True

    @classmethod
    def translate_http_error(
        cls,
        provider_name: str,
        status_code: int,
        body_text: str
    ) -> DomainError:
        """
        Classify a non-success upstream response.

        Args:
            provider_name: Display name used in messages (e.g., "Anthropic")
            status_code: Upstream HTTP status
            body_text: Raw upstream body

        Returns:
            DomainError with kind, message and truncated raw detail
        """
        kind = cls.STATUS_KINDS.get(status_code)
        if kind is None:
            if not cls.is_json(body_text):
                kind = ErrorKind.UPSTREAM_FORMAT_ERROR
            else:
                kind = ErrorKind.UPSTREAM_ERROR

        message = cls._upstream_message(body_text) or f"{provider_name} API error: {status_code}"

        return DomainError(
            kind=kind,
            message=cls.truncate(message),
            raw_detail=cls.truncate(body_text),
            status_code=status_code,
        )

    @classmethod
    def format_error(cls, provider_name: str, reason: str, body_text: str = "",
                     status_code: Optional[int] = None) -> DomainError:
        """Error for a success status whose body is not what the provider documents."""
        return DomainError(
            kind=ErrorKind.UPSTREAM_FORMAT_ERROR,
            message=f"Invalid response format from {provider_name} API: {reason}",
            raw_detail=cls.truncate(body_text),
            status_code=status_code,
        )

    @classmethod
    def not_configured(cls, provider_name: str) -> DomainError:
        return DomainError(
            kind=ErrorKind.PROVIDER_NOT_CONFIGURED,
            message=f"{provider_name} API key not configured",
        )

    @classmethod
    def translate_exception(cls, provider_name: str, error: BaseException) -> DomainError:
        """
        Classify a failure that happened before a response arrived.

        Timeouts and transport errors become UpstreamError; anything else is
        reported the same way with its type name, so a programming error in
        one provider still cannot take down the others.
        """
        if isinstance(error, (asyncio.TimeoutError, httpx.TimeoutException)):
            message = f"{provider_name} API request timed out"
        elif isinstance(error, httpx.HTTPError):
            message = f"{provider_name} API transport error: {type(error).__name__}"
        else:
            message = f"{provider_name} API call failed: {type(error).__name__}"

        return DomainError(
            kind=ErrorKind.UPSTREAM_ERROR,
            message=message,
            raw_detail=cls.truncate(error),
        )

    @classmethod
    def http_status_for(cls, error: DomainError) -> int:
        return cls.HTTP_STATUS.get(error.kind, 500)

    @classmethod
    def user_message_for(cls, error: DomainError, provider_name: str) -> str:
        template = cls.USER_MESSAGES.get(error.kind, "Server error")
        return template.format(name=provider_name)

    @staticmethod
    def get_error_classification(error: DomainError) -> Dict[str, Any]:
        """Flatten an error into log-friendly fields."""
        return {
            'category': error.kind.value,
            'error_msg': error.message,
        }
