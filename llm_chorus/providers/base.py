"""
Base Provider Adapter Interface

This module defines the abstract base class for all LLM provider adapters.
An adapter is a pure translation unit: it encodes a ChatRequest into one
provider's wire format and decodes that provider's raw HTTP response into a
ProviderOutcome. Transport is owned by the invoker.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import httpx

from ..config.settings import PROVIDER_MODEL_DEFAULTS, ProviderSettings
from ..models.chat import ChatRequest
from ..models.responses import ProviderOutcome
from .errors import ErrorTranslator, UpstreamFormatError


@dataclass
class EncodedRequest:
    """Provider-specific HTTP request ready to send."""
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)


class ProviderAdapter(ABC):
    """
    Abstract base class for LLM provider adapters.

    The adapter is responsible for:
    - Translating the generic request to the provider's payload and headers
    - Locating the generated text in the provider's response
    - Reporting failures as DomainError values, never as exceptions

    Provider adapters should NOT contain:
    - Transport (the invoker sends the request)
    - Cross-provider logic
    - Default values for request options (the request normalizer applies them)
    """

    provider_id: str = ""
    display_name: str = ""
    aliases: Tuple[str, ...] = ()

    def __init__(self, settings: Optional[ProviderSettings] = None):
        if settings is None:
            settings = ProviderSettings(**PROVIDER_MODEL_DEFAULTS[self.provider_id])
        self.settings = settings

    @property
    def model(self) -> str:
        return self.settings.model

    @property
    def max_output_tokens(self) -> int:
        return self.settings.max_output_tokens

    def token_limit(self, request: ChatRequest) -> int:
        """Requested token limit clamped to this provider's ceiling."""
        return max(1, min(request.options.max_tokens, self.max_output_tokens))

    @abstractmethod
    def encode(self, request: ChatRequest, api_key: str) -> EncodedRequest:
        """
        Build the provider request.

        Args:
            request: Normalized chat request
            api_key: Provider credential

        Returns:
            EncodedRequest with url, headers and JSON body
        """
        pass

    @abstractmethod
    def extract_text(self, data: Any) -> str:
        """
        Locate the generated text in a decoded success body.

        Raises:
            UpstreamFormatError: If the documented field path is missing
        """
        pass

    def decode(self, response: httpx.Response) -> ProviderOutcome:
        """
        Turn a raw upstream response into an outcome.

        Non-success statuses go through the ErrorTranslator. Success bodies
        that are not JSON, lack the expected text path, or carry only blank
        text become UpstreamFormatError failures. This method does not raise.
        """
        body_text = response.text

        if not response.is_success:
            error = ErrorTranslator.translate_http_error(
                self.display_name, response.status_code, body_text
            )
            return ProviderOutcome.failed(self.provider_id, error)

        try:
            data = json.loads(body_text)
        except ValueError:
            error = ErrorTranslator.format_error(
                self.display_name, "body is not valid JSON", body_text, response.status_code
            )
            return ProviderOutcome.failed(self.provider_id, error)

        try:
            text = self.extract_text(data)
        except UpstreamFormatError as e:
            error = ErrorTranslator.format_error(
                self.display_name, str(e), body_text, response.status_code
            )
            return ProviderOutcome.failed(self.provider_id, error)

        if not text.strip():
            error = ErrorTranslator.format_error(
                self.display_name, "empty text", body_text, response.status_code
            )
            return ProviderOutcome.failed(self.provider_id, error)

        return ProviderOutcome.succeeded(self.provider_id, text)

    def get_provider_name(self) -> str:
        return self.display_name or self.provider_id
