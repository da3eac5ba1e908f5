from typing import Any

from ...models.chat import ChatRequest
from ...config.constants import ANTHROPIC_MESSAGES_URL
from ..base import EncodedRequest, ProviderAdapter
from .parsers import extract_text_from_messages_response
from .payloads import build_headers, build_messages_payload


class AnthropicAdapter(ProviderAdapter):
    """Anthropic Messages API adapter."""

    provider_id = "anthropic"
    display_name = "Anthropic"
    aliases = ("claude",)

    def encode(self, request: ChatRequest, api_key: str) -> EncodedRequest:
        return EncodedRequest(
            url=ANTHROPIC_MESSAGES_URL,
            headers=build_headers(api_key),
            body=build_messages_payload(request, self.model, self.token_limit(request)),
        )

    def extract_text(self, data: Any) -> str:
        return extract_text_from_messages_response(data)
