from typing import Any

from ...models.chat import ChatRequest
from ...config.constants import GROQ_CHAT_URL
from ..base import EncodedRequest, ProviderAdapter
from .parsers import extract_text_from_chat_completion
from .payloads import build_chat_payload, build_headers


class GroqAdapter(ProviderAdapter):
    """Groq adapter (OpenAI-compatible chat completions)."""

    provider_id = "groq"
    display_name = "Groq"
    aliases = ("grok",)

    def encode(self, request: ChatRequest, api_key: str) -> EncodedRequest:
        return EncodedRequest(
            url=GROQ_CHAT_URL,
            headers=build_headers(api_key),
            body=build_chat_payload(request, self.model, self.token_limit(request)),
        )

    def extract_text(self, data: Any) -> str:
        return extract_text_from_chat_completion(data)
