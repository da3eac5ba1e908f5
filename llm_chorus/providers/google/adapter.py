from typing import Any

from httpx import URL

from ...models.chat import ChatRequest
from ...config.constants import GOOGLE_GENERATE_URL
from ..base import EncodedRequest, ProviderAdapter
from .parsers import extract_text_from_generate_response
from .payloads import build_generate_payload


class GoogleAdapter(ProviderAdapter):
    """Google Gemini generateContent adapter.

    The API key is passed as the `key` query parameter, so encoded URLs must
    go through redaction before they are logged.
    """

    provider_id = "google"
    display_name = "Google"
    aliases = ("gemini",)

    def encode(self, request: ChatRequest, api_key: str) -> EncodedRequest:
        url = URL(GOOGLE_GENERATE_URL.format(model=self.model), params={"key": api_key})
        return EncodedRequest(
            url=str(url),
            headers={"content-type": "application/json"},
            body=build_generate_payload(request, self.token_limit(request)),
        )

    def extract_text(self, data: Any) -> str:
        return extract_text_from_generate_response(data)
