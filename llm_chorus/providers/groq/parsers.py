from __future__ import annotations

from typing import Any

from ..errors import UpstreamFormatError


def extract_text_from_chat_completion(data: Any) -> str:
    """Return choices[0].message.content from an OpenAI-shaped body."""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise UpstreamFormatError("missing choices")

    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise UpstreamFormatError("missing choices[0].message.content")
    return content
