from __future__ import annotations

from typing import Any

from ..errors import UpstreamFormatError


def extract_text_from_messages_response(data: Any) -> str:
    """Return content[0].text from a Messages API response body."""
    content = data.get("content") if isinstance(data, dict) else None
    if not isinstance(content, list) or not content:
        raise UpstreamFormatError("missing content")

    first = content[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise UpstreamFormatError("missing content[0].text")
    return text
