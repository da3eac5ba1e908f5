from __future__ import annotations

from typing import Any

from ..errors import UpstreamFormatError


def extract_text_from_generate_response(data: Any) -> str:
    """Return candidates[0].content.parts[0].text from a generateContent body."""
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, list) or not candidates:
        raise UpstreamFormatError("missing candidates")

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        raise UpstreamFormatError("missing candidates[0].content.parts")

    text = parts[0].get("text") if isinstance(parts[0], dict) else None
    if not isinstance(text, str):
        raise UpstreamFormatError("missing candidates[0].content.parts[0].text")
    return text
