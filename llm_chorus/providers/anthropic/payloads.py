from __future__ import annotations

from typing import Any, Dict, List

from ...config.constants import ANTHROPIC_VERSION
from ...models.chat import ChatRequest


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "content-type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": ANTHROPIC_VERSION,
    }


def build_messages_payload(request: ChatRequest, model: str, max_tokens: int) -> Dict[str, Any]:
    """Assemble a Messages API body.

    The system prompt travels as a top-level field; it is dropped entirely
    when absent rather than sent as null.
    """
    messages: List[Dict[str, str]] = [
        {"role": m.role.value, "content": m.content} for m in request.messages
    ]
    payload: Dict[str, Any] = {
        "model": model,
        "max_tokens": max_tokens,
        "temperature": request.options.temperature,
        "messages": messages,
    }
    if request.options.system_prompt:
        payload["system"] = request.options.system_prompt
    return payload
