from __future__ import annotations

from typing import Any, Dict, List

from ...models.chat import ChatRequest


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "content-type": "application/json",
        "authorization": f"Bearer {api_key}",
    }


def build_chat_payload(request: ChatRequest, model: str, max_tokens: int) -> Dict[str, Any]:
    """Assemble an OpenAI-compatible chat completions body (non-streaming)."""
    messages: List[Dict[str, str]] = []
    if request.options.system_prompt:
        messages.append({"role": "system", "content": request.options.system_prompt})
    messages.extend({"role": m.role.value, "content": m.content} for m in request.messages)

    return {
        "model": model,
        "messages": messages,
        "temperature": request.options.temperature,
        "max_tokens": max_tokens,
        "stream": False,
    }
