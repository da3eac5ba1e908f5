from __future__ import annotations

from typing import Any, Dict, List

from ...config.constants import GOOGLE_SAFETY_CATEGORIES, GOOGLE_SAFETY_THRESHOLD
from ...models.chat import ChatRequest, TurnRole


def map_role(role: TurnRole) -> str:
    """Gemini names the assistant turn "model"; everything else is "user"."""
    return "model" if role == TurnRole.ASSISTANT else "user"


def safety_settings() -> List[Dict[str, str]]:
    return [
        {"category": category, "threshold": GOOGLE_SAFETY_THRESHOLD}
        for category in GOOGLE_SAFETY_CATEGORIES
    ]


def build_generate_payload(request: ChatRequest, max_tokens: int) -> Dict[str, Any]:
    contents = [
        {"role": map_role(m.role), "parts": [{"text": m.content}]}
        for m in request.messages
    ]
    payload: Dict[str, Any] = {
        "contents": contents,
        "generationConfig": {
            "temperature": request.options.temperature,
            "maxOutputTokens": max_tokens,
        },
        "safetySettings": safety_settings(),
    }
    if request.options.system_prompt:
        payload["systemInstruction"] = {"parts": [{"text": request.options.system_prompt}]}
    return payload
