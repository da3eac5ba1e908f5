"""Canned upstream response bodies, shaped like each provider's real API."""

ANTHROPIC_HOST = "api.anthropic.com"
GOOGLE_HOST = "generativelanguage.googleapis.com"
GROQ_HOST = "api.groq.com"

ANTHROPIC_OK = {
    "id": "msg_01XFDUDYJgAACzvnptvVoYEL",
    "type": "message",
    "role": "assistant",
    "content": [{"type": "text", "text": "Hello from Claude"}],
    "model": "claude-3-5-sonnet-20241022",
    "stop_reason": "end_turn",
    "usage": {"input_tokens": 12, "output_tokens": 6},
}

GOOGLE_OK = {
    "candidates": [
        {
            "content": {"parts": [{"text": "Hello from Gemini"}], "role": "model"},
            "finishReason": "STOP",
            "index": 0,
        }
    ],
    "usageMetadata": {"promptTokenCount": 4, "candidatesTokenCount": 5, "totalTokenCount": 9},
}

GROQ_OK = {
    "id": "chatcmpl-f51b2cd2-bef7-417e-964e-a08f0b513c22",
    "object": "chat.completion",
    "model": "llama-3.3-70b-versatile",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello from Groq"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 18, "completion_tokens": 4, "total_tokens": 22},
}

ANTHROPIC_AUTH_ERROR = {
    "type": "error",
    "error": {"type": "authentication_error", "message": "invalid x-api-key"},
}

GROQ_RATE_LIMIT_ERROR = {
    "error": {
        "message": "Rate limit reached for model llama-3.3-70b-versatile",
        "type": "tokens",
        "code": "rate_limit_exceeded",
    }
}

GOOGLE_BAD_REQUEST = {
    "error": {
        "code": 400,
        "message": "API key not valid. Please pass a valid API key.",
        "status": "INVALID_ARGUMENT",
    }
}

OVERLOADED_ERROR = {
    "type": "error",
    "error": {"type": "overloaded_error", "message": "Overloaded"},
}

HTML_GATEWAY_ERROR = "<html><body><h1>502 Bad Gateway</h1></body></html>"

OK_BODIES = {
    "anthropic": ANTHROPIC_OK,
    "google": GOOGLE_OK,
    "groq": GROQ_OK,
}

OK_TEXTS = {
    "anthropic": "Hello from Claude",
    "google": "Hello from Gemini",
    "groq": "Hello from Groq",
}
