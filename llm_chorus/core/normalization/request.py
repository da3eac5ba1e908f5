"""
Request normalization module.

Turns a raw decoded request body into a validated ChatRequest. All defaults
(token limit, temperature, provider selection) are applied here once, so
adapters receive fully populated options.
"""

import math
from typing import Any, Dict, List, Optional

from ...config.settings import ChatDefaults
from ...models.chat import ChatMessage, ChatOptions, ChatRequest, TurnRole
from ...providers.errors import InvalidRequestError
from ...providers.registry import ProviderRegistry

# Field names accepted for provider selection, in priority order
PROVIDER_FIELDS = ("providers", "ai", "model")

_ROLES = {role.value: role for role in TurnRole}


def _coerce_role(raw_role: Any) -> TurnRole:
    if isinstance(raw_role, str):
        return _ROLES.get(raw_role.strip().lower(), TurnRole.USER)
    return TurnRole.USER


def normalize_messages(raw_messages: Any) -> tuple:
    """
    Filter and sanitize conversation messages.

    Messages without usable content are dropped; unknown or missing roles
    become `user`. System-role messages are separated from the conversation.

    Returns:
        Tuple of (conversation messages, system prompt fragments)
    """
    if not isinstance(raw_messages, list):
        raise InvalidRequestError("Invalid messages format")

    conversation: List[ChatMessage] = []
    system_parts: List[str] = []

    for raw in raw_messages:
        if not isinstance(raw, dict):
            continue
        content = raw.get("content")
        if content is None or isinstance(content, (dict, list)):
            continue
        content = str(content).strip()
        if not content:
            continue

        role = _coerce_role(raw.get("role"))
        if role == TurnRole.SYSTEM:
            system_parts.append(content)
        else:
            conversation.append(ChatMessage(role=role, content=content))

    return conversation, system_parts


def _read_int(options: Dict[str, Any], *names: str) -> Optional[int]:
    for name in names:
        if name in options and options[name] is not None:
            value = options[name]
            if isinstance(value, bool):
                raise InvalidRequestError(f"options.{name} must be a number")
            try:
                return int(float(value))
            except (TypeError, ValueError, OverflowError):
                raise InvalidRequestError(f"options.{name} must be a number")
    return None


def normalize_options(options: Dict[str, Any], system_parts: List[str],
                      defaults: ChatDefaults) -> ChatOptions:
    """Apply defaults and clamps to the raw options object."""
    requested = _read_int(options, "maxTokens", "max_tokens", "length")
    if requested is None:
        requested = defaults.max_tokens
    max_tokens = min(max(requested, 1), defaults.max_tokens_limit)

    creativity = options.get("creativity")
    if creativity is None:
        temperature = defaults.temperature
    else:
        if isinstance(creativity, bool):
            raise InvalidRequestError("options.creativity must be a number between 0 and 100")
        try:
            creativity = float(creativity)
        except (TypeError, ValueError):
            raise InvalidRequestError("options.creativity must be a number between 0 and 100")
        if not math.isfinite(creativity):
            raise InvalidRequestError("options.creativity must be a number between 0 and 100")
        temperature = min(max(creativity, 0.0), 100.0) / 100

    explicit = options.get("systemPrompt", options.get("system"))
    prompts = []
    if isinstance(explicit, str) and explicit.strip():
        prompts.append(explicit.strip())
    prompts.extend(system_parts)
    system_prompt = "\n\n".join(prompts) if prompts else None

    policy = options.get("synthesis")
    if policy is not None and not isinstance(policy, str):
        raise InvalidRequestError("options.synthesis must be a policy name")

    return ChatOptions(
        max_tokens=max_tokens,
        temperature=temperature,
        system_prompt=system_prompt,
        synthesis_policy=policy.strip().lower() if policy else None,
    )


def select_providers(body: Dict[str, Any], defaults: ChatDefaults,
                     registry: ProviderRegistry) -> List[str]:
    """
    Resolve the provider selection field to canonical provider ids.

    Accepts a list or a comma-separated string under `providers`, `ai` or
    `model`. Unknown names raise UnknownProviderError (an InvalidRequestError).
    """
    raw = None
    for name in PROVIDER_FIELDS:
        if body.get(name):
            raw = body[name]
            break

    if raw is None:
        names = list(defaults.default_providers)
    elif isinstance(raw, str):
        names = [part for part in raw.split(",") if part.strip()]
    elif isinstance(raw, list) and all(isinstance(p, str) for p in raw):
        names = [p for p in raw if p.strip()]
    else:
        raise InvalidRequestError("providers must be a string or a list of strings")

    if not names:
        names = list(defaults.default_providers)

    resolved: List[str] = []
    for name in names:
        provider_id = registry.resolve(name)
        if provider_id not in resolved:
            resolved.append(provider_id)
    return resolved


def normalize_request(body: Any, defaults: ChatDefaults,
                      registry: ProviderRegistry) -> ChatRequest:
    """
    Validate and sanitize a raw request body.

    Args:
        body: Decoded JSON body
        defaults: Default option values
        registry: Registry used to resolve provider names

    Returns:
        ChatRequest ready for invocation

    Raises:
        InvalidRequestError: If the body cannot produce a valid request
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Request body must be a JSON object")

    conversation, system_parts = normalize_messages(body.get("messages"))
    if not conversation:
        raise InvalidRequestError("No valid messages to send")
    if conversation[0].role != TurnRole.USER:
        raise InvalidRequestError("Conversation must start with a user message")

    options = body.get("options")
    if not isinstance(options, dict):
        raise InvalidRequestError("Missing options")

    return ChatRequest(
        messages=conversation,
        options=normalize_options(options, system_parts, defaults),
        providers=select_providers(body, defaults, registry),
    )
