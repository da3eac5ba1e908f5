"""Runtime settings and credential loading.

Defaults are declared once here and applied by the request normalizer;
adapters never fall back to their own defaults.
"""

import os
from typing import Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .constants import (
    ANTHROPIC_API_KEY_ENV,
    DEFAULT_PROVIDERS_ENV,
    GEMINI_API_KEY_ENV,
    GOOGLE_API_KEY_ENV,
    GROQ_API_KEY_ENV,
    PROVIDER_TIMEOUT_ENV,
    SYNTHESIS_POLICY_ENV,
)


class ChatDefaults(BaseModel):
    """Defaults applied to incoming chat requests."""

    max_tokens: int = Field(default=1024, ge=1, description="Used when the request omits maxTokens")
    max_tokens_limit: int = Field(default=4096, ge=1, description="Upper clamp for requested maxTokens")
    temperature: float = Field(default=0.7, ge=0.0, le=1.0, description="Used when creativity is absent")
    default_providers: List[str] = Field(
        default_factory=lambda: ["anthropic"],
        description="Providers used when the request names none"
    )

    @field_validator("default_providers")
    def validate_default_providers(cls, v):
        if not v:
            raise ValueError("default_providers must not be empty")
        return [p.strip().lower() for p in v if p.strip()]


class ProviderSettings(BaseModel):
    """Per-provider model selection and output ceiling."""

    model: str
    max_output_tokens: int = Field(default=4096, ge=1)


PROVIDER_MODEL_DEFAULTS: Dict[str, Dict[str, object]] = {
    "anthropic": {"model": "claude-3-5-sonnet-20241022", "max_output_tokens": 4096},
    "google": {"model": "gemini-1.5-flash", "max_output_tokens": 4096},
    "groq": {"model": "llama-3.3-70b-versatile", "max_output_tokens": 4096},
}


class ChorusSettings(BaseModel):
    """Top-level settings for a ChorusClient."""

    defaults: ChatDefaults = Field(default_factory=ChatDefaults)
    providers: Dict[str, ProviderSettings] = Field(
        default_factory=lambda: {
            k: ProviderSettings(**v) for k, v in PROVIDER_MODEL_DEFAULTS.items()
        }
    )
    timeout_s: float = Field(default=60.0, gt=0, description="Per-provider timeout in seconds")
    synthesis_policy: str = Field(default="labeled", description="Default synthesis policy name")

    def provider(self, provider_id: str) -> Optional[ProviderSettings]:
        return self.providers.get(provider_id)


def load_settings() -> ChorusSettings:
    """Build settings from the environment (and a .env file, if present)."""
    load_dotenv()

    providers = {}
    for provider_id, base in PROVIDER_MODEL_DEFAULTS.items():
        model = os.getenv(f"{provider_id.upper()}_MODEL") or base["model"]
        providers[provider_id] = ProviderSettings(
            model=model,
            max_output_tokens=base["max_output_tokens"],
        )

    defaults = ChatDefaults()
    raw_defaults = os.getenv(DEFAULT_PROVIDERS_ENV)
    if raw_defaults:
        defaults = ChatDefaults(default_providers=raw_defaults.split(","))

    kwargs = {"defaults": defaults, "providers": providers}
    timeout = os.getenv(PROVIDER_TIMEOUT_ENV)
    if timeout:
        kwargs["timeout_s"] = float(timeout)
    policy = os.getenv(SYNTHESIS_POLICY_ENV)
    if policy:
        kwargs["synthesis_policy"] = policy.strip().lower()

    return ChorusSettings(**kwargs)


def load_credentials() -> Dict[str, str]:
    """Read provider API keys from the environment.

    Returns a mapping of provider id to secret. Providers without a key are
    omitted, which the invoker reports as ProviderNotConfigured.
    """
    load_dotenv()

    candidates = {
        "anthropic": os.getenv(ANTHROPIC_API_KEY_ENV),
        "google": os.getenv(GOOGLE_API_KEY_ENV) or os.getenv(GEMINI_API_KEY_ENV),
        "groq": os.getenv(GROQ_API_KEY_ENV),
    }
    return {k: v for k, v in candidates.items() if v}
