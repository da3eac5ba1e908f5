"""Configuration module for llm-chorus."""

from .settings import (
    PROVIDER_MODEL_DEFAULTS,
    ChatDefaults,
    ChorusSettings,
    ProviderSettings,
    load_credentials,
    load_settings,
)

# Import all constants
from .constants import *

__all__ = [
    "PROVIDER_MODEL_DEFAULTS",
    "ChatDefaults",
    "ChorusSettings",
    "ProviderSettings",
    "load_credentials",
    "load_settings",
]
