"""Provider registry.

Maps provider ids (and their aliases) to adapter instances, so the invoker
and request normalizer never dispatch on provider names themselves. New
providers are added by registering an adapter.
"""

import logging
from typing import Dict, List, Optional

from ..config.settings import ChorusSettings
from .anthropic.adapter import AnthropicAdapter
from .base import ProviderAdapter
from .errors import UnknownProviderError
from .google.adapter import GoogleAdapter
from .groq.adapter import GroqAdapter

logger = logging.getLogger(__name__)

BUILTIN_ADAPTERS = (AnthropicAdapter, GoogleAdapter, GroqAdapter)


class ProviderRegistry:
    """Registry of provider adapters keyed by provider id."""

    def __init__(self):
        self._adapters: Dict[str, ProviderAdapter] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, adapter: ProviderAdapter) -> None:
        """Register an adapter instance.

        Args:
            adapter: Adapter to register

        Raises:
            ValueError: If the id or one of its aliases is already taken
            TypeError: If adapter doesn't implement ProviderAdapter
        """
        if not isinstance(adapter, ProviderAdapter):
            raise TypeError(f"Adapter must inherit from ProviderAdapter, got {type(adapter)}")

        provider_id = adapter.provider_id.lower()
        if not provider_id:
            raise ValueError("Adapter has no provider_id")
        if provider_id in self._adapters or provider_id in self._aliases:
            raise ValueError(f"Provider '{provider_id}' already registered")

        for alias in adapter.aliases:
            alias = alias.lower()
            if alias in self._adapters or alias in self._aliases:
                raise ValueError(f"Alias '{alias}' already registered")

        self._adapters[provider_id] = adapter
        for alias in adapter.aliases:
            self._aliases[alias.lower()] = provider_id
        logger.info(f"Registered provider '{provider_id}' model {adapter.model}")

    def resolve(self, name: str) -> str:
        """Return the canonical provider id for an id or alias.

        Raises:
            UnknownProviderError: If nothing is registered under that name
        """
        key = name.strip().lower()
        if key in self._adapters:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise UnknownProviderError(name, self.list_providers())

    def get(self, name: str) -> ProviderAdapter:
        return self._adapters[self.resolve(name)]

    def has(self, name: str) -> bool:
        key = name.strip().lower()
        return key in self._adapters or key in self._aliases

    def list_providers(self) -> List[str]:
        return list(self._adapters.keys())

    def display_names(self) -> Dict[str, str]:
        return {pid: a.get_provider_name() for pid, a in self._adapters.items()}

    def unregister(self, provider_id: str) -> bool:
        """Unregister a provider (mainly for testing)."""
        if provider_id not in self._adapters:
            return False
        adapter = self._adapters.pop(provider_id)
        for alias in adapter.aliases:
            self._aliases.pop(alias.lower(), None)
        logger.info(f"Unregistered provider '{provider_id}'")
        return True


def create_default_registry(settings: Optional[ChorusSettings] = None) -> ProviderRegistry:
    """Registry holding the built-in Anthropic, Google and Groq adapters."""
    settings = settings or ChorusSettings()
    registry = ProviderRegistry()
    for adapter_cls in BUILTIN_ADAPTERS:
        registry.register(adapter_cls(settings.provider(adapter_cls.provider_id)))
    return registry
