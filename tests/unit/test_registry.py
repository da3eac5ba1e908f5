"""Tests for the provider registry."""

import pytest

from llm_chorus.config.settings import ChorusSettings, ProviderSettings
from llm_chorus.providers import AnthropicAdapter, GroqAdapter
from llm_chorus.providers.errors import UnknownProviderError
from llm_chorus.providers.registry import ProviderRegistry, create_default_registry


class MistralAdapter(GroqAdapter):
    provider_id = "mistral"
    display_name = "Mistral"
    aliases = ("le-chat",)


class TestProviderRegistry:
    """Registration, lookup and alias resolution."""

    def test_default_registry(self, registry):
        assert registry.list_providers() == ["anthropic", "google", "groq"]
        assert registry.display_names() == {
            "anthropic": "Anthropic", "google": "Google", "groq": "Groq"
        }

    @pytest.mark.parametrize("name,expected", [
        ("anthropic", "anthropic"),
        ("Claude", "anthropic"),
        ("gemini", "google"),
        (" GROK ", "groq"),
    ])
    def test_resolve(self, registry, name, expected):
        assert registry.resolve(name) == expected
        assert registry.has(name)

    def test_unknown_provider(self, registry):
        with pytest.raises(UnknownProviderError) as exc_info:
            registry.resolve("openai")
        assert exc_info.value.provider_id == "openai"
        assert exc_info.value.available == ["anthropic", "google", "groq"]
        assert not registry.has("openai")

    def test_register_new_provider(self, registry):
        registry.register(MistralAdapter(ProviderSettings(model="mistral-large")))

        assert registry.resolve("le-chat") == "mistral"
        assert registry.get("mistral").model == "mistral-large"

    def test_duplicate_id_rejected(self, registry):
        with pytest.raises(ValueError, match="already registered"):
            registry.register(AnthropicAdapter())

    def test_duplicate_alias_rejected(self):
        class Impostor(MistralAdapter):
            provider_id = "impostor"
            aliases = ("claude",)

        registry = ProviderRegistry()
        registry.register(AnthropicAdapter())
        with pytest.raises(ValueError, match="Alias 'claude'"):
            registry.register(Impostor(ProviderSettings(model="x")))

    def test_non_adapter_rejected(self):
        with pytest.raises(TypeError):
            ProviderRegistry().register(object())

    def test_unregister(self, registry):
        assert registry.unregister("anthropic") is True
        assert not registry.has("claude")
        assert registry.unregister("anthropic") is False

    def test_settings_pick_models(self):
        settings = ChorusSettings(providers={
            "anthropic": ProviderSettings(model="claude-3-opus-20240229"),
            "google": ProviderSettings(model="gemini-1.5-pro"),
            "groq": ProviderSettings(model="mixtral-8x7b-32768", max_output_tokens=1024),
        })
        registry = create_default_registry(settings)
        assert registry.get("claude").model == "claude-3-opus-20240229"
        assert registry.get("groq").max_output_tokens == 1024
