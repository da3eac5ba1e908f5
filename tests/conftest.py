"""Shared fixtures for the llm-chorus test suite."""

import pytest

from llm_chorus.api.client import ChorusClient
from llm_chorus.config.settings import ChatDefaults, ChorusSettings
from llm_chorus.models.chat import ChatMessage, ChatOptions, ChatRequest
from llm_chorus.providers.registry import create_default_registry

from tests.helpers.mock_transport import ProviderRouter


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no network")
    config.addinivalue_line("markers", "integration: tests through the HTTP surface")


@pytest.fixture
def settings():
    return ChorusSettings()


@pytest.fixture
def defaults():
    return ChatDefaults()


@pytest.fixture
def registry(settings):
    return create_default_registry(settings)


@pytest.fixture
def credentials():
    return {
        "anthropic": "sk-ant-test-key",
        "google": "google-test-key",
        "groq": "gsk-test-key",
    }


@pytest.fixture
def router():
    """Upstream double answering every provider successfully by default."""
    return ProviderRouter()


@pytest.fixture
def make_client(settings, credentials, registry, router):
    """Factory for a ChorusClient wired to the upstream double."""
    def factory(creds=None, client_settings=None):
        client_settings = client_settings or settings
        return ChorusClient(
            settings=client_settings,
            credentials=credentials if creds is None else creds,
            registry=registry,
            http_client=router.client(),
        )
    return factory


@pytest.fixture
def make_request():
    """Build a ChatRequest without going through normalization."""
    def factory(providers=("anthropic",), content="Hello", max_tokens=1024,
                temperature=0.7, system_prompt=None, messages=None):
        return ChatRequest(
            messages=messages or [ChatMessage(content=content)],
            options=ChatOptions(
                max_tokens=max_tokens,
                temperature=temperature,
                system_prompt=system_prompt,
            ),
            providers=list(providers),
        )
    return factory


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set provider keys in the environment."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-anthropic-key")
    monkeypatch.setenv("GOOGLE_API_KEY", "env-google-key")
    monkeypatch.setenv("GROQ_API_KEY", "env-groq-key")
