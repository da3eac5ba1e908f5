"""End-to-end tests through the FastAPI surface with mocked upstreams."""

import pytest
from fastapi.testclient import TestClient

from llm_chorus import __version__
from llm_chorus.http.api import create_app, get_client

from tests.helpers.mock_transport import raising_handler, status_handler, text_handler
from tests.helpers.upstream_fixtures import (
    ANTHROPIC_AUTH_ERROR,
    GROQ_RATE_LIMIT_ERROR,
    HTML_GATEWAY_ERROR,
    OK_TEXTS,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def http(make_client):
    def factory(**kwargs):
        return TestClient(create_app(make_client(**kwargs)))
    return factory


def chat_body(content="Hello", **extra):
    body = {"messages": [{"role": "user", "content": content}], "options": {}}
    body.update(extra)
    return body


class TestChatEndpoint:
    """POST /api/chat"""

    def test_single_provider_success(self, http):
        response = http().post("/api/chat", json=chat_body(providers=["google"]))

        assert response.status_code == 200
        assert response.json() == {
            "choices": [{"message": {"role": "assistant", "content": OK_TEXTS["google"]}}]
        }

    def test_empty_messages(self, http, router):
        response = http().post("/api/chat", json=chat_body(messages=[]))

        assert response.status_code == 400
        assert "error" in response.json()
        assert router.calls == []

    def test_whitespace_only_messages(self, http):
        body = chat_body(messages=[{"role": "user", "content": "   "}])
        assert http().post("/api/chat", json=body).status_code == 400

    def test_assistant_first(self, http, router):
        body = chat_body(messages=[
            {"role": "assistant", "content": "Hi"},
            {"role": "user", "content": "Hello"},
        ])

        response = http().post("/api/chat", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Conversation must start with a user message"}
        assert router.calls == []

    def test_invalid_json(self, http):
        response = http().post(
            "/api/chat", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}

    def test_unknown_provider(self, http):
        response = http().post("/api/chat", json=chat_body(providers=["openai"]))

        assert response.status_code == 400
        assert "openai" in response.json()["error"]

    def test_upstream_auth_failure(self, http, router):
        router.handlers["anthropic"] = status_handler(401, ANTHROPIC_AUTH_ERROR)

        response = http().post("/api/chat", json=chat_body())

        assert response.status_code == 401
        assert response.json() == {
            "error": "Authentication failed. Please check the Anthropic API key.",
            "details": "invalid x-api-key",
        }

    def test_upstream_rate_limit(self, http, router):
        router.handlers["groq"] = status_handler(429, GROQ_RATE_LIMIT_ERROR)

        response = http().post("/api/chat", json=chat_body(providers=["groq"]))

        assert response.status_code == 429
        assert response.json()["error"] == "Rate limit exceeded. Please try again later."

    def test_upstream_html_error(self, http, router):
        router.handlers["groq"] = status_handler(502, text=HTML_GATEWAY_ERROR)

        response = http().post("/api/chat", json=chat_body(providers=["groq"]))

        assert response.status_code == 500
        assert response.json()["error"] == "Invalid response format from Groq API."

    def test_missing_key(self, http):
        response = http(creds={}).post("/api/chat", json=chat_body())

        assert response.status_code == 500
        assert response.json()["error"] == "Anthropic API key not configured."

    def test_ping(self, http, router):
        response = http().post("/api/chat", json=chat_body("ping"))

        assert response.status_code == 200
        assert response.json()["choices"][0]["message"]["content"] == "pong"
        assert router.calls == []

    def test_get_not_allowed(self, http):
        assert http().get("/api/chat").status_code == 405

    def test_options_preflight(self, http):
        response = http().options("/api/chat")

        assert response.status_code == 200
        assert response.content == b""

    def test_cors_headers(self, http):
        response = http().post(
            "/api/chat", json=chat_body("ping"), headers={"Origin": "https://example.com"}
        )
        assert response.headers["access-control-allow-origin"] == "*"


class TestFanOut:
    """Multi-provider requests through the endpoint."""

    def test_partial_failure(self, http, router):
        router.handlers["google"] = text_handler("google", "ok")
        router.handlers["groq"] = raising_handler()

        response = http().post("/api/chat", json=chat_body(providers=["google", "groq"]))

        assert response.status_code == 200
        content = response.json()["choices"][0]["message"]["content"]
        assert "ok" in content
        assert "[Groq response unavailable]" in content

    def test_total_failure_is_200(self, http, router):
        router.handlers["anthropic"] = status_handler(401, ANTHROPIC_AUTH_ERROR)
        router.handlers["google"] = raising_handler()
        router.handlers["groq"] = status_handler(429, GROQ_RATE_LIMIT_ERROR)

        response = http().post(
            "/api/chat", json=chat_body(providers=["anthropic", "google", "groq"])
        )

        assert response.status_code == 200
        content = response.json()["choices"][0]["message"]["content"]
        for name in ("Anthropic", "Google", "Groq"):
            assert f"[{name} response unavailable]" in content

    def test_same_shape_as_single(self, http):
        single = http().post("/api/chat", json=chat_body(providers=["groq"])).json()
        multi = http().post("/api/chat", json=chat_body(providers=["groq", "google"])).json()

        assert single.keys() == multi.keys()
        assert single["choices"][0].keys() == multi["choices"][0].keys()

    def test_each_provider_called_once(self, http, router):
        http().post("/api/chat", json=chat_body(providers=["groq", "google", "claude"]))

        assert len(router.calls_for("groq")) == 1
        assert len(router.calls_for("google")) == 1
        assert len(router.calls_for("anthropic")) == 1


class TestHealth:
    """GET and POST /api/health"""

    def test_status_report(self, http, credentials):
        response = http(creds={"anthropic": credentials["anthropic"]}).get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == __version__
        assert data["providers"]["anthropic"]["configured"] is True
        assert data["providers"]["groq"]["configured"] is False
        assert credentials["anthropic"] not in response.text

    def test_probe(self, http, router):
        router.handlers["groq"] = status_handler(401, {"error": {"message": "bad key"}})

        response = http().post("/api/health")

        assert response.status_code == 200
        probe = response.json()["probe"]
        assert probe["anthropic"]["status"] == "ok"
        assert probe["groq"]["status"] == "error"
        assert probe["groq"]["kind"] == "auth_failed"
        assert "bad key" in probe["groq"]["detail"]
        assert probe["groq"]["status_code"] == 401
        assert "status_code" not in probe["anthropic"]

    def test_probe_without_keys(self, http, router):
        response = http(creds={}).post("/api/health")

        assert response.status_code == 500
        assert response.json()["status"] == "error"
        assert router.calls == []


class TestServerErrors:
    """Failures outside the chat handler still produce a JSON body."""

    @pytest.fixture
    def fresh_client_cache(self):
        get_client.cache_clear()
        yield
        get_client.cache_clear()

    @pytest.mark.parametrize("name,value", [
        ("CHORUS_SYNTHESIS_POLICY", "bogus"),
        ("CHORUS_PROVIDER_TIMEOUT", "soon"),
    ])
    def test_bad_environment_settings(self, monkeypatch, fresh_client_cache, name, value):
        monkeypatch.setenv(name, value)
        http = TestClient(create_app(), raise_server_exceptions=False)

        for method, path in (("post", "/api/chat"), ("get", "/api/health")):
            response = http.request(method, path, json=chat_body())

            assert response.status_code == 500
            assert response.headers["content-type"].startswith("application/json")
            assert response.json()["error"] == "Server error"
            assert "details" in response.json()
