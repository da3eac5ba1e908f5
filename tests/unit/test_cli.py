"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest

from llm_chorus import cli


@pytest.fixture
def cli_client(make_client):
    client = make_client()
    with patch("llm_chorus.cli.ChorusClient", return_value=client):
        yield client


class TestChatCommand:
    @pytest.mark.asyncio
    async def test_prints_answer(self, cli_client, capsys):
        exit_code = await cli.chat("Hello", providers=["groq"])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "Hello from Groq"

    @pytest.mark.asyncio
    async def test_builds_options(self, cli_client, router):
        await cli.chat("Hello", providers=["anthropic"], creativity=0,
                       max_tokens=99999, system="Be terse.")

        sent = router.calls_for("anthropic")[0].content.replace(b" ", b"")
        assert b'"max_tokens":4096' in sent
        assert b'"temperature":0.0' in sent
        assert b'"system":"Beterse."' in sent

    @pytest.mark.asyncio
    async def test_invalid_request(self, cli_client, capsys):
        exit_code = await cli.chat("Hello", providers=["openai"])

        assert exit_code == 2
        assert "Unknown provider 'openai'" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_provider_error(self, make_client, capsys):
        with patch("llm_chorus.cli.ChorusClient", return_value=make_client(creds={})):
            exit_code = await cli.chat("Hello")

        assert exit_code == 1
        assert "API key not configured" in capsys.readouterr().out


def test_list_providers(cli_client, capsys):
    assert cli.list_providers() == 0

    out = capsys.readouterr().out
    assert "Anthropic (anthropic)" in out
    assert "Synthesis policies: labeled, longest_first, extractive_points" in out


def test_main_dispatches_providers(cli_client, capsys):
    with patch("sys.argv", ["llm-chorus", "providers"]):
        assert cli.main() == 0
    assert "Providers:" in capsys.readouterr().out
