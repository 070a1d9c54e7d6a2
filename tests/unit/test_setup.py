"""Tests for the interactive OAuth setup in gcalendar_mcp/setup.py"""

import json
import webbrowser

import pytest

from gcalendar_mcp.auth.credentials import CredentialManager
from gcalendar_mcp.config import OAuthConfig
from gcalendar_mcp.errors import CallbackError
from gcalendar_mcp.setup import run_setup
from gcalendar_mcp.state.types import CredentialRecord


class _FakeReceiver:
    def __init__(self, code=None, error=None):
        self.code = code
        self.error = error

    async def await_authorization_code(self):
        if self.error:
            raise self.error
        return self.code


@pytest.fixture
def exchanged(monkeypatch):
    codes = []

    async def fake_exchange(self, code):
        codes.append(code)
        return CredentialRecord(access_token="ya29.setup", refresh_token="1//setup", expiry_date=1705312800000)

    monkeypatch.setattr(CredentialManager, "exchange_code", fake_exchange)
    return codes


class TestRunSetup:
    @pytest.mark.asyncio
    async def test_missing_client_config(self, capsys, token_path):
        code = await run_setup(config=OAuthConfig(client_secret="s"), token_path=token_path)

        out = capsys.readouterr().out
        assert code == 1
        assert "Missing: GOOGLE_CLIENT_ID" in out
        assert not token_path.exists()

    @pytest.mark.asyncio
    async def test_success_writes_tokens(self, config, token_path, exchanged, capsys):
        opened = []

        code = await run_setup(
            config=config,
            token_path=token_path,
            receiver=_FakeReceiver(code="4/abc"),
            open_browser=lambda url: opened.append(url) or True,
        )

        assert code == 0
        assert exchanged == ["4/abc"]
        assert opened and opened[0].startswith("https://accounts.google.com/")
        saved = json.loads(token_path.read_text())
        assert saved["refresh_token"] == "1//setup"
        out = capsys.readouterr().out
        assert f"Tokens saved to: {token_path}" in out
        assert "Setup Complete!" in out

    @pytest.mark.asyncio
    async def test_browser_failure_is_not_fatal(self, config, token_path, exchanged, capsys):
        def broken_browser(url):
            raise webbrowser.Error("no display")

        code = await run_setup(
            config=config,
            token_path=token_path,
            receiver=_FakeReceiver(code="4/abc"),
            open_browser=broken_browser,
        )

        assert code == 0
        assert "https://accounts.google.com/" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_callback_failure(self, config, token_path, exchanged, capsys):
        code = await run_setup(
            config=config,
            token_path=token_path,
            receiver=_FakeReceiver(error=CallbackError("Authorization code not received")),
            open_browser=lambda url: True,
        )

        assert code == 1
        assert exchanged == []
        assert "Setup failed: Authorization code not received" in capsys.readouterr().out
        assert not token_path.exists()

    @pytest.mark.asyncio
    async def test_defaults_to_project_token_file(self, config, tmp_path, monkeypatch, exchanged):
        monkeypatch.chdir(tmp_path)

        code = await run_setup(config=config, receiver=_FakeReceiver(code="4/abc"), open_browser=lambda url: True)

        assert code == 0
        assert (tmp_path / ".tokens.json").exists()
