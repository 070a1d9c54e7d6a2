"""Shared test fixtures for the Google Calendar MCP server.

This module provides common fixtures used across all test modules:
- An OAuth config with fake client credentials
- A token store isolated in a temporary directory
- A dispatcher whose Google service is a MagicMock

Usage:
    async def test_something(dispatcher, service):
        service.colors.return_value.get.return_value.execute.return_value = {}
        ...
"""

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from gcalendar_mcp.auth.credentials import CredentialManager
from gcalendar_mcp.client.google_client import GoogleCalendarClient
from gcalendar_mcp.config import OAuthConfig
from gcalendar_mcp.handlers import ToolDispatcher
from gcalendar_mcp.state.store import TokenStore


# ─────────────────────────────────────────────────────────────────────────────
# Config & Storage Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def config() -> OAuthConfig:
    return OAuthConfig(
        client_id="test-client.apps.googleusercontent.com",
        client_secret="test-secret",
        redirect_uri="http://localhost:3000/oauth2callback",
    )


@pytest.fixture
def token_path(tmp_path: Path) -> Path:
    """Path of the credential file; nothing is written there until a test does."""
    return tmp_path / "config" / "tokens.json"


@pytest.fixture
def store(token_path: Path) -> TokenStore:
    return TokenStore(override=token_path)


@pytest.fixture
def manager(config: OAuthConfig, store: TokenStore) -> CredentialManager:
    return CredentialManager(config, store)


def write_tokens(path: Path, data: Any) -> None:
    """Write raw credential file content (dicts are JSON-encoded)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data if isinstance(data, str) else json.dumps(data))


# ─────────────────────────────────────────────────────────────────────────────
# Dispatcher Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def service() -> MagicMock:
    """Stand-in for the googleapiclient calendar v3 resource."""
    return MagicMock()


@pytest.fixture
def dispatcher(manager: CredentialManager, service: MagicMock) -> ToolDispatcher:
    return ToolDispatcher(manager, client_factory=lambda creds: GoogleCalendarClient(service=service))
