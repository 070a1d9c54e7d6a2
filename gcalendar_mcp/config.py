"""
Configuration: OAuth client identity and fixed constants.

All values come from the environment. `.env` loading happens once at CLI
start (see __main__).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict

SERVER_NAME = "gcalendar-mcp"

SCOPES = [
  "https://www.googleapis.com/auth/calendar.readonly",
  "https://www.googleapis.com/auth/calendar.events",
]

DEFAULT_REDIRECT_URI = "http://localhost:3000/oauth2callback"
DEFAULT_CALLBACK_PORT = 3000

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
REVOKE_URI = "https://oauth2.googleapis.com/revoke"

# Environment variable names
ENV_CLIENT_ID = "GOOGLE_CLIENT_ID"
ENV_CLIENT_SECRET = "GOOGLE_CLIENT_SECRET"
ENV_REDIRECT_URI = "GOOGLE_REDIRECT_URI"
ENV_TOKEN_PATH = "GCALENDAR_MCP_TOKEN_PATH"


class OAuthConfig(BaseModel):
  """OAuth2 client identity plus the optional token path override."""

  model_config = ConfigDict(frozen=True)

  client_id: str = ""
  client_secret: str = ""
  redirect_uri: str = DEFAULT_REDIRECT_URI
  token_path: str | None = None

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> OAuthConfig:
    env = os.environ if environ is None else environ
    return cls(
      client_id=env.get(ENV_CLIENT_ID, ""),
      client_secret=env.get(ENV_CLIENT_SECRET, ""),
      redirect_uri=env.get(ENV_REDIRECT_URI, "") or DEFAULT_REDIRECT_URI,
      token_path=env.get(ENV_TOKEN_PATH) or None,
    )

  def missing_fields(self) -> list[str]:
    """Names of the required environment variables that are unset."""
    missing = []
    if not self.client_id:
      missing.append(ENV_CLIENT_ID)
    if not self.client_secret:
      missing.append(ENV_CLIENT_SECRET)
    return missing

  def client_config(self) -> dict[str, dict[str, str]]:
    """Client secrets in the shape google_auth_oauthlib expects."""
    return {
      "installed": {
        "client_id": self.client_id,
        "client_secret": self.client_secret,
        "auth_uri": AUTH_URI,
        "token_uri": TOKEN_URI,
        "redirect_uris": [self.redirect_uri],
      }
    }

  @property
  def callback_host(self) -> str:
    return urlparse(self.redirect_uri).hostname or "localhost"

  @property
  def callback_port(self) -> int:
    return urlparse(self.redirect_uri).port or DEFAULT_CALLBACK_PORT

  @property
  def callback_path(self) -> str:
    return urlparse(self.redirect_uri).path or "/oauth2callback"
