"""
Per-invocation handle passed to every tool handler.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..auth.credentials import CredentialManager
from ..client.google_client import GoogleCalendarClient

ClientFactory = Callable[[Any], GoogleCalendarClient]


class ToolContext:
  """Credential manager plus a lazily built calendar client over its live credentials."""

  def __init__(
    self,
    auth: CredentialManager,
    client_factory: ClientFactory = GoogleCalendarClient,
  ) -> None:
    self.auth = auth
    self._client_factory = client_factory
    self._client: GoogleCalendarClient | None = None

  @property
  def client(self) -> GoogleCalendarClient:
    if self._client is None:
      self._client = self._client_factory(self.auth.credentials)
    return self._client
