"""
Credential manager: OAuth2 client identity, code exchange, refresh
persistence and revocation.

The manager owns the live google-auth credentials object. Instead of a
process-wide client with an ambient "tokens" hook, refresh notifications
are delivered to listeners registered with `subscribe()`. The manager
registers its own `on_credential_refresh` so rotated tokens reach the
token store.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import aiohttp
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from ..config import REVOKE_URI, SCOPES, TOKEN_URI, OAuthConfig
from ..errors import AuthError, RevokeError, TokenStoreError
from ..state.store import TokenStore
from ..state.types import CredentialRecord, expiry_to_millis

log = logging.getLogger("gcalendar.auth.credentials")

REVOKE_TIMEOUT = 30

RefreshListener = Callable[[CredentialRecord], None]


class ManagedCredentials(Credentials):
  """google-auth user credentials that notify listeners after each refresh."""

  def __init__(self, *args: Any, **kwargs: Any) -> None:
    super().__init__(*args, **kwargs)
    self._refresh_listeners: list[Callable[[ManagedCredentials], None]] = []

  def add_refresh_listener(self, listener: Callable[[ManagedCredentials], None]) -> None:
    self._refresh_listeners.append(listener)

  def refresh(self, request: Any) -> None:
    super().refresh(request)
    for listener in list(self._refresh_listeners):
      listener(self)


def record_from_credentials(creds: Credentials) -> CredentialRecord:
  """Snapshot live credentials as a storable record."""
  scopes = creds.scopes or getattr(creds, "granted_scopes", None)
  return CredentialRecord(
    access_token=creds.token or "",
    refresh_token=creds.refresh_token,
    expiry_date=expiry_to_millis(creds.expiry),
    token_type="Bearer",
    scope=" ".join(scopes) if scopes else None,
  )


class CredentialManager:
  """Wraps the OAuth2 client identity and the live credentials."""

  def __init__(self, config: OAuthConfig, store: TokenStore) -> None:
    self.config = config
    self.store = store
    self._record: CredentialRecord | None = None
    self._credentials: ManagedCredentials = self._make_credentials(None)
    self._listeners: list[RefreshListener] = [self.on_credential_refresh]

  # -------------------------------------------------------------------------
  # Live credentials
  # -------------------------------------------------------------------------

  @property
  def credentials(self) -> ManagedCredentials:
    return self._credentials

  @property
  def record(self) -> CredentialRecord | None:
    return self._record

  def subscribe(self, listener: RefreshListener) -> Callable[[], None]:
    """Register a refresh listener. Returns a function that unregisters it."""
    self._listeners.append(listener)

    def unsubscribe() -> None:
      if listener in self._listeners:
        self._listeners.remove(listener)

    return unsubscribe

  def use_record(self, record: CredentialRecord | None) -> ManagedCredentials:
    """Install a record (or nothing) as the live credentials."""
    self._record = record
    self._credentials = self._make_credentials(record)
    return self._credentials

  def load(self) -> ManagedCredentials:
    """Install whatever the token store holds. A missing or bad file clears the credentials."""
    try:
      record = self.store.read()
    except TokenStoreError as e:
      log.debug("No stored credentials: %s", e)
      record = None
    return self.use_record(record)

  def _make_credentials(self, record: CredentialRecord | None) -> ManagedCredentials:
    creds = ManagedCredentials(
      token=record.access_token if record else None,
      refresh_token=record.refresh_token if record else None,
      token_uri=TOKEN_URI,
      client_id=self.config.client_id or None,
      client_secret=self.config.client_secret or None,
      scopes=SCOPES,
      expiry=record.expiry if record else None,
    )
    creds.add_refresh_listener(self._dispatch_refresh)
    return creds

  def _dispatch_refresh(self, creds: ManagedCredentials) -> None:
    record = record_from_credentials(creds)
    for listener in list(self._listeners):
      listener(record)

  # -------------------------------------------------------------------------
  # Status
  # -------------------------------------------------------------------------

  def is_authenticated(self) -> bool:
    """True iff the stored record carries a refresh token. Never raises."""
    try:
      record = self.store.read()
    except TokenStoreError:
      return False
    return bool(record.refresh_token)

  # -------------------------------------------------------------------------
  # Authorization code flow
  # -------------------------------------------------------------------------

  def _flow(self) -> Flow:
    # The exchange may happen in a different call than URL generation,
    # so PKCE verifiers are not used.
    return Flow.from_client_config(
      self.config.client_config(),
      scopes=SCOPES,
      redirect_uri=self.config.redirect_uri,
      autogenerate_code_verifier=False,
    )

  def build_authorization_url(self) -> str:
    """Consent URL requesting offline access with forced re-consent."""
    url, _state = self._flow().authorization_url(
      access_type="offline",
      prompt="consent",
    )
    return url

  async def exchange_code(self, code: str) -> CredentialRecord:
    """Exchange a one-time authorization code for a credential record."""
    if not code:
      raise AuthError("Authorization code is required")

    flow = self._flow()
    try:
      flow.fetch_token(code=code)
    except Exception as e:
      log.error("Authorization code exchange failed: %s", e)
      raise AuthError(f"Failed to exchange authorization code: {e}") from e

    record = record_from_credentials(flow.credentials)
    self.use_record(record)
    if record.is_degraded:
      log.warning("No refresh token issued; access will stop when the current token expires")
    else:
      log.info("Authorization code exchanged")
    return record

  # -------------------------------------------------------------------------
  # Refresh persistence
  # -------------------------------------------------------------------------

  def on_credential_refresh(self, record: CredentialRecord) -> None:
    """Persist a refreshed record, keeping the known refresh token if none was reissued."""
    if not record.refresh_token and self._record and self._record.refresh_token:
      record = record.model_copy(update={"refresh_token": self._record.refresh_token})
    self._record = record

    try:
      path = self.store.write(record)
    except OSError:
      # The refreshed token still lives in memory; the session stays usable.
      log.exception("Failed to persist refreshed credentials")
      return
    log.info("Tokens refreshed and saved to %s", path)

  # -------------------------------------------------------------------------
  # Revocation
  # -------------------------------------------------------------------------

  async def revoke(self, record: CredentialRecord) -> None:
    """Revoke the refresh token (or access token) and delete the local record."""
    token = record.refresh_token or record.access_token
    try:
      if token:
        await self._post_revoke(token)
    finally:
      self.store.delete()
      self.use_record(None)

  async def _post_revoke(self, token: str) -> None:
    try:
      async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=REVOKE_TIMEOUT)) as session:
        async with session.post(
          REVOKE_URI,
          data={"token": token},
          headers={"Content-Type": "application/x-www-form-urlencoded"},
        ) as resp:
          if resp.status != 200:
            body = await resp.text()
            raise RevokeError(f"Revocation rejected ({resp.status}): {body}")
    except (asyncio.TimeoutError, aiohttp.ClientError) as e:
      raise RevokeError(f"Revocation request failed: {e}") from e
    log.info("Token revoked with identity provider")
