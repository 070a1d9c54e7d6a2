"""
Error types shared across the server, auth flow and client wrapper.
"""

from __future__ import annotations


class GCalendarError(Exception):
  """Base class for all errors raised by this package."""

  pass


class TokenStoreError(GCalendarError):
  """The credential file could not be read."""

  pass


class TokenNotFoundError(TokenStoreError):
  """No credential file exists at the resolved path."""

  pass


class TokenParseError(TokenStoreError):
  """The credential file exists but is not a valid credential record."""

  pass


class AuthError(GCalendarError):
  """Code exchange rejected, or no usable credentials for a remote call."""

  pass


class RemoteCallError(GCalendarError):
  """A Google Calendar API call failed."""

  def __init__(self, status: int, message: str):
    self.status = status
    super().__init__(message)


class CallbackError(GCalendarError):
  """The OAuth redirect listener could not bind or got no code."""

  pass


class RevokeError(GCalendarError):
  """The identity provider rejected token revocation."""

  pass
