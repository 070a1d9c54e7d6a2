"""
Credential record: the token material persisted between runs.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


class CredentialRecord(BaseModel):
  """OAuth2 token material as stored in the credential file.

  Extra keys (id_token and similar) are kept so a read/write cycle does
  not drop anything the identity provider returned.
  """

  model_config = ConfigDict(extra="allow")

  access_token: str
  refresh_token: str | None = None
  expiry_date: int | None = None  # epoch millis
  token_type: str | None = None
  scope: str | None = None

  @field_validator("expiry_date")
  @classmethod
  def _expiry_in_range(cls, value: int | None) -> int | None:
    if value is not None:
      try:
        datetime.fromtimestamp(value / 1000, tz=timezone.utc)
      except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"expiry_date out of range: {value}") from e
    return value

  @property
  def is_degraded(self) -> bool:
    """True when the record cannot renew itself once the access token expires."""
    return not self.refresh_token

  @property
  def expiry(self) -> datetime | None:
    """Expiry as a naive UTC datetime, the form google-auth uses."""
    if self.expiry_date is None:
      return None
    return datetime.fromtimestamp(self.expiry_date / 1000, tz=timezone.utc).replace(tzinfo=None)

  def to_json(self) -> str:
    return self.model_dump_json(indent=2, exclude_none=True)


def expiry_to_millis(expiry: datetime | None) -> int | None:
  """Convert a naive UTC datetime to epoch millis."""
  if expiry is None:
    return None
  if expiry.tzinfo is None:
    expiry = expiry.replace(tzinfo=timezone.utc)
  return int(expiry.timestamp() * 1000)
