"""
File-backed token store for the Google Calendar server.

The credential file location is resolved by a fixed precedence:

  1. explicit override (GCALENDAR_MCP_TOKEN_PATH)
  2. ~/.config/gcalendar-mcp/tokens.json, if it exists
  3. <cwd>/.tokens.json, if it exists
  4. ~/.config/gcalendar-mcp/tokens.json (created on first write)

No file locking: one long-lived server plus an occasional setup run,
last write wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ..errors import TokenNotFoundError, TokenParseError, TokenStoreError
from .types import CredentialRecord

log = logging.getLogger("gcalendar.state.store")

STANDARD_DIR = Path(".config") / "gcalendar-mcp"
STANDARD_FILE = "tokens.json"
PROJECT_FILE = ".tokens.json"


class TokenStore:
  """Reads, writes and deletes the credential file."""

  def __init__(
    self,
    override: str | Path | None = None,
    home: Path | None = None,
    cwd: Path | None = None,
  ) -> None:
    self._override = Path(override) if override else None
    self._home = home
    self._cwd = cwd

  def standard_path(self) -> Path:
    home = self._home if self._home is not None else Path.home()
    return home / STANDARD_DIR / STANDARD_FILE

  def project_path(self) -> Path:
    cwd = self._cwd if self._cwd is not None else Path.cwd()
    return cwd / PROJECT_FILE

  def resolve_path(self) -> Path:
    """Return the credential file path. Never fails."""
    if self._override is not None:
      return self._override

    standard = self.standard_path()
    if standard.exists():
      return standard

    project = self.project_path()
    if project.exists():
      return project

    return standard

  def read(self) -> CredentialRecord:
    path = self.resolve_path()
    try:
      raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
      raise TokenNotFoundError(f"No credential file at {path}") from e
    except UnicodeDecodeError as e:
      raise TokenParseError(f"Malformed credential file {path}: not valid UTF-8") from e
    except OSError as e:
      raise TokenStoreError(f"Failed to read {path}: {e}") from e

    try:
      return CredentialRecord.model_validate_json(raw)
    except ValidationError as e:
      raise TokenParseError(f"Malformed credential file {path}: {e.error_count()} error(s)") from e

  def write(self, record: CredentialRecord) -> Path:
    path = self.resolve_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(record.to_json(), encoding="utf-8")
    log.info("Credentials saved to %s", path)
    return path

  def delete(self) -> None:
    """Remove the credential file. Deleting an absent file is not an error."""
    path = self.resolve_path()
    path.unlink(missing_ok=True)
    log.info("Credentials removed from %s", path)
