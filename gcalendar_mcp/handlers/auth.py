"""
Authentication lifecycle tool handlers. These run locally; only
revoke_auth and handle_oauth_callback talk to the identity provider.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from ..errors import RevokeError, TokenStoreError
from ..helpers import ToolResult
from ..validation import require_string
from .context import ToolContext

log = logging.getLogger("gcalendar.handlers.auth")


def _format_expiry(expiry_date: int | None) -> str:
  if not expiry_date:
    return "unknown"
  return datetime.fromtimestamp(expiry_date / 1000).strftime("%Y-%m-%d %H:%M:%S")


async def auth_status(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  if ctx.auth.is_authenticated():
    record = ctx.auth.store.read()
    return ToolResult(content=f"Authenticated. Token expires: {_format_expiry(record.expiry_date)}")

  url = ctx.auth.build_authorization_url()
  return ToolResult(content=f"Not authenticated. Visit:\n{url}")


async def reauth(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  ctx.auth.store.delete()
  ctx.auth.use_record(None)
  url = ctx.auth.build_authorization_url()
  return ToolResult(content=f"Tokens deleted. Visit to re-authenticate:\n{url}")


async def revoke_auth(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  try:
    record = ctx.auth.store.read()
  except TokenStoreError as e:
    log.info("Nothing to revoke: %s", e)
    record = None

  if record is not None:
    try:
      await ctx.auth.revoke(record)
    except RevokeError as e:
      # Google may already consider the token invalid; local deletion is what matters.
      log.warning("Token revocation failed, deleting local tokens anyway: %s", e)

  ctx.auth.store.delete()
  ctx.auth.use_record(None)
  url = ctx.auth.build_authorization_url()
  return ToolResult(content=f"Tokens revoked and deleted. Visit to re-authenticate:\n{url}")


async def handle_oauth_callback(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  record = await ctx.auth.exchange_code(require_string(args, "code"))
  ctx.auth.store.write(record)
  return ToolResult(content="Authentication complete!")
