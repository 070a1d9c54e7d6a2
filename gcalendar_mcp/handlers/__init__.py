"""
Tool dispatch: routes tool names to handler functions.

The dispatcher is a hard boundary: whatever a handler raises is turned
into an error result, and nothing crosses `dispatch()`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from ..auth.credentials import CredentialManager
from ..client.google_client import GoogleCalendarClient
from ..helpers import ErrorCategory, ToolResult, log_and_format_error
from ..tools import ALL_TOOLS
from ..tools.acl import acl_tools
from ..tools.auth import auth_tools
from ..tools.calendar import calendar_tools
from ..tools.event import event_tools
from ..tools.freebusy import freebusy_tools
from .acl import create_acl_rule, delete_acl_rule, get_acl_rule, list_acl
from .auth import auth_status, handle_oauth_callback, reauth, revoke_auth
from .calendar import (
  clear_calendar,
  create_calendar,
  delete_calendar,
  get_calendar,
  list_calendars,
  update_calendar,
)
from .context import ClientFactory, ToolContext
from .event import (
  create_event,
  delete_event,
  get_event,
  list_events,
  list_instances,
  quick_add,
  update_event,
)
from .freebusy import get_colors, query_freebusy

log = logging.getLogger("gcalendar.handlers")

Handler = Callable[[dict[str, Any], ToolContext], Awaitable[ToolResult]]

# Map tool names to handler functions
HANDLERS: dict[str, Handler] = {
  # Event tools
  "list_events": list_events,
  "get_event": get_event,
  "create_event": create_event,
  "update_event": update_event,
  "delete_event": delete_event,
  "quick_add": quick_add,
  "list_instances": list_instances,
  # Calendar tools
  "list_calendars": list_calendars,
  "get_calendar": get_calendar,
  "create_calendar": create_calendar,
  "update_calendar": update_calendar,
  "delete_calendar": delete_calendar,
  "clear_calendar": clear_calendar,
  # ACL tools
  "list_acl": list_acl,
  "get_acl_rule": get_acl_rule,
  "create_acl_rule": create_acl_rule,
  "delete_acl_rule": delete_acl_rule,
  # Free/busy and colors
  "query_freebusy": query_freebusy,
  "get_colors": get_colors,
  # Auth lifecycle
  "auth_status": auth_status,
  "reauth": reauth,
  "revoke_auth": revoke_auth,
  "handle_oauth_callback": handle_oauth_callback,
}

CATEGORIES: dict[str, ErrorCategory] = {
  **{tool.name: ErrorCategory.EVENT for tool in event_tools},
  **{tool.name: ErrorCategory.CALENDAR for tool in calendar_tools},
  **{tool.name: ErrorCategory.ACL for tool in acl_tools},
  **{tool.name: ErrorCategory.FREEBUSY for tool in freebusy_tools},
  **{tool.name: ErrorCategory.AUTH for tool in auth_tools},
}


class ToolDispatcher:
  """Resolves credentials, runs one handler and wraps its outcome."""

  def __init__(
    self,
    auth: CredentialManager,
    client_factory: ClientFactory = GoogleCalendarClient,
    handlers: dict[str, Handler] | None = None,
  ) -> None:
    self.auth = auth
    self.tools = ALL_TOOLS
    self._client_factory = client_factory
    self._handlers = HANDLERS if handlers is None else handlers

  async def dispatch(self, tool_name: str, args: dict[str, Any] | None) -> ToolResult:
    args = args or {}
    try:
      # Missing credentials are not fatal here; remote calls will fail with an auth error.
      self.auth.load()
      ctx = ToolContext(self.auth, self._client_factory)

      handler = self._handlers.get(tool_name)
      if handler is None:
        # Kept as a non-error reply for compatibility with existing clients.
        log.warning("Unknown tool: %s", tool_name)
        return ToolResult(content=f"Unknown tool: {tool_name}")

      return await handler(args, ctx)
    except Exception as e:
      return log_and_format_error(tool_name, e, CATEGORIES.get(tool_name))
