"""
Calendar management tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..helpers import ToolResult, json_result
from ..validation import opt_string, require_string
from .context import ToolContext


def _metadata(args: dict[str, Any], *keys: str) -> dict[str, Any]:
  body: dict[str, Any] = {}
  for key in keys:
    value = opt_string(args, key)
    if value:
      body[key] = value
  return body


async def list_calendars(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  return json_result(await ctx.client.list_calendars())


async def get_calendar(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  return json_result(await ctx.client.get_calendar(require_string(args, "calendarId")))


async def create_calendar(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  body = {"summary": require_string(args, "summary")}
  body.update(_metadata(args, "description", "location"))
  calendar = await ctx.client.create_calendar(body)
  return json_result(calendar, prefix="Created: ")


async def update_calendar(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  calendar_id = require_string(args, "calendarId")
  body = _metadata(args, "summary", "description", "location", "timeZone")
  calendar = await ctx.client.update_calendar(calendar_id, body)
  return json_result(calendar, prefix="Updated: ")


async def delete_calendar(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  await ctx.client.delete_calendar(require_string(args, "calendarId"))
  return ToolResult(content="Calendar deleted")


async def clear_calendar(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  await ctx.client.clear_calendar(require_string(args, "calendarId"))
  return ToolResult(content="Calendar cleared")
