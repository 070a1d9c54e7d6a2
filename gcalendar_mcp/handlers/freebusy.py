"""
Free/busy and color tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..helpers import ToolResult, json_result
from ..validation import ValidationError, require_string, split_csv
from .context import ToolContext


async def query_freebusy(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  calendar_ids = split_csv(args.get("calendars"))
  if not calendar_ids:
    raise ValidationError("Missing required parameter: calendars")

  busy = await ctx.client.query_freebusy(
    time_min=require_string(args, "timeMin"),
    time_max=require_string(args, "timeMax"),
    calendar_ids=calendar_ids,
  )
  return json_result(busy)


async def get_colors(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  return json_result(await ctx.client.get_colors())
