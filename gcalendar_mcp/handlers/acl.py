"""
Access control tool handlers.
"""

from __future__ import annotations

from typing import Any

from ..helpers import ToolResult, json_result
from ..validation import require_string
from .context import ToolContext


async def list_acl(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  return json_result(await ctx.client.list_acl(require_string(args, "calendarId")))


async def get_acl_rule(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  rule = await ctx.client.get_acl_rule(
    require_string(args, "calendarId"),
    require_string(args, "ruleId"),
  )
  return json_result(rule)


async def create_acl_rule(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  calendar_id = require_string(args, "calendarId")
  body = {
    "role": require_string(args, "role"),
    "scope": {
      "type": require_string(args, "scopeType"),
      "value": require_string(args, "scopeValue"),
    },
  }
  rule = await ctx.client.create_acl_rule(calendar_id, body)
  return json_result(rule, prefix="Created: ")


async def delete_acl_rule(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  await ctx.client.delete_acl_rule(
    require_string(args, "calendarId"),
    require_string(args, "ruleId"),
  )
  return ToolResult(content="ACL rule deleted")
