"""
Event management tool handlers.
"""

from __future__ import annotations

import uuid
from typing import Any

from ..helpers import ToolResult, json_result
from ..validation import opt_number, opt_string, require_string, split_csv
from .context import ToolContext

DEFAULT_MAX_RESULTS = 100


def _calendar_id(args: dict[str, Any]) -> str:
  return opt_string(args, "calendarId") or "primary"


def _event_fields(args: dict[str, Any], *keys: str) -> dict[str, Any]:
  """Copy the non-empty plain fields and map start/end to dateTime objects."""
  body: dict[str, Any] = {}
  for key in keys:
    value = opt_string(args, key)
    if value:
      body[key] = value

  start = opt_string(args, "startDateTime")
  if start:
    body["start"] = {"dateTime": start}
  end = opt_string(args, "endDateTime")
  if end:
    body["end"] = {"dateTime": end}
  return body


def build_event_body(args: dict[str, Any]) -> dict[str, Any]:
  """Request body for create_event.

  Every new event asks Google to attach a Meet conference, whatever the
  caller passed.
  """
  body = _event_fields(args, "summary", "description", "location")

  attendees = split_csv(args.get("attendees"))
  if attendees:
    body["attendees"] = [{"email": email} for email in attendees]

  body["conferenceData"] = {
    "createRequest": {
      "requestId": f"meet-{uuid.uuid4().hex}",
      "conferenceSolutionKey": {"type": "hangoutsMeet"},
    }
  }
  return body


async def list_events(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  events = await ctx.client.list_events(
    calendar_id=_calendar_id(args),
    time_min=opt_string(args, "timeMin"),
    time_max=opt_string(args, "timeMax"),
    max_results=opt_number(args, "maxResults", DEFAULT_MAX_RESULTS),
    query=opt_string(args, "q"),
  )
  return json_result(events)


async def get_event(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  event = await ctx.client.get_event(_calendar_id(args), require_string(args, "eventId"))
  return json_result(event)


async def create_event(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  event = await ctx.client.create_event(_calendar_id(args), build_event_body(args))
  return json_result(event, prefix="Created: ")


async def update_event(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  event_id = require_string(args, "eventId")
  body = _event_fields(args, "summary", "description")
  event = await ctx.client.update_event(_calendar_id(args), event_id, body)
  return json_result(event, prefix="Updated: ")


async def delete_event(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  await ctx.client.delete_event(_calendar_id(args), require_string(args, "eventId"))
  return ToolResult(content="Event deleted")


async def quick_add(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  event = await ctx.client.quick_add(_calendar_id(args), require_string(args, "text"))
  return json_result(event, prefix="Created: ")


async def list_instances(args: dict[str, Any], ctx: ToolContext) -> ToolResult:
  instances = await ctx.client.list_instances(
    calendar_id=_calendar_id(args),
    event_id=require_string(args, "eventId"),
    time_min=opt_string(args, "timeMin"),
    time_max=opt_string(args, "timeMax"),
  )
  return json_result(instances)
