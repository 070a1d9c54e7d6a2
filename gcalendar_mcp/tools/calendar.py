"""
Calendar management tools (6 tools).
"""

from __future__ import annotations

from mcp.types import Tool

CALENDAR_ID = {"type": "string", "description": "Calendar ID"}

calendar_tools: list[Tool] = [
  Tool(
    name="list_calendars",
    description="List all accessible calendars.",
    inputSchema={"type": "object", "properties": {}},
  ),
  Tool(
    name="get_calendar",
    description="Get calendar metadata.",
    inputSchema={
      "type": "object",
      "properties": {"calendarId": CALENDAR_ID},
      "required": ["calendarId"],
    },
  ),
  Tool(
    name="create_calendar",
    description="Create a new calendar.",
    inputSchema={
      "type": "object",
      "properties": {
        "summary": {"type": "string", "description": "Calendar name"},
        "description": {"type": "string"},
        "location": {"type": "string"},
      },
      "required": ["summary"],
    },
  ),
  Tool(
    name="update_calendar",
    description="Update calendar metadata. Only the given fields change.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "summary": {"type": "string", "description": "Calendar name"},
        "description": {"type": "string"},
        "location": {"type": "string"},
        "timeZone": {"type": "string", "description": "IANA time zone, e.g. Europe/Berlin"},
      },
      "required": ["calendarId"],
    },
  ),
  Tool(
    name="delete_calendar",
    description="Delete a calendar.",
    inputSchema={
      "type": "object",
      "properties": {"calendarId": CALENDAR_ID},
      "required": ["calendarId"],
    },
  ),
  Tool(
    name="clear_calendar",
    description="Delete all events from a calendar.",
    inputSchema={
      "type": "object",
      "properties": {"calendarId": CALENDAR_ID},
      "required": ["calendarId"],
    },
  ),
]
