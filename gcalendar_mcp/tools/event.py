"""
Event management tools (7 tools).
"""

from __future__ import annotations

from mcp.types import Tool

CALENDAR_ID = {
  "type": "string",
  "description": "Calendar ID (use 'primary' for primary calendar)",
  "default": "primary",
}

event_tools: list[Tool] = [
  Tool(
    name="list_events",
    description="List events on a calendar. Supports filtering by time range and search queries.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "timeMin": {"type": "string", "description": "Start time (ISO 8601)"},
        "timeMax": {"type": "string", "description": "End time (ISO 8601)"},
        "maxResults": {"type": "integer", "default": 100, "description": "Max events"},
        "q": {"type": "string", "description": "Free-text search query"},
      },
    },
  ),
  Tool(
    name="get_event",
    description="Get a single event by ID.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "eventId": {"type": "string", "description": "Event ID"},
      },
      "required": ["eventId"],
    },
  ),
  Tool(
    name="create_event",
    description="Create a new event. A Google Meet link is always attached.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "summary": {"type": "string", "description": "Event title"},
        "description": {"type": "string", "description": "Event description"},
        "location": {"type": "string", "description": "Event location"},
        "startDateTime": {"type": "string", "description": "Start (ISO 8601)"},
        "endDateTime": {"type": "string", "description": "End (ISO 8601)"},
        "attendees": {"type": "string", "description": "Comma-separated emails"},
      },
    },
  ),
  Tool(
    name="update_event",
    description="Update an event. Only the given fields change.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "eventId": {"type": "string", "description": "Event ID"},
        "summary": {"type": "string", "description": "Event title"},
        "description": {"type": "string", "description": "Event description"},
        "startDateTime": {"type": "string", "description": "Start (ISO 8601)"},
        "endDateTime": {"type": "string", "description": "End (ISO 8601)"},
      },
      "required": ["eventId"],
    },
  ),
  Tool(
    name="delete_event",
    description="Delete an event.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "eventId": {"type": "string", "description": "Event ID"},
      },
      "required": ["eventId"],
    },
  ),
  Tool(
    name="quick_add",
    description="Create event from natural language.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "text": {
          "type": "string",
          "description": 'Natural language (e.g., "Meeting tomorrow at 3pm")',
        },
      },
      "required": ["text"],
    },
  ),
  Tool(
    name="list_instances",
    description="Get instances of a recurring event.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": CALENDAR_ID,
        "eventId": {"type": "string", "description": "Recurring event ID"},
        "timeMin": {"type": "string", "description": "Start time (ISO 8601)"},
        "timeMax": {"type": "string", "description": "End time (ISO 8601)"},
      },
      "required": ["eventId"],
    },
  ),
]
