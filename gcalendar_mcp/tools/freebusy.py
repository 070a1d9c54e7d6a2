"""
Free/busy and color metadata tools (2 tools).
"""

from __future__ import annotations

from mcp.types import Tool

freebusy_tools: list[Tool] = [
  Tool(
    name="query_freebusy",
    description="Query free/busy information.",
    inputSchema={
      "type": "object",
      "properties": {
        "timeMin": {"type": "string", "description": "Start time (ISO 8601)"},
        "timeMax": {"type": "string", "description": "End time (ISO 8601)"},
        "calendars": {"type": "string", "description": "Comma-separated IDs"},
      },
      "required": ["timeMin", "timeMax", "calendars"],
    },
  ),
  Tool(
    name="get_colors",
    description="Get available colors.",
    inputSchema={"type": "object", "properties": {}},
  ),
]
