"""
Access control (sharing) tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

acl_tools: list[Tool] = [
  Tool(
    name="list_acl",
    description="List access control rules.",
    inputSchema={
      "type": "object",
      "properties": {"calendarId": {"type": "string"}},
      "required": ["calendarId"],
    },
  ),
  Tool(
    name="get_acl_rule",
    description="Get an ACL rule.",
    inputSchema={
      "type": "object",
      "properties": {"calendarId": {"type": "string"}, "ruleId": {"type": "string"}},
      "required": ["calendarId", "ruleId"],
    },
  ),
  Tool(
    name="create_acl_rule",
    description="Share a calendar with someone.",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarId": {"type": "string"},
        "role": {"type": "string", "enum": ["reader", "writer", "owner"]},
        "scopeType": {"type": "string", "enum": ["user", "group"]},
        "scopeValue": {"type": "string", "description": "Email or domain"},
      },
      "required": ["calendarId", "role", "scopeType", "scopeValue"],
    },
  ),
  Tool(
    name="delete_acl_rule",
    description="Remove calendar sharing.",
    inputSchema={
      "type": "object",
      "properties": {"calendarId": {"type": "string"}, "ruleId": {"type": "string"}},
      "required": ["calendarId", "ruleId"],
    },
  ),
]
