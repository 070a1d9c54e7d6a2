"""
Authentication lifecycle tools (4 tools).
"""

from __future__ import annotations

from mcp.types import Tool

auth_tools: list[Tool] = [
  Tool(
    name="auth_status",
    description="Check authentication status and get auth URL if needed.",
    inputSchema={"type": "object", "properties": {}},
  ),
  Tool(
    name="reauth",
    description="Delete stored tokens and generate new auth URL for re-authentication.",
    inputSchema={"type": "object", "properties": {}},
  ),
  Tool(
    name="revoke_auth",
    description="Revoke tokens with Google and delete local tokens, then get new auth URL.",
    inputSchema={"type": "object", "properties": {}},
  ),
  Tool(
    name="handle_oauth_callback",
    description="Complete OAuth with authorization code.",
    inputSchema={
      "type": "object",
      "properties": {"code": {"type": "string", "description": "Authorization code"}},
      "required": ["code"],
    },
  ),
]
