"""
MCP server: tools/list and tools/call over stdio.

Uses the official `mcp` Python SDK. Every call goes through the
ToolDispatcher, so the transport only ever sees text content.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .auth.credentials import CredentialManager
from .config import SERVER_NAME, OAuthConfig
from .handlers import ToolDispatcher
from .state.store import TokenStore

log = logging.getLogger("gcalendar.server")


def create_dispatcher(config: OAuthConfig) -> ToolDispatcher:
  store = TokenStore(override=config.token_path)
  return ToolDispatcher(CredentialManager(config, store))


def create_mcp_server(dispatcher: ToolDispatcher) -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server(SERVER_NAME, version=__version__)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return dispatcher.tools

  # Arguments are checked by each handler, not against the JSON schema.
  @server.call_tool(validate_input=False)
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    result = await dispatcher.dispatch(name, arguments)
    return [TextContent(type="text", text=result.content)]

  return server


async def run_server(config: OAuthConfig | None = None) -> None:
  """Run the MCP server on stdio until the client disconnects."""
  config = config or OAuthConfig.from_env()
  if config.missing_fields():
    log.warning(
      "OAuth client not configured (%s); calendar calls will fail until it is",
      ", ".join(config.missing_fields()),
    )

  server = create_mcp_server(create_dispatcher(config))
  async with stdio_server() as (read_stream, write_stream):
    log.info("Google Calendar MCP Server running")
    await server.run(read_stream, write_stream, server.create_initialization_options())
