"""Tests for the MCP request wiring in gcalendar_mcp/server.py"""

from importlib.metadata import version

import pytest
from mcp.server import Server
from mcp.types import CallToolRequest, CallToolRequestParams, ListToolsRequest

from gcalendar_mcp.config import OAuthConfig
from gcalendar_mcp.server import create_dispatcher, create_mcp_server


@pytest.fixture
def server(dispatcher):
    return create_mcp_server(dispatcher)


async def _call(server, name, arguments=None):
    request = CallToolRequest(method="tools/call", params=CallToolRequestParams(name=name, arguments=arguments))
    result = await server.request_handlers[CallToolRequest](request)
    return result.root


class TestMcpServer:
    @pytest.mark.asyncio
    async def test_lists_all_tools(self, server):
        result = await server.request_handlers[ListToolsRequest](ListToolsRequest(method="tools/list"))

        names = [tool.name for tool in result.root.tools]
        assert len(names) == 23
        assert {"create_event", "query_freebusy", "auth_status", "handle_oauth_callback"} <= set(names)

    @pytest.mark.asyncio
    async def test_unknown_tool_is_plain_text(self, server):
        result = await _call(server, "nope", {})

        assert result.isError is False
        assert result.content[0].type == "text"
        assert result.content[0].text == "Unknown tool: nope"

    @pytest.mark.asyncio
    async def test_tool_error_comes_back_as_text(self, server, service):
        result = await _call(server, "get_event", {})

        assert result.content[0].text == "Error: Missing required parameter: eventId"
        service.events.assert_not_called()

    @pytest.mark.asyncio
    async def test_arguments_reach_handler(self, server, service):
        service.colors.return_value.get.return_value.execute.return_value = {"kind": "calendar#colors"}

        result = await _call(server, "get_colors")

        assert '"calendar#colors"' in result.content[0].text


class TestSdkCompatibility:
    def test_installed_sdk_matches_declared_range(self):
        major = int(version("mcp").split(".")[0])

        assert major == 1
        assert callable(getattr(Server, "list_tools", None))
        assert callable(getattr(Server, "call_tool", None))


class TestCreateDispatcher:
    def test_uses_token_path_override(self, tmp_path):
        override = tmp_path / "custom.json"

        dispatcher = create_dispatcher(OAuthConfig(client_id="id", client_secret="s", token_path=str(override)))

        assert dispatcher.auth.store.resolve_path() == override
