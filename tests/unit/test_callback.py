"""Tests for the one-shot OAuth redirect listener in gcalendar_mcp/auth/callback.py"""

import asyncio
import socket

import aiohttp
import pytest

from gcalendar_mcp.auth.callback import CallbackReceiver
from gcalendar_mcp.config import OAuthConfig
from gcalendar_mcp.errors import CallbackError


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def _wait_until_listening(receiver: CallbackReceiver) -> None:
    for _ in range(200):
        if receiver.state == "listening":
            return
        await asyncio.sleep(0.01)
    raise AssertionError(f"receiver never started listening (state: {receiver.state})")


@pytest.fixture
def receiver():
    return CallbackReceiver("127.0.0.1", _free_port(), "/oauth2callback")


def _url(receiver: CallbackReceiver, path: str) -> str:
    return f"http://127.0.0.1:{receiver.port}{path}"


class TestCallbackReceiver:
    def test_from_config_uses_redirect_uri(self):
        config = OAuthConfig(redirect_uri="http://127.0.0.1:8765/cb")

        receiver = CallbackReceiver.from_config(config)

        assert (receiver.host, receiver.port, receiver.path) == ("127.0.0.1", 8765, "/cb")
        assert receiver.state == "idle"

    def test_default_port_when_uri_has_none(self):
        receiver = CallbackReceiver.from_config(OAuthConfig(redirect_uri="http://localhost/oauth2callback"))

        assert receiver.port == 3000

    @pytest.mark.asyncio
    async def test_captures_code(self, receiver):
        task = asyncio.create_task(receiver.await_authorization_code())
        await _wait_until_listening(receiver)

        async with aiohttp.ClientSession() as session:
            async with session.get(_url(receiver, "/favicon.ico")) as resp:
                assert resp.status == 404
            assert receiver.state == "listening"

            async with session.get(_url(receiver, "/oauth2callback?code=4%2Fabc&scope=x")) as resp:
                assert resp.status == 200
                assert "Authentication Successful" in await resp.text()

        assert await asyncio.wait_for(task, timeout=5) == "4/abc"
        assert receiver.state == "completed"

    @pytest.mark.asyncio
    async def test_missing_code_fails(self, receiver):
        task = asyncio.create_task(receiver.await_authorization_code())
        await _wait_until_listening(receiver)

        async with aiohttp.ClientSession() as session:
            async with session.get(_url(receiver, "/oauth2callback?error=access_denied")) as resp:
                assert resp.status == 400

        with pytest.raises(CallbackError):
            await asyncio.wait_for(task, timeout=5)
        assert receiver.state == "failed"

    @pytest.mark.asyncio
    async def test_bind_failure(self, receiver):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
            blocker.bind(("127.0.0.1", receiver.port))
            blocker.listen()

            with pytest.raises(CallbackError):
                await receiver.await_authorization_code()

        assert receiver.state == "failed"

    @pytest.mark.asyncio
    async def test_single_use(self, receiver):
        receiver.state = "completed"

        with pytest.raises(CallbackError):
            await receiver.await_authorization_code()
