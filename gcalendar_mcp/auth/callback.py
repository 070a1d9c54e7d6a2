"""
One-shot OAuth redirect listener.

Binds to the host/port of the configured redirect URI, waits for a single
request on the callback path and hands back the `code` query parameter.

States: idle -> listening -> completed | failed. The listener is torn
down on both terminal paths; there is no retry and no timeout.
"""

from __future__ import annotations

import asyncio
import logging

from aiohttp import web

from ..config import OAuthConfig
from ..errors import CallbackError

log = logging.getLogger("gcalendar.auth.callback")

SUCCESS_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <title>Authentication Successful</title>
    <style>
      body { font-family: system-ui, sans-serif; text-align: center; padding: 50px; }
      .success { color: #10b981; font-size: 24px; }
    </style>
  </head>
  <body>
    <p class="success">Authentication Successful!</p>
    <p>You can close this window and return to the terminal.</p>
    <script>setTimeout(() => window.close(), 3000)</script>
  </body>
</html>
"""


class CallbackReceiver:
  """Captures exactly one authorization code from the OAuth redirect."""

  def __init__(self, host: str, port: int, path: str = "/oauth2callback") -> None:
    self.host = host
    self.port = port
    self.path = path
    self.state = "idle"
    self._result: asyncio.Future[str] | None = None

  @classmethod
  def from_config(cls, config: OAuthConfig) -> CallbackReceiver:
    return cls(config.callback_host, config.callback_port, config.callback_path)

  async def await_authorization_code(self) -> str:
    if self.state != "idle":
      raise CallbackError(f"Callback receiver already used (state: {self.state})")

    self._result = asyncio.get_running_loop().create_future()

    app = web.Application()
    app.router.add_get(self.path, self._handle_callback)
    app.router.add_route("*", "/{tail:.*}", self._handle_not_found)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, self.host, self.port)
    try:
      await site.start()
    except OSError as e:
      self.state = "failed"
      await runner.cleanup()
      raise CallbackError(f"Could not listen on {self.host}:{self.port}: {e}") from e

    self.state = "listening"
    log.info("Waiting for OAuth callback on http://%s:%d%s", self.host, self.port, self.path)

    try:
      code = await self._result
    except CallbackError:
      self.state = "failed"
      raise
    finally:
      await runner.cleanup()

    self.state = "completed"
    return code

  async def _handle_callback(self, request: web.Request) -> web.Response:
    code = request.query.get("code")
    if not code:
      log.warning("OAuth callback without authorization code")
      self._settle(error=CallbackError("No authorization code in callback"))
      return web.Response(status=400, text="Authorization code not received")

    self._settle(code=code)
    return web.Response(status=200, text=SUCCESS_PAGE, content_type="text/html")

  async def _handle_not_found(self, request: web.Request) -> web.Response:
    return web.Response(status=404, text="Not found")

  def _settle(self, code: str | None = None, error: Exception | None = None) -> None:
    if self._result is None or self._result.done():
      return
    if error is not None:
      self._result.set_exception(error)
    else:
      self._result.set_result(code or "")
