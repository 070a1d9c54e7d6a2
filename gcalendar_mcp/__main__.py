"""
Entry point for the Google Calendar MCP server.

Run with: python -m gcalendar_mcp            (MCP stdio server mode)
          python -m gcalendar_mcp --setup    (interactive OAuth setup)
"""

from __future__ import annotations

import asyncio
import logging
import sys

from dotenv import load_dotenv

logging.basicConfig(
  level=logging.INFO,
  format="[%(name)s] %(levelname)s: %(message)s",
  stream=sys.stderr,
)


def main() -> None:
  load_dotenv()

  if "--setup" in sys.argv:
    from .setup import run_setup

    sys.exit(asyncio.run(run_setup()))

  from .server import run_server

  asyncio.run(run_server())


if __name__ == "__main__":
  main()
