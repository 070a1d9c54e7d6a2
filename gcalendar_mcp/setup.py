"""
Interactive OAuth setup.

Steps:
  1. Check GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET
  2. Open the consent URL in the browser (also printed)
  3. Wait for the redirect on the local callback listener
  4. Exchange the code and save tokens to ./.tokens.json

Returns a process exit code; it never serves tools.
"""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable
from pathlib import Path

from .auth.callback import CallbackReceiver
from .auth.credentials import CredentialManager
from .config import ENV_CLIENT_ID, ENV_CLIENT_SECRET, OAuthConfig
from .state.store import PROJECT_FILE, TokenStore

log = logging.getLogger("gcalendar.setup")

# ---------------------------------------------------------------------------
# Console helpers
# ---------------------------------------------------------------------------

GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RESET = "\033[0m"


def green(s: str) -> str:
  return f"{GREEN}{s}{RESET}"


def red(s: str) -> str:
  return f"{RED}{s}{RESET}"


def yellow(s: str) -> str:
  return f"{YELLOW}{s}{RESET}"


def blue(s: str) -> str:
  return f"{BLUE}{s}{RESET}"


RULE = "==========================================="


def _check_config(config: OAuthConfig) -> bool:
  print(blue("Checking environment variables...\n"))
  missing = config.missing_fields()
  for name in (ENV_CLIENT_ID, ENV_CLIENT_SECRET):
    if name in missing:
      print(red(f"Missing: {name}"))
    else:
      print(green(f"{name}: Set"))
  print(blue(f"Redirect URI: {config.redirect_uri}\n"))
  return not missing


def _open_browser(url: str, opener: Callable[[str], bool]) -> None:
  try:
    opened = opener(url)
  except webbrowser.Error as e:
    # The URL is printed below, so the user can open it by hand.
    log.warning("Could not open browser: %s", e)
    opened = False
  if not opened:
    print(yellow("Could not open a browser automatically."))
  print(f"If the browser did not open, visit:\n{url}\n")


async def run_setup(
  config: OAuthConfig | None = None,
  token_path: Path | None = None,
  receiver: CallbackReceiver | None = None,
  open_browser: Callable[[str], bool] = webbrowser.open,
) -> int:
  """Run the interactive authorization flow. Returns the exit code."""
  config = config or OAuthConfig.from_env()

  print(f"\n{RULE}")
  print("  Google Calendar MCP - OAuth Setup")
  print(f"{RULE}\n")

  if not _check_config(config):
    print(yellow("\nPlease configure your .env file with:"))
    print(f"  {ENV_CLIENT_ID}=your-client-id.apps.googleusercontent.com")
    print(f"  {ENV_CLIENT_SECRET}=your-client-secret\n")
    print("Then run this setup again.\n")
    return 1

  print(green("Environment variables verified!\n"))

  # Setup always writes next to the project, whatever the server would resolve.
  store = TokenStore(override=token_path or Path.cwd() / PROJECT_FILE)
  manager = CredentialManager(config, store)
  receiver = receiver or CallbackReceiver.from_config(config)

  try:
    url = manager.build_authorization_url()
    print(blue("Opening browser for authentication...\n"))
    _open_browser(url, open_browser)

    print(blue("Waiting for OAuth callback...\n"))
    code = await receiver.await_authorization_code()

    print(blue("Exchanging authorization code for tokens..."))
    record = await manager.exchange_code(code)
    path = store.write(record)
    print(green(f"\nTokens saved to: {path}"))
  except Exception as e:
    log.debug("Setup failed", exc_info=True)
    print(red(f"Setup failed: {e}"))
    return 1

  print(f"\n{RULE}")
  print(green("  Setup Complete!"))
  print(f"{RULE}\n")
  print("Next steps:")
  print("  1. Point your MCP client at: gcalendar-mcp")
  print("  2. Restart the client so it picks up the new tokens\n")
  return 0
