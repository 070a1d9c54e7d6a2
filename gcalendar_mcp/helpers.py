"""
Shared result and error handling helpers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

log = logging.getLogger("gcalendar.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def to_json(data: Any) -> str:
  """Pretty-print an API payload the way every tool reports it."""
  return json.dumps(data, indent=2, ensure_ascii=False)


def json_result(data: Any, prefix: str = "") -> ToolResult:
  return ToolResult(content=f"{prefix}{to_json(data)}")


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  EVENT = "EVENT"
  CALENDAR = "CALENDAR"
  ACL = "ACL"
  FREEBUSY = "FREEBUSY"
  AUTH = "AUTH"


def error_code(function_name: str, category: str | ErrorCategory | None = None) -> str:
  """Stable code for a tool failure, used to correlate logs with replies."""
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  code = error_code(function_name, category)
  log.error("[MCP] Error in %s - Code: %s - %s", function_name, code, error)
  log.debug("Traceback for %s", code, exc_info=error)
  message = str(error) or error.__class__.__name__
  return ToolResult(content=f"Error: {message}", is_error=True)
