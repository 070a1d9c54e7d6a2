"""
Input validation helpers.

Tool arguments arrive untyped; these helpers coerce them and substitute
declared defaults.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
  """Raised when input validation fails."""

  pass


def opt_string(args: dict[str, Any], key: str, default: str | None = None) -> str | None:
  """Extract optional string from args."""
  val = args.get(key)
  if val is None:
    return default
  text = val.strip() if isinstance(val, str) else str(val).strip()
  return text or default


def opt_number(args: dict[str, Any], key: str, default: int | None = None) -> int | None:
  """Extract optional number from args."""
  val = args.get(key)
  if val is None or isinstance(val, bool):
    return default
  if isinstance(val, (int, float)):
    return int(val)
  try:
    return int(float(str(val)))
  except (ValueError, TypeError):
    return default


def require_string(args: dict[str, Any], key: str) -> str:
  """Extract required string from args."""
  val = opt_string(args, key)
  if not val:
    raise ValidationError(f"Missing required parameter: {key}")
  return val


def split_csv(value: Any) -> list[str]:
  """Split a comma-separated string into trimmed, non-empty entries, keeping order.

  Lists are accepted too, so callers passing JSON arrays still work.
  """
  if value is None:
    return []
  parts = value if isinstance(value, list) else str(value).split(",")
  return [str(part).strip() for part in parts if str(part).strip()]
