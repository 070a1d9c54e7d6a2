"""
Tool definitions organized by domain.

Each module exports a list of Tool objects that are combined into ALL_TOOLS,
in the order they are reported to clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .acl import acl_tools
from .auth import auth_tools
from .calendar import calendar_tools
from .event import event_tools
from .freebusy import freebusy_tools

if TYPE_CHECKING:
  from mcp.types import Tool

ALL_TOOLS: list[Tool] = [
  *event_tools,
  *calendar_tools,
  *acl_tools,
  *freebusy_tools,
  *auth_tools,
]
