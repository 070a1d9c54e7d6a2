"""
Google Calendar MCP server.

Exposes Google Calendar API v3 operations as MCP tools and ships an
OAuth2 setup flow that stores user credentials on disk.
"""

from __future__ import annotations

__version__ = "1.0.0"
