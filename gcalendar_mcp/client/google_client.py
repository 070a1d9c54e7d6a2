"""
Google Calendar API client.

Thin wrapper over the googleapiclient discovery service. Each method maps
to exactly one API request; HttpError and RefreshError are translated to
the package's own error types.
"""

from __future__ import annotations

import logging
from typing import Any

from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..errors import AuthError, RemoteCallError

log = logging.getLogger("gcalendar.client.google")


class GoogleCalendarClient:
  """Client for Google Calendar API v3."""

  def __init__(self, credentials: Credentials | None = None, service: Any = None):
    if service is None:
      service = build("calendar", "v3", credentials=credentials, cache_discovery=False)
    self.service = service

  def _execute(self, request: Any, action: str) -> Any:
    try:
      return request.execute()
    except RefreshError as e:
      log.error("Failed to %s: credentials rejected: %s", action, e)
      raise AuthError(f"Not authenticated: {e}") from e
    except HttpError as e:
      log.error("Failed to %s: %s", action, e)
      status = e.resp.status if e.resp is not None else 0
      raise RemoteCallError(int(status), e.reason or str(e)) from e

  # ---------------------------------------------------------------------------
  # Events
  # ---------------------------------------------------------------------------

  async def list_events(
    self,
    calendar_id: str = "primary",
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int | None = None,
    query: str | None = None,
  ) -> list[dict[str, Any]]:
    result = self._execute(
      self.service.events().list(
        calendarId=calendar_id,
        timeMin=time_min,
        timeMax=time_max,
        maxResults=max_results,
        q=query,
      ),
      "list events",
    )
    return result.get("items") or []

  async def get_event(self, calendar_id: str, event_id: str) -> dict[str, Any]:
    return self._execute(
      self.service.events().get(calendarId=calendar_id, eventId=event_id),
      f"get event {event_id}",
    )

  async def create_event(
    self, calendar_id: str, body: dict[str, Any], conference_data_version: int = 1
  ) -> dict[str, Any]:
    return self._execute(
      self.service.events().insert(
        calendarId=calendar_id,
        body=body,
        conferenceDataVersion=conference_data_version,
      ),
      "create event",
    )

  async def update_event(self, calendar_id: str, event_id: str, body: dict[str, Any]) -> dict[str, Any]:
    """Patch an event with the given fields, leaving the rest untouched."""
    return self._execute(
      self.service.events().patch(calendarId=calendar_id, eventId=event_id, body=body),
      f"update event {event_id}",
    )

  async def delete_event(self, calendar_id: str, event_id: str) -> None:
    self._execute(
      self.service.events().delete(calendarId=calendar_id, eventId=event_id),
      f"delete event {event_id}",
    )

  async def quick_add(self, calendar_id: str, text: str) -> dict[str, Any]:
    return self._execute(
      self.service.events().quickAdd(calendarId=calendar_id, text=text),
      "quick add event",
    )

  async def list_instances(
    self,
    calendar_id: str,
    event_id: str,
    time_min: str | None = None,
    time_max: str | None = None,
  ) -> list[dict[str, Any]]:
    result = self._execute(
      self.service.events().instances(
        calendarId=calendar_id,
        eventId=event_id,
        timeMin=time_min,
        timeMax=time_max,
      ),
      f"list instances of {event_id}",
    )
    return result.get("items") or []

  # ---------------------------------------------------------------------------
  # Calendars
  # ---------------------------------------------------------------------------

  async def list_calendars(self) -> list[dict[str, Any]]:
    result = self._execute(self.service.calendarList().list(), "list calendars")
    return result.get("items") or []

  async def get_calendar(self, calendar_id: str) -> dict[str, Any]:
    return self._execute(
      self.service.calendars().get(calendarId=calendar_id),
      f"get calendar {calendar_id}",
    )

  async def create_calendar(self, body: dict[str, Any]) -> dict[str, Any]:
    return self._execute(self.service.calendars().insert(body=body), "create calendar")

  async def update_calendar(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
    return self._execute(
      self.service.calendars().patch(calendarId=calendar_id, body=body),
      f"update calendar {calendar_id}",
    )

  async def delete_calendar(self, calendar_id: str) -> None:
    self._execute(
      self.service.calendars().delete(calendarId=calendar_id),
      f"delete calendar {calendar_id}",
    )

  async def clear_calendar(self, calendar_id: str) -> None:
    self._execute(
      self.service.calendars().clear(calendarId=calendar_id),
      f"clear calendar {calendar_id}",
    )

  # ---------------------------------------------------------------------------
  # Access control
  # ---------------------------------------------------------------------------

  async def list_acl(self, calendar_id: str) -> list[dict[str, Any]]:
    result = self._execute(self.service.acl().list(calendarId=calendar_id), "list ACL")
    return result.get("items") or []

  async def get_acl_rule(self, calendar_id: str, rule_id: str) -> dict[str, Any]:
    return self._execute(
      self.service.acl().get(calendarId=calendar_id, ruleId=rule_id),
      f"get ACL rule {rule_id}",
    )

  async def create_acl_rule(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
    return self._execute(
      self.service.acl().insert(calendarId=calendar_id, body=body),
      "create ACL rule",
    )

  async def delete_acl_rule(self, calendar_id: str, rule_id: str) -> None:
    self._execute(
      self.service.acl().delete(calendarId=calendar_id, ruleId=rule_id),
      f"delete ACL rule {rule_id}",
    )

  # ---------------------------------------------------------------------------
  # Free/busy and colors
  # ---------------------------------------------------------------------------

  async def query_freebusy(self, time_min: str, time_max: str, calendar_ids: list[str]) -> dict[str, Any]:
    result = self._execute(
      self.service.freebusy().query(
        body={
          "timeMin": time_min,
          "timeMax": time_max,
          "items": [{"id": cal_id} for cal_id in calendar_ids],
        }
      ),
      "query free/busy",
    )
    return result.get("calendars") or {}

  async def get_colors(self) -> dict[str, Any]:
    return self._execute(self.service.colors().get(), "get colors")
