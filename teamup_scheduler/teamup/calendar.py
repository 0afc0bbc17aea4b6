"""
Teamup Room Calendar

Calendar backend that keeps a room's events in a Teamup sub-calendar. The
room is found by sub-calendar name on every call; nothing is cached between
calls, so an instance can be shared by concurrent tasks.
"""

import logging
from typing import List, Optional

import httpx

from ..calendars import Event
from .client import TeamupClient
from .config import TeamupConfig
from .exceptions import NotFoundError, TeamupAPIError
from .models import EventResponse, RemoteEventDraft, SubCalendarList


logger = logging.getLogger(__name__)


class TeamupCalendar:
    """
    Room calendar backed by the Teamup API

    The ``timeout`` each operation takes bounds the whole operation, including
    the sub-calendar lookup, not each request on its own.
    """

    def __init__(self, config: TeamupConfig, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize TeamupCalendar

        Args:
            config: Teamup credentials, calendar id and room name
            http_client: Optional shared httpx transport
        """
        self.config = config
        self.client = TeamupClient(config, http_client=http_client)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "TeamupCalendar":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def get_subcalendar_id(self, timeout: Optional[float] = None) -> int:
        """
        Look up the id of the sub-calendar named after the configured room

        Sub-calendars are scanned in the order Teamup returns them and the
        first exact, case-sensitive name match wins.

        Raises:
            NotFoundError: If no sub-calendar has the room's name
            TeamupAPIError: If the sub-calendar list cannot be fetched
        """
        return await self._lookup_subcalendar_id(self.client.deadline(timeout))

    async def _lookup_subcalendar_id(self, deadline: float) -> int:
        response = await self.client.get("subcalendars", SubCalendarList, deadline=deadline)

        for subcalendar in response.subcalendars or []:
            if subcalendar.name == self.config.room_id:
                logger.debug(f"Room {self.config.room_id!r} is sub-calendar {subcalendar.id}")
                return subcalendar.id

        raise NotFoundError(f"no calendar found with roomID {self.config.room_id!r}",
                            room_id=self.config.room_id)

    async def get_events(self, timeout: Optional[float] = None) -> List[Event]:
        """
        Get the events scheduled in the room

        Returns:
            Events in the order Teamup returns them; empty when there are none
        """
        deadline = self.client.deadline(timeout)
        subcalendar_id = await self._resolve_subcalendar_id(deadline)

        response = await self.client.get(
            "events",
            EventResponse,
            params={"subcalendarId[]": str(subcalendar_id)},
            deadline=deadline,
        )
        events = [remote.to_event() for remote in response.events or []]
        logger.info(f"Found {len(events)} events for room {self.config.room_id!r}")
        return events

    async def create_event(self, event: Event, timeout: Optional[float] = None) -> None:
        """
        Create an event in the room

        Every call creates a new Teamup event, even for identical input.
        """
        deadline = self.client.deadline(timeout)
        subcalendar_id = await self._resolve_subcalendar_id(deadline)

        draft = RemoteEventDraft.from_event(event, subcalendar_id)
        await self.client.post("events", draft, deadline=deadline)
        logger.info(f"Created event {event.title!r} for room {self.config.room_id!r}")

    async def _resolve_subcalendar_id(self, deadline: float) -> int:
        try:
            return await self._lookup_subcalendar_id(deadline)
        except TeamupAPIError as e:
            raise e.with_context("unable to get subcalendar id") from e
