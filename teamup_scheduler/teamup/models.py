"""
Teamup wire models

Shapes of the JSON documents exchanged with the Teamup API. Read models accept
and ignore keys they do not declare; only the fields the adapter projects are
required.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..calendars import Event


class SubCalendar(BaseModel):
    id: int
    name: Optional[str] = None
    active: Optional[bool] = None
    color: Optional[int] = None
    overlap: Optional[bool] = None
    readonly: Optional[bool] = None
    creation_dt: Optional[str] = None
    update_dt: Optional[str] = None


class SubCalendarList(BaseModel):
    subcalendars: Optional[List[SubCalendar]] = None


class RemoteEvent(BaseModel):
    """Event record as returned by the events endpoint"""

    # every field but the times may be null; ids and versions arrive as
    # numbers or strings depending on the record
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    remote_id: Optional[str] = None
    series_id: Optional[str] = None
    subcalendar_id: Optional[int] = None
    start_dt: datetime
    end_dt: datetime
    all_day: Optional[bool] = None
    title: Optional[str] = None
    who: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    rrule: Optional[str] = None
    ristart_dt: Optional[str] = None
    rsstart_dt: Optional[str] = None
    tz: Optional[str] = None
    version: Optional[str] = None
    readonly: Optional[bool] = None
    creation_dt: Optional[datetime] = None
    update_dt: Optional[datetime] = None

    def to_event(self) -> Event:
        return Event(title=self.title or "", start_time=self.start_dt, end_time=self.end_dt)


class EventResponse(BaseModel):
    events: Optional[List[RemoteEvent]] = None
    timestamp: Optional[int] = None


class RemoteEventDraft(BaseModel):
    """Event payload accepted by the event creation endpoint"""

    subcalendar_id: int
    start_dt: str
    end_dt: str
    all_day: bool = False
    rrule: str = ""
    title: str
    who: str = ""
    location: str = ""
    notes: str = ""

    @classmethod
    def from_event(cls, event: Event, subcalendar_id: int) -> "RemoteEventDraft":
        # isoformat keeps the UTC offset and any microseconds
        return cls(
            subcalendar_id=subcalendar_id,
            start_dt=event.start_time.isoformat(),
            end_dt=event.end_time.isoformat(),
            title=event.title,
        )
