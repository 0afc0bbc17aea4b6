"""
Calendar backend contract shared by every scheduler backend.

Backends turn their provider's native records into ``Event`` values and accept
``Event`` values for creation, so the scheduler never deals with provider
payloads directly.
"""

from datetime import datetime
from typing import List, Protocol, runtime_checkable

from pydantic import BaseModel


class Event(BaseModel):
    title: str
    start_time: datetime
    end_time: datetime


@runtime_checkable
class Calendar(Protocol):
    """Operations a room calendar backend must provide"""

    async def get_events(self) -> List[Event]:
        ...

    async def create_event(self, event: Event) -> None:
        ...
