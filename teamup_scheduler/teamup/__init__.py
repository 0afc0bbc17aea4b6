"""
Teamup Calendar backend for the room scheduler

Maps the scheduler's generic events onto the sub-calendar of a Teamup
calendar that represents a room.
"""

from .calendar import TeamupCalendar
from .client import TeamupClient
from .config import TeamupConfig, TeamupSettings
from .exceptions import (
    CancellationError,
    DecodeError,
    EncodeError,
    NotFoundError,
    RemoteServiceError,
    TeamupAPIError,
    TransportError,
)

__all__ = [
    'TeamupCalendar',
    'TeamupClient',
    'TeamupConfig',
    'TeamupSettings',
    'TeamupAPIError',
    'TransportError',
    'RemoteServiceError',
    'DecodeError',
    'EncodeError',
    'NotFoundError',
    'CancellationError',
]
