"""
Teamup API Exceptions

Exception classes raised by the Teamup calendar adapter. Every failure the
adapter can hit surfaces as exactly one of these.
"""

import copy
from typing import Optional


class TeamupAPIError(Exception):
    """Base exception for Teamup API errors"""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    def with_context(self, context: str) -> "TeamupAPIError":
        """
        Return a copy of this error with its message prefixed by context

        The copy keeps the concrete exception type and its attributes, so
        callers can still match on the type after the error has been wrapped.
        """
        wrapped = copy.copy(self)
        wrapped.message = f"{context}: {self.message}"
        wrapped.args = (wrapped.message,)
        return wrapped


class TransportError(TeamupAPIError):
    """Exception for connection failures and unusable requests"""
    pass


class RemoteServiceError(TeamupAPIError):
    """Exception for responses with a status code outside 2xx"""
    pass


class DecodeError(TeamupAPIError):
    """Exception for response bodies that are not the expected JSON"""
    pass


class EncodeError(TeamupAPIError):
    """Exception for event drafts that cannot be serialized"""
    pass


class NotFoundError(TeamupAPIError):
    """Exception for rooms with no matching sub-calendar"""

    def __init__(self, message: str, room_id: Optional[str] = None):
        super().__init__(message)
        self.room_id = room_id


class CancellationError(TeamupAPIError):
    """Exception for requests aborted by their deadline"""
    pass
