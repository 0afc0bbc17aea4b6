"""
Teamup API Client

Low-level client for the Teamup Calendar API. Builds authenticated requests,
sends them over an httpx transport and turns every failure into one of the
exceptions in ``exceptions``. There is no retry or rate limiting: each call is
exactly one round trip.
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from .config import TeamupConfig
from .exceptions import (
    CancellationError,
    DecodeError,
    EncodeError,
    RemoteServiceError,
    TransportError,
)


logger = logging.getLogger(__name__)


class TeamupClient:
    """Teamup API client over a shared httpx.AsyncClient"""

    def __init__(self, config: TeamupConfig, http_client: Optional[httpx.AsyncClient] = None):
        """
        Initialize Teamup API client

        Args:
            config: Teamup connection and identity settings
            http_client: Transport to send requests with. When omitted the
                client creates its own and closes it in ``aclose``.
        """
        self.config = config
        self.config.validate()

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=config.timeout)

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "TeamupClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def deadline(self, timeout: Optional[float] = None) -> float:
        """Absolute event-loop time by which an operation must finish"""
        return asyncio.get_running_loop().time() + (self.config.timeout if timeout is None else timeout)

    async def _make_request(self, method: str, resource: str,
                            params: Optional[Dict[str, Any]] = None,
                            content: Optional[bytes] = None,
                            deadline: Optional[float] = None) -> httpx.Response:
        """
        Send one request to a resource of the configured calendar

        Args:
            method: HTTP method
            resource: Resource path below the calendar (e.g. "events")
            params: Query parameters
            content: Raw JSON request body
            deadline: Absolute loop time (see ``deadline()``) shared by every
                request of one operation; defaults to the configured timeout
                from now

        Returns:
            The response, with its body already read and a 2xx status

        Raises:
            TransportError: If the request cannot be built or sent
            RemoteServiceError: If the status code is outside 2xx
            CancellationError: If the deadline expires first
        """
        headers = dict(self.config.headers)
        if content is not None:
            headers["Content-Type"] = "application/json"

        try:
            request = self.http_client.build_request(
                method, self.config.url(resource), params=params, content=content, headers=headers
            )
        except (httpx.InvalidURL, ValueError) as e:
            # non-ASCII credentials fail header encoding with UnicodeEncodeError
            logger.error(f"{method} /{resource} could not be built: {type(e).__name__}")
            raise TransportError(f"error creating {method.lower()} request: {e}") from e

        if deadline is None:
            deadline = self.deadline()
        remaining = deadline - asyncio.get_running_loop().time()
        if remaining <= 0:
            logger.error(f"{method} /{resource} not sent, deadline already passed")
            raise CancellationError("request cancelled: deadline exceeded before sending")

        logger.debug(f"Making {method} request to /{self.config.calendar_id}/{resource}")
        try:
            response = await asyncio.wait_for(self.http_client.send(request), timeout=remaining)
        except asyncio.TimeoutError as e:
            logger.error(f"{method} /{resource} cancelled after {remaining:.3f}s")
            raise CancellationError("request cancelled: deadline exceeded") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"{method} /{resource} failed: {e}")
            raise TransportError(f"error sending {method.lower()} request: {e}") from e

        if not response.is_success:
            body = response.text
            logger.error(f"{method} /{resource} returned status {response.status_code}")
            raise RemoteServiceError(
                f"invalid response, status code {response.status_code}: {body}",
                status_code=response.status_code,
                response=body,
            )

        return response

    async def get(self, resource: str, model: Type[BaseModel], params: Optional[Dict[str, Any]] = None,
                  deadline: Optional[float] = None) -> Any:
        """
        GET a resource and decode its JSON body into model

        Raises:
            DecodeError: If the body is not JSON of the expected shape
        """
        response = await self._make_request("GET", resource, params=params, deadline=deadline)
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Could not decode /{resource} response: {e.error_count()} errors")
            raise DecodeError(f"error unmarshalling json {resource} data: {e}",
                              status_code=response.status_code,
                              response=response.text) from e

    async def post(self, resource: str, payload: BaseModel,
                   deadline: Optional[float] = None) -> httpx.Response:
        """
        POST payload as JSON to a resource

        Raises:
            EncodeError: If payload cannot be serialized
        """
        try:
            content = payload.model_dump_json().encode("utf-8")
        except (ValueError, TypeError) as e:
            raise EncodeError(f"error marshalling {resource} data into json: {e}") from e
        return await self._make_request("POST", resource, content=content, deadline=deadline)
