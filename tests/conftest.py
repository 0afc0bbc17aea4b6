import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest

from teamup_scheduler.teamup import TeamupConfig


BASE_URL = "https://api.teamup.test"

SUBCALENDARS = {
    "subcalendars": [
        {"id": 7, "name": "RoomA", "active": True, "color": 3, "overlap": True,
         "readonly": False, "creation_dt": "2023-05-01T10:00:00+00:00", "update_dt": None},
        {"id": 9, "name": "RoomB", "active": True, "color": 5, "overlap": False,
         "readonly": False, "creation_dt": "2023-05-01T10:00:00+00:00", "update_dt": None},
    ]
}


class FakeTeamup:
    """Routes requests to canned (status, body) replies and records them"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []

    def reply(self, method: str, path: str, status: int, body: Any) -> None:
        self.routes[(method, path)] = (status, body)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get((request.method, request.url.path), (404, "not found"))
        if isinstance(body, (dict, list)):
            return httpx.Response(status, content=json.dumps(body).encode("utf-8"),
                                  headers={"Content-Type": "application/json"})
        return httpx.Response(status, text=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_teamup():
    fake = FakeTeamup()
    fake.reply("GET", "/ks123/subcalendars", 200, SUBCALENDARS)
    return fake


@pytest.fixture
def config():
    return TeamupConfig(
        api_key="token-abc",
        calendar_id="ks123",
        room_id="RoomB",
        base_url=BASE_URL,
        timeout=5.0,
    )
