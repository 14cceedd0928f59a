from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from src.interfaces.web.api_client import ShelterApiClient

DOGS = [
    {"id": 1, "name": "Buddy", "breed": "Labrador Retriever", "status": "AVAILABLE"},
    {"id": 2, "name": "Max", "breed": "Golden Retriever", "status": "PENDING"},
    {"id": 3, "name": "Rocky", "breed": "Boxer", "status": "ADOPTED"},
]
BREEDS = [{"id": 7, "name": "Beagle"}, {"id": 8, "name": "Boxer"}]


class RecordingApi:
    """Routes /api/dogs and /api/breeds to per-test handlers and records every request path."""

    def __init__(self) -> None:
        self.requests: list[str] = []
        self.dogs: Callable = lambda request: httpx.Response(200, json=DOGS)
        self.breeds: Callable = lambda request: httpx.Response(200, json=BREEDS)

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request.url.raw_path.decode())
        handler = self.breeds if request.url.path == "/api/breeds" else self.dogs
        response = handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def dog_requests(self) -> list[str]:
        return [p for p in self.requests if p.startswith("/api/dogs")]


@pytest.fixture()
def recording_api() -> RecordingApi:
    return RecordingApi()


@pytest.fixture()
async def api(recording_api):
    client = ShelterApiClient.create(
        "http://shelter.test", transport=httpx.MockTransport(recording_api.handle)
    )
    async with client:
        yield client
