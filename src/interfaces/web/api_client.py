from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter

from src.interfaces.web.models import BreedOption, DogDetail, DogSummary

logger = logging.getLogger(__name__)

_DOGS = TypeAdapter(list[DogSummary])
_BREEDS = TypeAdapter(list[BreedOption])


class ShelterApiError(Exception):
    """Non-2xx answer from the shelter API."""

    def __init__(self, message: str, *, status_code: int, reason: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


def describe_error(exc: BaseException) -> str:
    """Human readable description of a failure, falling back to repr()."""
    return str(exc) or repr(exc)


class ShelterApiClient:
    """
    Thin async client for the dogs/breeds API.
    - one GET per call, no retries
    - non-2xx raises ShelterApiError
    - malformed bodies raise ValueError (json or pydantic validation)
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def create(
        cls,
        base_url: str,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ShelterApiClient:
        client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )
        return cls(client)

    async def __aenter__(self) -> ShelterApiClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, what: str):
        resp = await self._client.get(path)
        if not resp.is_success:
            logger.debug("GET %s returned %d", path, resp.status_code)
            raise ShelterApiError(
                f"Failed to fetch {what}: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
                reason=resp.reason_phrase,
            )
        return resp.json()

    async def get_dogs(self, query: str = "") -> list[DogSummary]:
        payload = await self._get_json(f"/api/dogs{query}", "dogs")
        return _DOGS.validate_python(payload)

    async def get_breeds(self) -> list[BreedOption]:
        payload = await self._get_json("/api/breeds", "breeds")
        return _BREEDS.validate_python(payload)

    async def get_dog(self, dog_id: int) -> DogDetail:
        payload = await self._get_json(f"/api/dogs/{dog_id}", "dog")
        return DogDetail.model_validate(payload)
