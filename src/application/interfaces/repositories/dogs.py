from __future__ import annotations

from typing import Protocol

from src.domain.models.dog import Dog
from src.domain.value_objects.dog_status import DogStatus


class DogRepository(Protocol):
    async def add(self, dog: Dog) -> Dog: ...

    async def get(self, dog_id: int) -> Dog | None: ...

    async def list(
        self,
        *,
        breed_id: int | None = None,
        status: DogStatus | None = None,
    ) -> list[Dog]: ...

    async def update(self, dog_id: int, data: dict, expected_version: int) -> Dog | None: ...

    async def delete(self, dog_id: int) -> bool: ...
