from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.breed import Breed


class BreedsRepo(ABC):
    @abstractmethod
    async def add(self, breed: Breed) -> Breed: ...

    @abstractmethod
    async def get(self, breed_id: int) -> Breed | None: ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Breed | None: ...

    @abstractmethod
    async def list(self) -> list[Breed]: ...

    @abstractmethod
    async def count(self) -> int: ...
