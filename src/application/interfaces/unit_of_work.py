from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.dogs import DogRepository
from src.domain.ports.breeds_repo import BreedsRepo


class UnitOfWork(Protocol):
    dogs: DogRepository
    breeds: BreedsRepo

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
