from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.dog import Dog


async def execute(uow: UnitOfWork, dog_id: int) -> Dog:
    dog = await uow.dogs.get(dog_id)
    if not dog:
        raise NotFound("Dog not found")
    return dog
