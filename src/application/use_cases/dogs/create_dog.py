from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.dog import Dog
from src.domain.value_objects.dog_status import DogStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateDogInput:
    name: str
    breed_id: int
    age: int | None = None
    gender: str | None = None
    description: str | None = None
    status: DogStatus = DogStatus.AVAILABLE


async def execute(uow: UnitOfWork, payload: CreateDogInput) -> Dog:
    name = payload.name.strip()
    if not name:
        raise ValidationError("name must not be empty")
    breed = await uow.breeds.get(payload.breed_id)
    if not breed:
        raise ValidationError("Invalid breed_id", details={"breed_id": payload.breed_id})
    dog = Dog.create(
        name=name,
        breed_id=breed.id,
        age=payload.age,
        gender=payload.gender,
        description=payload.description,
        status=payload.status,
    )
    created = await uow.dogs.add(dog)
    await uow.commit()
    logger.info("Dog %s created (breed=%s, status=%s)", created.id, breed.name, created.status.value)
    return created
