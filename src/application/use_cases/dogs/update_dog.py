from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.dog import Dog
from src.domain.value_objects.dog_status import DogStatus


@dataclass(slots=True)
class UpdateDogInput:
    version: int
    name: str | None = None
    breed_id: int | None = None
    age: int | None = None
    gender: str | None = None
    description: str | None = None
    status: DogStatus | None = None


async def execute(uow: UnitOfWork, dog_id: int, payload: UpdateDogInput) -> Dog:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.dogs.get(dog_id)
    if not existing:
        raise NotFound("Dog not found")
    if payload.breed_id is not None and not await uow.breeds.get(payload.breed_id):
        raise ValidationError("Invalid breed_id", details={"breed_id": payload.breed_id})
    data: dict = {}
    for field_name in ("name", "breed_id", "age", "gender", "description", "status"):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    updated = await uow.dogs.update(dog_id, data=data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating dog")
    await uow.commit()
    return updated
