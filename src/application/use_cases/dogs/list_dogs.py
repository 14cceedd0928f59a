from __future__ import annotations

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.dog import Dog
from src.domain.value_objects.dog_status import DogStatus


async def execute(
    uow: UnitOfWork,
    *,
    breed_id: int | None = None,
    status: str | None = None,
) -> list[Dog]:
    dog_status = None
    if status:
        dog_status = DogStatus.parse(status)
        if dog_status is None:
            raise ValidationError(
                f"Invalid status: {status}",
                details={"allowed": [s.value for s in DogStatus]},
            )
    return await uow.dogs.list(breed_id=breed_id, status=dog_status)
