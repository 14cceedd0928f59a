from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, dog_id: int) -> None:
    deleted = await uow.dogs.delete(dog_id)
    if not deleted:
        raise NotFound("Dog not found")
    await uow.commit()
