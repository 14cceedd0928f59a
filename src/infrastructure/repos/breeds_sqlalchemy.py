from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.domain.models.breed import Breed
from src.domain.ports.breeds_repo import BreedsRepo
from src.infrastructure.db.orm.breed import BreedORM


class BreedsSQLAlchemyRepository(BreedsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedORM) -> Breed:
        return Breed(id=orm.id, name=orm.name, description=orm.description)

    async def add(self, breed: Breed) -> Breed:
        orm = BreedORM(id=breed.id, name=breed.name, description=breed.description)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Breed name already exists") from exc
        return self._to_domain(orm)

    async def get(self, breed_id: int) -> Breed | None:
        stmt = select(BreedORM).where(BreedORM.id == breed_id)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def find_by_name(self, name: str) -> Breed | None:
        stmt = select(BreedORM).where(func.lower(BreedORM.name) == name.lower())
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self) -> list[Breed]:
        stmt = select(BreedORM).order_by(BreedORM.name)
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def count(self) -> int:
        res = await self.session.execute(select(func.count(BreedORM.id)))
        return res.scalar() or 0
