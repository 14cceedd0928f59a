from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.repositories.dogs import DogRepository
from src.domain.models.dog import Dog
from src.domain.value_objects.dog_status import DogStatus
from src.infrastructure.db.orm.breed import BreedORM
from src.infrastructure.db.orm.dog import DogORM


class DogsSQLAlchemyRepository(DogRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: DogORM, breed_name: str | None = None) -> Dog:
        return Dog(
            id=orm.id,
            name=orm.name,
            breed_id=orm.breed_id,
            breed=breed_name,
            age=orm.age,
            gender=orm.gender,
            description=orm.description,
            status=orm.status,
            deleted_at=orm.deleted_at,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    def _select_with_breed(self):
        # Breed name is denormalized onto the domain object for listing responses
        return (
            select(DogORM, BreedORM.name)
            .join(BreedORM, DogORM.breed_id == BreedORM.id)
            .where(DogORM.deleted_at.is_(None))
        )

    async def add(self, dog: Dog) -> Dog:
        orm = DogORM(
            name=dog.name,
            breed_id=dog.breed_id,
            age=dog.age,
            gender=dog.gender,
            description=dog.description,
            status=dog.status,
            created_at=dog.created_at,
            updated_at=dog.updated_at,
            version=dog.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create dog due to constraint violation") from exc
        created = await self.get(orm.id)
        return created if created else self._to_domain(orm)

    async def get(self, dog_id: int) -> Dog | None:
        stmt = self._select_with_breed().where(DogORM.id == dog_id)
        result = await self.session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        orm, breed_name = row
        return self._to_domain(orm, breed_name)

    async def list(
        self,
        *,
        breed_id: int | None = None,
        status: DogStatus | None = None,
    ) -> list[Dog]:
        stmt = self._select_with_breed()
        if breed_id is not None:
            stmt = stmt.where(DogORM.breed_id == breed_id)
        if status is not None:
            stmt = stmt.where(DogORM.status == status)
        stmt = stmt.order_by(DogORM.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm, breed_name) for orm, breed_name in result.all()]

    async def update(self, dog_id: int, data: dict, expected_version: int) -> Dog | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(DogORM)
            .where(DogORM.id == dog_id)
            .where(DogORM.version == expected_version)
            .where(DogORM.deleted_at.is_(None))
            .values(**values)
            .returning(DogORM.id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update dog due to constraint violation") from exc
        if result.scalar_one_or_none() is None:
            return None
        self.session.expire_all()
        return await self.get(dog_id)

    async def delete(self, dog_id: int) -> bool:
        stmt = (
            update(DogORM)
            .where(DogORM.id == dog_id)
            .where(DogORM.deleted_at.is_(None))
            .values(deleted_at=func.now(), version=DogORM.version + 1)
            .returning(DogORM.id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete dog") from exc
        return result.scalar_one_or_none() is not None
