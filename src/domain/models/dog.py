from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.domain.value_objects.dog_status import DogStatus


@dataclass(slots=True)
class Dog:
    id: int | None
    name: str
    breed_id: int
    breed: str | None = None
    age: int | None = None
    gender: str | None = None
    description: str | None = None
    status: DogStatus = DogStatus.AVAILABLE

    deleted_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        name: str,
        breed_id: int,
        *,
        age: int | None = None,
        gender: str | None = None,
        description: str | None = None,
        status: DogStatus = DogStatus.AVAILABLE,
    ) -> Dog:
        # id is assigned by the database on flush
        now = datetime.now(timezone.utc)
        return cls(
            id=None,
            name=name,
            breed_id=breed_id,
            age=age,
            gender=gender,
            description=description,
            status=status,
            created_at=now,
            updated_at=now,
            version=1,
        )
