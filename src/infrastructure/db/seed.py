from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed
from src.domain.models.dog import Dog
from src.domain.value_objects.dog_status import DogStatus

logger = logging.getLogger(__name__)

SEED_DATA_DIR = Path(__file__).resolve().parent / "seed_data"


@dataclass(slots=True)
class SeedResult:
    breeds: int = 0
    dogs: int = 0
    skipped: bool = False


def _read_rows(path: Path) -> list[dict[str, str]]:
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


async def seed_database(uow: UnitOfWork, *, data_dir: Path = SEED_DATA_DIR) -> SeedResult:
    """
    Load breeds.csv and dogs.csv into an empty database.
    Skipped when breeds already exist so repeated startups are harmless.
    """
    if await uow.breeds.count() > 0:
        logger.info("Seed skipped: breeds already present")
        return SeedResult(skipped=True)

    result = SeedResult()
    for row in _read_rows(data_dir / "breeds.csv"):
        await uow.breeds.add(
            Breed.create(row["name"].strip(), description=row.get("description") or None)
        )
        result.breeds += 1

    for row in _read_rows(data_dir / "dogs.csv"):
        breed_name = row["breed"].strip()
        breed = await uow.breeds.find_by_name(breed_name)
        if breed is None:
            raise ValidationError(f"Unknown breed in seed data: {breed_name}")
        status = DogStatus.parse(row.get("status", "").strip()) or DogStatus.AVAILABLE
        age = row.get("age", "").strip()
        await uow.dogs.add(
            Dog.create(
                name=row["name"].strip(),
                breed_id=breed.id,
                age=int(age) if age else None,
                gender=row.get("gender") or None,
                description=row.get("description") or None,
                status=status,
            )
        )
        result.dogs += 1

    await uow.commit()
    logger.info("Seeded %d breeds and %d dogs", result.breeds, result.dogs)
    return result
