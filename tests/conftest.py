from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.value_objects.dog_status import DogStatus
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import breed, dog  # noqa: F401
from src.infrastructure.db.orm.breed import BreedORM
from src.infrastructure.db.orm.dog import DogORM
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded(app, client) -> dict[str, int]:
    """Two breeds, four dogs. Returns ids keyed by name."""
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        lab = BreedORM(name="Labrador Retriever", description="Friendly")
        beagle = BreedORM(name="Beagle", description="Curious")
        session.add_all([lab, beagle])
        await session.flush()
        dogs = [
            DogORM(name="Buddy", breed_id=lab.id, age=3, gender="Male", status=DogStatus.AVAILABLE),
            DogORM(name="Max", breed_id=lab.id, age=2, gender="Male", status=DogStatus.PENDING),
            DogORM(
                name="Daisy",
                breed_id=beagle.id,
                age=4,
                gender="Female",
                description="Loves snacks",
                status=DogStatus.AVAILABLE,
            ),
            DogORM(name="Rocky", breed_id=beagle.id, age=6, gender="Male", status=DogStatus.ADOPTED),
        ]
        session.add_all(dogs)
        await session.commit()
        ids = {"lab": lab.id, "beagle": beagle.id}
        ids.update({d.name: d.id for d in dogs})
    return ids
