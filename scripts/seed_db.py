#!/usr/bin/env python3
"""
Script to create the database schema and load the bundled breeds and dogs.

Usage:
  python scripts/seed_db.py [--reset] [--database-url URL]

Seeding is skipped when breeds already exist, unless --reset is given.
"""

import asyncio
import sys
import traceback
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import Settings, get_settings
from src.infrastructure.db.seed import seed_database
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
    create_session_factory,
    drop_schema,
)


async def seed(database_url: str, reset: bool = False) -> None:
    engine = create_engine(database_url)
    session_factory = create_session_factory(engine)
    try:
        if reset:
            await drop_schema(engine)
            print("🧹 Dropped existing tables")
        await create_schema(engine)

        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            result = await seed_database(uow)

        if result.skipped:
            print("ℹ️  Database already contains breeds; nothing to do")
        else:
            print(f"✅ Seeded {result.breeds} breeds and {result.dogs} dogs")
    except Exception as e:
        print(f"\n❌ Error seeding database: {e}")
        traceback.print_exc()
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description="Create tables and seed breeds/dogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seed the database configured through DATABASE_URL / .env
  python scripts/seed_db.py

  # Start from scratch
  python scripts/seed_db.py --reset
        """,
    )
    parser.add_argument("--reset", action="store_true", help="Drop all tables before seeding")
    parser.add_argument("--database-url", help="Override DATABASE_URL")

    args = parser.parse_args()

    settings = Settings(database_url=args.database_url) if args.database_url else get_settings()
    asyncio.run(seed(settings.database_url, reset=args.reset))
