"""CLI script to create tables and seed reference data.

Usage:
    python seed_db.py            # skills only
    python seed_db.py --demo     # skills and demo candidates
"""

import asyncio
import sys

from app.core.database import Base, async_session_factory, engine
from app.services.reference_data import seed_demo_candidates, seed_skills

# Ensure all models are loaded
import app.models  # noqa: F401


async def seed(with_demo: bool = False):
    # Create tables if they don't exist (for local dev without Alembic)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as db:
        skills = await seed_skills(db)
        print(f"Skills inserted: {skills}")
        if with_demo:
            candidates = await seed_demo_candidates(db)
            print(f"Demo candidates inserted: {candidates}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed(with_demo="--demo" in sys.argv[1:]))
