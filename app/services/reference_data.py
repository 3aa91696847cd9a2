"""Reference skills and demo candidates for fresh databases."""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.candidate import Candidate
from app.models.candidate_skill import CandidateSkill
from app.models.skill import Skill

logger = logging.getLogger(__name__)

SKILLS: list[tuple[int, str]] = [
    (1, "C#"),
    (2, "JavaScript"),
    (3, "SQL"),
    (4, "English"),
    (5, "Database Design"),
    (6, "Project Management"),
    (7, "Russian"),
    (8, "German"),
]

# (name, birthday, phone number, email, skill ids)
DEMO_CANDIDATES: list[tuple[str, date, str, str, list[int]]] = [
    ("Petar Petrovic", date(1990, 5, 24), "+381623457998", "petar.petrovic@gmail.com", [1, 4, 5]),
    ("Ana Jovanovic", date(2002, 12, 4), "+381656783207", "anajovanovic@gmail.com", [2, 4, 7]),
    ("Pera Peric", date(1986, 3, 5), "+381630096381", "pera.peric@gmail.com", [1, 3, 6]),
    ("Jelena Djordjevic", date(1999, 8, 30), "+381623358998", "jelena.djordjevic@gmail.com", [2, 4, 8]),
    ("Marko Markovic", date(2000, 5, 12), "+381612766438", "marko.markovic@gmail.com", [1, 2, 3]),
]


async def seed_skills(db: AsyncSession) -> int:
    """Insert missing reference skills. Returns the number inserted."""
    result = await db.execute(select(Skill.id))
    existing = set(result.scalars().all())

    missing = [Skill(id=skill_id, name=name) for skill_id, name in SKILLS if skill_id not in existing]
    db.add_all(missing)
    await db.commit()

    if missing:
        logger.info("Seeded %d skills", len(missing))
    return len(missing)


async def seed_demo_candidates(db: AsyncSession) -> int:
    """Insert demo candidates whose email is not taken yet. Skills must exist."""
    result = await db.execute(select(Candidate.email))
    existing = set(result.scalars().all())

    inserted = 0
    for name, birthday, phone_number, email, skill_ids in DEMO_CANDIDATES:
        if email in existing:
            continue
        candidate = Candidate(
            name=name, birthday=birthday, phone_number=phone_number, email=email
        )
        candidate.candidate_skills = [CandidateSkill(skill_id=s) for s in skill_ids]
        db.add(candidate)
        inserted += 1
    await db.commit()

    if inserted:
        logger.info("Seeded %d demo candidates", inserted)
    return inserted
