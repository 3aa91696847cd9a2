"""
Candidate repository.

Lookups by id, email and phone number, filtered search and the add/save/
delete mutations. No validation or workflow decisions live here.
"""

from sqlalchemy import delete, exists, select
from sqlalchemy.orm import selectinload

from app.models.candidate import Candidate
from app.models.candidate_skill import CandidateSkill
from app.repositories.base import BaseRepository


def _hydrated():
    """Base select that eager-loads skills and refreshes cached instances."""
    return (
        select(Candidate)
        .options(selectinload(Candidate.candidate_skills).selectinload(CandidateSkill.skill))
        .execution_options(populate_existing=True)
    )


class CandidateRepository(BaseRepository):
    async def get_all(self) -> list[Candidate]:
        result = await self.db.execute(_hydrated().order_by(Candidate.id))
        return list(result.scalars().all())

    async def get_by_id(self, candidate_id: int) -> Candidate | None:
        result = await self.db.execute(_hydrated().where(Candidate.id == candidate_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Candidate | None:
        result = await self.db.execute(select(Candidate).where(Candidate.email == email))
        return result.scalar_one_or_none()

    async def get_by_phone_number(self, phone_number: str) -> Candidate | None:
        result = await self.db.execute(
            select(Candidate).where(Candidate.phone_number == phone_number)
        )
        return result.scalar_one_or_none()

    async def exists_with_email(self, email: str, exclude_id: int | None = None) -> bool:
        condition = Candidate.email == email
        if exclude_id is not None:
            condition = condition & (Candidate.id != exclude_id)
        return bool(await self.db.scalar(select(exists().where(condition))))

    async def exists_with_phone_number(
        self, phone_number: str, exclude_id: int | None = None
    ) -> bool:
        condition = Candidate.phone_number == phone_number
        if exclude_id is not None:
            condition = condition & (Candidate.id != exclude_id)
        return bool(await self.db.scalar(select(exists().where(condition))))

    async def search(
        self, name: str | None = None, skill_ids: list[int] | None = None
    ) -> list[Candidate]:
        """Case-insensitive name fragment AND every listed skill."""
        stmt = _hydrated()
        if name and name.strip():
            stmt = stmt.where(Candidate.name.icontains(name.strip(), autoescape=True))
        for skill_id in skill_ids or []:
            stmt = stmt.where(
                Candidate.candidate_skills.any(CandidateSkill.skill_id == skill_id)
            )
        result = await self.db.execute(stmt.order_by(Candidate.id))
        return list(result.scalars().all())

    async def add(self, candidate: Candidate) -> None:
        self.db.add(candidate)
        await self._commit(
            f"Candidate with email {candidate.email} or phone number "
            f"{candidate.phone_number} already exists!"
        )

    async def delete(self, candidate: Candidate) -> None:
        await self.db.delete(candidate)
        await self._commit()

    async def delete_by_id(self, candidate_id: int) -> None:
        """Delete a candidate and its associations by primary key, without loading it."""
        await self.db.execute(
            delete(CandidateSkill).where(CandidateSkill.candidate_id == candidate_id)
        )
        await self.db.execute(delete(Candidate).where(Candidate.id == candidate_id))
        await self._commit()

    async def save(self) -> None:
        await self._commit("Email or phone number is already in use!")
