from sqlalchemy import select

from app.models.candidate_skill import CandidateSkill
from app.models.skill import Skill
from app.repositories.base import BaseRepository


class CandidateSkillRepository(BaseRepository):
    async def get(self, candidate_id: int, skill_id: int) -> CandidateSkill | None:
        result = await self.db.execute(
            select(CandidateSkill).where(
                CandidateSkill.candidate_id == candidate_id,
                CandidateSkill.skill_id == skill_id,
            )
        )
        return result.scalar_one_or_none()

    async def add_range(self, candidate_id: int, skills: list[Skill]) -> None:
        """Persist one association per skill in a single commit."""
        self.db.add_all(
            [CandidateSkill(candidate_id=candidate_id, skill_id=skill.id) for skill in skills]
        )
        await self._commit("Candidate already has one or more of the specified skills!")

    async def remove(self, candidate_skill: CandidateSkill) -> None:
        await self.db.delete(candidate_skill)
        await self._commit()
