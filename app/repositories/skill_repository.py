from sqlalchemy import select

from app.models.skill import Skill
from app.repositories.base import BaseRepository


class SkillRepository(BaseRepository):
    async def get_by_ids(self, skill_ids: list[int]) -> list[Skill]:
        """Return the skills that exist among ``skill_ids`` (each at most once)."""
        if not skill_ids:
            return []
        result = await self.db.execute(
            select(Skill).where(Skill.id.in_(skill_ids)).order_by(Skill.id)
        )
        return list(result.scalars().all())
