from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.config import SKILL_NAME_MAX_LENGTH
from app.core.database import Base


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(SKILL_NAME_MAX_LENGTH), unique=True, nullable=False
    )

    # relationships
    candidate_skills = relationship(
        "CandidateSkill", back_populates="skill", passive_deletes=True
    )
