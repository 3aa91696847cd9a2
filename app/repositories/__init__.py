from app.repositories.candidate_repository import CandidateRepository
from app.repositories.candidate_skill_repository import CandidateSkillRepository
from app.repositories.skill_repository import SkillRepository

__all__ = ["CandidateRepository", "CandidateSkillRepository", "SkillRepository"]
