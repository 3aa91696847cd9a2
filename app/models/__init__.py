from app.models.candidate import Candidate
from app.models.skill import Skill
from app.models.candidate_skill import CandidateSkill

__all__ = ["Candidate", "Skill", "CandidateSkill"]
