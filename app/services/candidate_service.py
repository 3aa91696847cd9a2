"""Candidate workflows: validation, create/update/delete and skill association.

The service re-reads authoritative state from the repositories on every step.
Email and phone uniqueness is checked before writing; the unique indexes on
the table still reject a concurrent writer that slips past the check.

Creating a candidate together with skills is two separate commits. When
attaching the skills fails, the freshly created candidate is deleted again
and the failure is reported as a conflict. A failure of that delete is
logged and propagated as-is.
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    CandidateServiceError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
)
from app.models.candidate import Candidate
from app.repositories import CandidateRepository, CandidateSkillRepository, SkillRepository
from app.schemas.candidate import (
    CreateCandidateRequest,
    CreateCandidateWithSkillsRequest,
    UpdateCandidateRequest,
)

logger = logging.getLogger(__name__)


def _check_birthday(birthday: date) -> None:
    if birthday > date.today():
        raise InvalidInputError("Candidate birthday cannot be in the future!", field="birthday")


class CandidateService:
    """Service for candidate business logic."""

    def __init__(self, db: AsyncSession):
        self.candidates = CandidateRepository(db)
        self.skills = SkillRepository(db)
        self.candidate_skills = CandidateSkillRepository(db)

    # ── reads ─────────────────────────────────────────────────────

    async def get_all_candidates(self) -> list[Candidate]:
        candidates = await self.candidates.get_all()
        if not candidates:
            raise NotFoundError("No candidates found!")
        return candidates

    async def get_candidate_by_id(self, candidate_id: int) -> Candidate:
        candidate = await self.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise NotFoundError(f"Candidate with id {candidate_id} not found!")
        return candidate

    async def search_candidates(
        self, name: str | None = None, skill_ids: list[int] | None = None
    ) -> list[Candidate]:
        """Filtered search; an empty result is a valid answer."""
        return await self.candidates.search(name, skill_ids)

    # ── create ────────────────────────────────────────────────────

    async def create_candidate(self, data: CreateCandidateRequest) -> Candidate:
        if await self.candidates.get_by_email(data.email) is not None:
            raise ConflictError(f"Candidate with email {data.email} already exists!")

        _check_birthday(data.birthday)

        if await self.candidates.get_by_phone_number(data.phone_number) is not None:
            raise ConflictError(
                f"Candidate with phone number {data.phone_number} already exists!"
            )

        candidate = Candidate(
            name=data.name,
            birthday=data.birthday,
            phone_number=data.phone_number,
            email=data.email,
        )
        await self.candidates.add(candidate)

        created = await self.candidates.get_by_id(candidate.id)
        if created is None:
            raise CandidateServiceError("An error occurred while creating the candidate!")

        logger.info("Created candidate %s", created.id)
        return created

    async def create_candidate_with_skills(
        self, data: CreateCandidateWithSkillsRequest
    ) -> Candidate:
        created = await self.create_candidate(
            CreateCandidateRequest(
                name=data.name,
                birthday=data.birthday,
                phone_number=data.phone_number,
                email=data.email,
            )
        )
        if not data.skill_ids:
            return created

        candidate_id = created.id
        try:
            await self.add_skills_to_candidate(candidate_id, data.skill_ids)
            candidate = await self.candidates.get_by_id(candidate_id)
            if candidate is None:
                raise CandidateServiceError("An error occurred while loading the candidate!")
            return candidate
        except Exception as e:
            logger.warning(
                "Attaching skills to new candidate %s failed, deleting it: %s", candidate_id, e
            )
            try:
                await self.candidates.delete_by_id(candidate_id)
            except Exception:
                logger.exception("Compensating delete of candidate %s failed", candidate_id)
                raise
            raise ConflictError(f"Failed to create candidate with skills: {e}") from e

    # ── update / delete ───────────────────────────────────────────

    async def update_candidate(
        self, candidate_id: int, data: UpdateCandidateRequest
    ) -> Candidate:
        """Apply the supplied fields; everything is validated before anything is set."""
        candidate = await self.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise NotFoundError(f"Candidate with id {candidate_id} not found!")

        changes = data.provided()

        if "birthday" in changes:
            _check_birthday(changes["birthday"])

        phone_number = changes.get("phone_number")
        if phone_number == candidate.phone_number:
            changes.pop("phone_number")
        elif phone_number is not None:
            if await self.candidates.exists_with_phone_number(phone_number, candidate_id):
                raise ConflictError(f"Phone number '{phone_number}' is already in use!")

        email = changes.get("email")
        if email == candidate.email:
            changes.pop("email")
        elif email is not None:
            if await self.candidates.exists_with_email(email, candidate_id):
                raise ConflictError(f"Email '{email}' is already in use!")

        if not changes:
            return candidate

        for field, value in changes.items():
            setattr(candidate, field, value)
        await self.candidates.save()

        logger.info("Updated candidate %s: %s", candidate_id, ", ".join(sorted(changes)))
        return candidate

    async def delete_candidate(self, candidate_id: int) -> None:
        candidate = await self.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise NotFoundError(f"Candidate with id {candidate_id} not found!")

        await self.candidates.delete(candidate)
        logger.info("Deleted candidate %s", candidate_id)

    # ── skills ────────────────────────────────────────────────────

    async def add_skills_to_candidate(self, candidate_id: int, skill_ids: list[int]) -> None:
        """Attach every listed skill or none of them."""
        candidate = await self.candidates.get_by_id(candidate_id)
        if candidate is None:
            raise NotFoundError(f"Candidate with id {candidate_id} not found!")

        skills = await self.skills.get_by_ids(skill_ids)
        if len(skills) != len(skill_ids):
            raise NotFoundError("One or more skills not found!")

        requested = set(skill_ids)
        if any(cs.skill_id in requested for cs in candidate.candidate_skills):
            raise ConflictError("Candidate already has one or more of the specified skills!")

        await self.candidate_skills.add_range(candidate_id, skills)
        logger.info("Added skills %s to candidate %s", sorted(requested), candidate_id)

    async def remove_skill_from_candidate(self, candidate_id: int, skill_id: int) -> None:
        candidate_skill = await self.candidate_skills.get(candidate_id, skill_id)
        if candidate_skill is None:
            raise NotFoundError(
                f"Candidate with id {candidate_id} doesn't have a skill {skill_id}"
            )

        await self.candidate_skills.remove(candidate_skill)
        logger.info("Removed skill %s from candidate %s", skill_id, candidate_id)
