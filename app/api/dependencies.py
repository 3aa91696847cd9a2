"""FastAPI dependencies for the candidate routes."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.services.candidate_service import CandidateService


async def get_candidate_service(db: AsyncSession = Depends(get_db)) -> CandidateService:
    """Build a CandidateService bound to the request's database session."""
    return CandidateService(db)
