"""
Shared commit handling for repositories.

Each mutating repository call commits on its own; callers never get a
transaction spanning several calls.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self, conflict_message: str = "Record violates a uniqueness constraint") -> None:
        """Commit the session, rolling back on any storage error.

        Constraint violations surface as ConflictError; everything else is
        re-raised unchanged.
        """
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning("Integrity error on commit: %s", e.orig)
            raise ConflictError(conflict_message) from e
        except SQLAlchemyError:
            await self.db.rollback()
            raise
