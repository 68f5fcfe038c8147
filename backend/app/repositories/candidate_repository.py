"""Repository for the candidates table.

Reads are projected to the columns onboarding reconciliation needs;
the only write is the onboarding_completed flag (plus updated_at).
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import QueryError
from app.models.candidate import Candidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateOnboardingFlag:
    """Projection of a candidate row: id and onboarding_completed only."""

    id: uuid.UUID
    onboarding_completed: bool


class CandidateRepository:
    """Stateless repository for Candidate table operations.

    All methods are static. There is no instance state. Pass an AsyncSession
    for every call so the caller controls transaction boundaries.

    Every SQLAlchemyError is logged and re-raised as QueryError.
    """

    @staticmethod
    async def get_by_user_id(
        db: AsyncSession, user_id: uuid.UUID
    ) -> CandidateOnboardingFlag | None:
        """Fetch the candidate linked to a user account.

        Args:
            db: Async database session.
            user_id: Owning user's UUID.

        Returns:
            CandidateOnboardingFlag if the user has a candidate, None otherwise.

        Raises:
            QueryError: If the select fails.
        """
        stmt = select(Candidate.id, Candidate.onboarding_completed).where(
            Candidate.user_id == user_id
        )
        try:
            result = await db.execute(stmt)
            row = result.one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Candidate lookup failed for user %s: %s", user_id, exc)
            raise QueryError("select candidates") from exc

        if row is None:
            return None
        return CandidateOnboardingFlag(
            id=row.id, onboarding_completed=row.onboarding_completed
        )

    @staticmethod
    async def list_ids(db: AsyncSession) -> list[uuid.UUID]:
        """Fetch every candidate id, oldest first.

        Args:
            db: Async database session.

        Returns:
            Candidate UUIDs ordered by created_at.

        Raises:
            QueryError: If the select fails.
        """
        stmt = select(Candidate.id).order_by(Candidate.created_at.asc())
        try:
            result = await db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            logger.error("Candidate id listing failed: %s", exc)
            raise QueryError("select candidates") from exc

    @staticmethod
    async def get_user_id(
        db: AsyncSession, candidate_id: uuid.UUID
    ) -> uuid.UUID | None:
        """Fetch the owning user id for a candidate.

        Args:
            db: Async database session.
            candidate_id: Candidate UUID.

        Returns:
            The user UUID, or None if the candidate no longer exists.

        Raises:
            QueryError: If the select fails.
        """
        stmt = select(Candidate.user_id).where(Candidate.id == candidate_id)
        try:
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("Candidate owner lookup failed for %s: %s", candidate_id, exc)
            raise QueryError("select candidates") from exc

    @staticmethod
    async def set_onboarding_completed(
        db: AsyncSession,
        candidate_id: uuid.UUID,
        *,
        completed: bool,
    ) -> None:
        """Write the onboarding_completed flag and refresh updated_at.

        Args:
            db: Async database session.
            candidate_id: Candidate UUID to update.
            completed: New flag value.

        Raises:
            QueryError: If the update fails.
        """
        stmt = (
            update(Candidate)
            .where(Candidate.id == candidate_id)
            .values(onboarding_completed=completed, updated_at=datetime.now(UTC))
        )
        try:
            await db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(
                "Onboarding flag update failed for candidate %s: %s",
                candidate_id,
                exc,
            )
            raise QueryError("update candidates") from exc
