"""User-scoped database session wrapper.

TenantScopedSession carries the current user's id alongside the
AsyncSession. Code that needs "the current user" receives one of these
explicitly instead of reading a process-wide cell, so the database
client stays a plain dependency with no identity state of its own.

Usage:
    scoped = TenantScopedSession(db, user_id)
    candidate = await scoped.get_candidate()
    done = await scoped.is_onboarding_complete()
"""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError
from app.repositories.candidate_repository import (
    CandidateOnboardingFlag,
    CandidateRepository,
)
from app.services.onboarding_reconciliation import (
    OnboardingStatus,
    is_onboarding_complete,
    reconcile_onboarding,
)


class TenantScopedSession:
    """Database session bound to a single user.

    SECURITY: Do not access ``_db`` directly from outside this class.
    All external callers should use the scoped methods which always
    filter by the user_id fixed at construction.
    """

    __slots__ = ("_db", "_user_id")

    def __init__(self, db: AsyncSession, user_id: uuid.UUID) -> None:
        """Initialize with a database session and user ID.

        Args:
            db: The async database session.
            user_id: The current user's UUID.
        """
        self._db = db
        self._user_id = user_id

    @property
    def user_id(self) -> uuid.UUID:
        """The current user's UUID (read-only)."""
        return self._user_id

    async def get_candidate(self) -> CandidateOnboardingFlag:
        """Fetch the user's candidate.

        Returns:
            The candidate's id and stored onboarding flag.

        Raises:
            NotFoundError: If the user has no candidate.
            QueryError: If the lookup fails.
        """
        candidate = await CandidateRepository.get_by_user_id(self._db, self._user_id)
        if candidate is None:
            raise NotFoundError("Candidate")
        return candidate

    async def reconcile_onboarding(self) -> OnboardingStatus | None:
        """Reconcile the user's onboarding steps.

        Returns:
            OnboardingStatus, or None if the user has no candidate.
        """
        return await reconcile_onboarding(self._db, self._user_id)

    async def is_onboarding_complete(self) -> bool:
        """Reconcile and report whether the user finished onboarding."""
        return await is_onboarding_complete(self._db, self._user_id)
