"""Request-scoped dependencies for the onboarding endpoints.

The caller's identity comes from DEFAULT_USER_ID and is handed to each
endpoint explicitly through CurrentUserId or TenantSession.
"""

import uuid
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.errors import UnauthorizedError
from app.core.tenant_session import TenantScopedSession


def get_current_user_id() -> uuid.UUID:
    """Return the configured user id.

    Raises:
        UnauthorizedError: DEFAULT_USER_ID is not set.
    """
    if settings.default_user_id is None:
        raise UnauthorizedError()
    return settings.default_user_id


CurrentUserId = Annotated[uuid.UUID, Depends(get_current_user_id)]
DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_tenant_session(user_id: CurrentUserId, db: DbSession) -> TenantScopedSession:
    """Bind the request's database session to the current user."""
    return TenantScopedSession(db, user_id)


TenantSession = Annotated[TenantScopedSession, Depends(get_tenant_session)]
