"""User account. Owns at most one Candidate."""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.candidate import Candidate

_DEFAULT_UUID = text("gen_random_uuid()")


class User(Base, TimestampMixin):
    """User account.

    Attributes:
        id: UUID primary key.
        email: Unique email address.
        name: Display name.
        created_at: Account creation timestamp (from TimestampMixin).
        updated_at: Last modification timestamp (from TimestampMixin).
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        server_default=_DEFAULT_UUID,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
    )
    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    # Relationships
    candidate: Mapped["Candidate | None"] = relationship(
        "Candidate",
        back_populates="user",
        cascade="all, delete-orphan",
        uselist=False,
    )
