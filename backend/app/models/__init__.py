"""SQLAlchemy ORM models.

All models are exported from this module for convenient imports:
    from app.models import User, Candidate, CandidateOnboardingStep

Models are organized by domain:
- user.py: User (Tier 0)
- candidate.py: Candidate (Tier 1), CandidateOnboardingStep (Tier 2)
"""

from app.models.base import Base, TimestampMixin
from app.models.candidate import Candidate, CandidateOnboardingStep
from app.models.user import User

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Tier 0
    "User",
    # Tier 1
    "Candidate",
    # Tier 2
    "CandidateOnboardingStep",
]
