"""API v1 router aggregator.

URL structure with /api/v1 prefix. All v1 endpoint routers are included here.
"""

from fastapi import APIRouter

from app.api.v1 import onboarding

router = APIRouter()

# =============================================================================
# Onboarding
# =============================================================================

router.include_router(onboarding.router, prefix="/onboarding", tags=["onboarding"])
