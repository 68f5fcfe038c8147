"""Reconcile onboarding progress for every candidate.

Standalone script. Run after changing the onboarding step registry so
existing candidates get rows for new steps and their
onboarding_completed flag is recomputed.

Usage:
    cd backend && python -m scripts.reconcile_onboarding

Per candidate (sequentially, one transaction for the whole run):
    1. Upsert 'pending' rows for registry steps the candidate lacks
    2. Recompute onboarding_completed from all step statuses
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.services.onboarding_reconciliation import ReconciliationStats, reconcile_all

logger = logging.getLogger(__name__)


async def run_reconciliation(session: AsyncSession) -> ReconciliationStats:
    """Reconcile all candidates in one session.

    The caller commits. A QueryError from any candidate aborts the run
    and leaves the transaction to be rolled back.

    Args:
        session: Active async database session.

    Returns:
        ReconciliationStats for the run.
    """
    stats = await reconcile_all(session)
    for candidate_id in stats.skipped_candidate_ids:
        logger.warning("Skipped candidate %s (deleted during run)", candidate_id)
    return stats


async def main() -> None:
    """CLI entry point: run reconciliation against the configured database."""
    from app.core.config import settings
    from app.core.database import dispose_engine, get_session_factory

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        async with get_session_factory()() as session:
            result = await run_reconciliation(session)
            await session.commit()
    finally:
        await dispose_engine()

    logger.info("Final stats: %s", result)


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
