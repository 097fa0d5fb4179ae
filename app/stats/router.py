"""Admin statistics router."""

from fastapi import APIRouter, Depends

from app.auth.dependencies import require_admin
from app.core.constants import CommonResponses, Routes
from app.stats.dependencies import StatsAggregatorDep
from app.stats.schemas import StatsRead

router = APIRouter(
    prefix=Routes.STATS.prefix,
    tags=[Routes.STATS.tag],
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.FORBIDDEN},
)


@router.get(
    "/admin-stats", response_model=StatsRead, dependencies=[Depends(require_admin)]
)
async def admin_stats(aggregator: StatsAggregatorDep):
    """User count, request count and total funds. Admin only."""
    stats = aggregator.compute_stats()
    return StatsRead(
        users=stats.users, requests=stats.requests, total_funds=stats.total_funds
    )
