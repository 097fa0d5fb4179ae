"""Admin statistics dependencies."""

from typing import Annotated

from fastapi import Depends

from app.auth.dependencies import get_user_repository
from app.donation.dependencies import get_donation_request_repository
from app.donation.repository import DonationRequestRepository
from app.funding.dependencies import get_funding_repository
from app.funding.repository import FundingRepository
from app.stats.service import StatsAggregator
from app.user.repository import UserRepository


def get_stats_aggregator(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    requests: Annotated[
        DonationRequestRepository, Depends(get_donation_request_repository)
    ],
    fundings: Annotated[FundingRepository, Depends(get_funding_repository)],
) -> StatsAggregator:
    return StatsAggregator(users, requests, fundings)


StatsAggregatorDep = Annotated[StatsAggregator, Depends(get_stats_aggregator)]
