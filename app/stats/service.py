"""Admin dashboard statistics.

Three independent reads; a funding written in between may or may not be
counted.
"""

from dataclasses import dataclass

from app.donation.repository import DonationRequestRepository
from app.funding.repository import FundingRepository
from app.user.repository import UserRepository


@dataclass(frozen=True)
class Stats:
    users: int
    requests: int
    total_funds: float


class StatsAggregator:
    def __init__(
        self,
        users: UserRepository,
        requests: DonationRequestRepository,
        fundings: FundingRepository,
    ):
        self._users = users
        self._requests = requests
        self._fundings = fundings

    def compute_stats(self) -> Stats:
        return Stats(
            users=self._users.count(),
            requests=self._requests.count(),
            total_funds=self._fundings.total(),
        )
