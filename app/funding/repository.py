"""Funding persistence. Insert and read only."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlmodel import Session, col, select

from app.funding.models import Funding


class FundingRepository:
    def __init__(self, session: Session):
        self._session = session

    def add(self, funding: Funding) -> Funding:
        self._session.add(funding)
        self._session.commit()
        self._session.refresh(funding)
        return funding

    def list(self, donor_email: str | None = None) -> Sequence[Funding]:
        statement = select(Funding)
        if donor_email is not None:
            statement = statement.where(Funding.donor_email == donor_email)
        statement = statement.order_by(col(Funding.created_at).desc())
        return self._session.exec(statement).all()

    def total(self) -> float:
        total = self._session.exec(
            select(func.coalesce(func.sum(Funding.amount), 0.0))
        ).one()
        return float(total)
