"""Admin statistics schemas."""

from sqlmodel import SQLModel


class StatsRead(SQLModel):
    users: int
    requests: int
    total_funds: float
