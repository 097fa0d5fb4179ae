"""Funding models.

Append-only ledger rows; there is no update or delete path.
"""

import uuid

from sqlmodel import Field, SQLModel

from app.core.mixins import CreatedAtMixin


class Funding(CreatedAtMixin, SQLModel, table=True):
    __tablename__: str = "fundings"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    donor_email: str = Field(index=True, max_length=255)
    donor_name: str | None = Field(default=None, max_length=100)
    amount: float
    transaction_id: str | None = Field(default=None, max_length=255)
