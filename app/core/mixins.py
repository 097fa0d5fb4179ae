"""Timestamp columns shared by the table models.

Values are UTC with whole seconds. SQLite hands them back naive, so the read
schemas declare them as ``UTCDatetime``, which attaches UTC before serializing.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import PlainSerializer
from sqlalchemy import text
from sqlmodel import Field


def utc_now() -> datetime:
    return datetime.now(UTC).replace(microsecond=0)


def format_utc(value: datetime) -> str:
    """Format as ISO 8601 in UTC with a ``Z`` suffix and whole seconds.

    Naive values are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.replace(tzinfo=UTC, microsecond=0).isoformat().replace(
        "+00:00", "Z"
    )


UTCDatetime = Annotated[datetime, PlainSerializer(format_utc, return_type=str)]


class CreatedAtMixin:
    """``created_at`` only, for append-only ledgers such as fundings."""

    created_at: datetime = Field(
        default_factory=utc_now,
        index=True,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )


class TimestampMixin(CreatedAtMixin):
    """Adds ``updated_at``, refreshed by SQLAlchemy on every UPDATE.

    Put it first in the bases::

        class DonationRequest(TimestampMixin, SQLModel, table=True): ...
    """

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={
            "server_default": text("CURRENT_TIMESTAMP"),
            "onupdate": utc_now,
        },
    )
