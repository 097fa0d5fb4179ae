"""Database engine and per-request sessions.

The store holds three tables: users, donation_requests and fundings.
"""

from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from app.core.settings import get_settings


def _connect_args(database_url: str) -> dict[str, object]:
    # Request handlers run on a thread pool; SQLite connections must be
    # allowed to cross threads.
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


_database_url = get_settings().database_url
engine = create_engine(_database_url, connect_args=_connect_args(_database_url))


def init_db() -> None:
    """Create missing tables. Existing tables are left untouched."""
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
