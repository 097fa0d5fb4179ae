"""User persistence.

Thin repository over the ``users`` table. Components receive an instance
instead of touching a module-level table handle.
"""

import uuid
from collections.abc import Sequence

from sqlalchemy import func
from sqlmodel import Session, select

from app.user.models import User, UserStatus


class UserRepository:
    def __init__(self, session: Session):
        self._session = session

    def get_by_email(self, email: str) -> User | None:
        return self._session.exec(select(User).where(User.email == email)).first()

    def get_by_id(self, user_id: uuid.UUID) -> User | None:
        return self._session.get(User, user_id)

    def list(self, status: UserStatus | None = None) -> Sequence[User]:
        statement = select(User)
        if status is not None:
            statement = statement.where(User.status == status)
        return self._session.exec(statement).all()

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(User)).one()

    def save(self, user: User) -> User:
        self._session.add(user)
        self._session.commit()
        self._session.refresh(user)
        return user

    def rollback(self) -> None:
        self._session.rollback()
