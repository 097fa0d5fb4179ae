"""User domain dependencies."""

from typing import Annotated

from fastapi import Depends

from app.auth.dependencies import get_user_repository
from app.user.repository import UserRepository
from app.user.service import UserDirectory


def get_user_directory(
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserDirectory:
    return UserDirectory(users)


UserDirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]
