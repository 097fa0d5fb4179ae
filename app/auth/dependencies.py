"""Auth domain dependencies.

Authentication and authorization dependencies for FastAPI routes. The
pipeline is always the same: bearer credential -> ``Identity`` -> guard
checks -> handler.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.exceptions import AuthenticationError
from app.auth.guard import AuthorizationGuard
from app.auth.service import Identity, IdentityVerifier, TokenService, get_token_service
from app.core.deps import SessionDep
from app.user.models import UserRole
from app.user.repository import UserRepository

security = HTTPBearer(auto_error=False)


def get_identity(
    verifier: Annotated[TokenService, Depends(get_token_service)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> Identity:
    """Verify the bearer credential and return the caller's identity.

    Raises:
        AuthenticationError: If the credential is missing or fails
            verification. The response is the same in both cases.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    return authenticate(verifier, credentials.credentials)


def authenticate(verifier: IdentityVerifier, token: str) -> Identity:
    try:
        return verifier.verify(token)
    except AuthenticationError as e:
        raise AuthenticationError() from e


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_guard(
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> AuthorizationGuard:
    return AuthorizationGuard(users)


# Type aliases for dependency injection
IdentityDep = Annotated[Identity, Depends(get_identity)]
GuardDep = Annotated[AuthorizationGuard, Depends(get_guard)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def require_auth(_identity: IdentityDep) -> None:
    """Require authentication without injecting the identity.

    Use as a router-level dependency when all routes require auth:
        router = APIRouter(dependencies=[Depends(require_auth)])
    """


def get_admin_identity(identity: IdentityDep, guard: GuardDep) -> Identity:
    return guard.require_role(identity, {UserRole.admin})


AdminIdentityDep = Annotated[Identity, Depends(get_admin_identity)]


def require_admin(_identity: AdminIdentityDep) -> None:
    """Require admin privileges without injecting the identity.

    Use as a router-level or endpoint-level dependency:
        @router.get("/", dependencies=[Depends(require_admin)])
    """
