import inspect
import os
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time by app.db.engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("LOG_REQUESTS", "false")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

from app.auth.guard import AuthorizationGuard  # noqa: E402
from app.auth.service import TokenService, get_token_service  # noqa: E402
from app.core.settings import Settings, get_settings  # noqa: E402
from app.db.engine import get_session  # noqa: E402
from app.funding.payments import StripePaymentGateway, get_payment_gateway  # noqa: E402
from app.main import app  # noqa: E402
from app.media.service import ImgbbImageHost, get_image_host  # noqa: E402
from app.user.models import User, UserRole, UserStatus  # noqa: E402
from app.user.repository import UserRepository  # noqa: E402

TEST_SECRET = "test-secret-key-with-at-least-32-bytes!"


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="users")
def users_fixture(session: Session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture(name="guard")
def guard_fixture(users: UserRepository) -> AuthorizationGuard:
    return AuthorizationGuard(users)


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session) -> Callable[..., User]:
    """Factory that inserts a user with the given role and status."""

    def _make_user(
        email: str,
        role: UserRole = UserRole.donor,
        status: UserStatus = UserStatus.active,
        name: str = "",
    ) -> User:
        user = User(
            email=email,
            name=name or email.split("@")[0],
            role=role,
            status=status,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="donor")
def donor_fixture(make_user) -> User:
    return make_user("alice@x.com", name="Alice")


@pytest.fixture(name="other_donor")
def other_donor_fixture(make_user) -> User:
    return make_user("carol@x.com", name="Carol")


@pytest.fixture(name="volunteer")
def volunteer_fixture(make_user) -> User:
    return make_user("vic@x.com", role=UserRole.volunteer, name="Vic")


@pytest.fixture(name="admin")
def admin_fixture(make_user) -> User:
    return make_user("root@x.com", role=UserRole.admin, name="Root")


@pytest.fixture(name="blocked_user")
def blocked_user_fixture(make_user) -> User:
    return make_user("bob@x.com", status=UserStatus.blocked, name="Bob")


@pytest.fixture(name="token_service")
def token_service_fixture() -> TokenService:
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(
    token_service: TokenService,
) -> Callable[[str], dict[str, str]]:
    """Build an Authorization header carrying a valid credential for ``email``."""

    def _auth_headers(email: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue(email).token}"}

    return _auth_headers


@pytest.fixture(name="mock_payment_gateway")
def mock_payment_gateway_fixture():
    gateway = MagicMock(spec=StripePaymentGateway)
    gateway.create_payment_intent = AsyncMock(return_value="pi_123_secret_456")
    return gateway


@pytest.fixture(name="mock_image_host")
def mock_image_host_fixture():
    image_host = MagicMock(spec=ImgbbImageHost)
    image_host.upload = AsyncMock(return_value="https://i.ibb.co/abc/image.png")
    return image_host


@pytest.fixture(name="mock_settings")
def mock_settings_fixture():
    return Settings(
        env_name="test",
        database_url="sqlite://",
        jwt_secret_key=TEST_SECRET,
        stripe_secret_key="sk_test_123",
        imgbb_api_key="imgbb-test-key",
    )


@pytest.fixture(name="client")
def client_fixture(
    session: Session,
    token_service: TokenService,
    mock_payment_gateway: MagicMock,
    mock_image_host: MagicMock,
    mock_settings: Settings,
):
    """Create a test client with overridden dependencies.

    Authentication is real: requests carry JWTs from ``auth_headers``.
    """
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_payment_gateway] = lambda: mock_payment_gateway
    app.dependency_overrides[get_image_host] = lambda: mock_image_host
    app.dependency_overrides[get_settings] = lambda: mock_settings

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
