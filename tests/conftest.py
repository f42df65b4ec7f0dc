import inspect
import os
from unittest.mock import MagicMock

# Required settings must exist before app modules build the engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin-password")
os.environ.setdefault("LOG_REQUESTS", "false")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import app.models  # noqa: E402, F401
from app.auth.dependencies import get_current_user  # noqa: E402
from app.auth.security import create_session_token, hash_password  # noqa: E402
from app.auth.service import (  # noqa: E402
    FirebaseAuthService,
    TokenClaims,
    get_firebase_auth_service,
)
from app.core.settings import Settings, get_settings  # noqa: E402
from app.db.engine import enable_sqlite_foreign_keys, get_session  # noqa: E402
from app.main import app  # noqa: E402
from app.place.models import City, Place, PlaceType  # noqa: E402
from app.user.models import User  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"


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
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session):
    """Create a password user in the database."""
    user = User(
        email="test@example.com",
        password_hash=hash_password(TEST_PASSWORD),
        name="Test User",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="other_user")
def other_user_fixture(session: Session):
    """Create a second user who owns nothing of test_user's."""
    user = User(
        email="other@example.com",
        password_hash=hash_password("other-password-123"),
        name="Other User",
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="make_place")
def make_place_fixture(session: Session):
    """Factory inserting a place row directly, bypassing the service."""

    def _make_place(
        user: User,
        *,
        name: str = "Ben Thanh Market",
        city: City = City.ho_chi_minh_city,
        type: PlaceType = PlaceType.market,
        is_visited: bool = False,
        **fields,
    ) -> Place:
        place = Place(
            user_id=user.id,
            name=name,
            address=fields.pop("address", "Le Loi, District 1"),
            city=city,
            type=type,
            is_visited=is_visited,
            **fields,
        )
        session.add(place)
        session.commit()
        session.refresh(place)
        return place

    return _make_place


@pytest.fixture(name="mock_firebase_auth")
def mock_firebase_auth_fixture():
    """Create a mock FirebaseAuthService."""
    mock_service = MagicMock(spec=FirebaseAuthService)
    mock_service.verify_id_token.return_value = TokenClaims(
        uid="google-uid-123", email="google@example.com", name="Google User"
    )
    return mock_service


@pytest.fixture(name="test_settings")
def test_settings_fixture():
    """Create settings isolated from the process environment."""
    return Settings(
        env_name="test",
        database_url="sqlite://",
        session_secret_key=os.environ["SESSION_SECRET_KEY"],
        admin_username="admin",
        admin_password="admin-password",
        session_expires_days=5,
    )


@pytest.fixture(name="session_token")
def session_token_fixture(test_user: User, test_settings: Settings):
    """A valid session token for test_user."""
    return create_session_token(
        test_user.id,
        test_settings.session_secret_key,
        test_settings.session_expires_in,
    )


@pytest.fixture(name="client")
def client_fixture(
    session: Session,
    test_user: User,
    mock_firebase_auth: MagicMock,
    test_settings: Settings,
):
    """Create a test client authenticated as test_user."""
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_current_user] = lambda: test_user
    app.dependency_overrides[get_firebase_auth_service] = lambda: mock_firebase_auth
    app.dependency_overrides[get_settings] = lambda: test_settings

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="unauthenticated_client")
def unauthenticated_client_fixture(
    session: Session,
    mock_firebase_auth: MagicMock,
    test_settings: Settings,
):
    """Create a test client without auth override (real token checks)."""
    app.dependency_overrides[get_session] = lambda: session
    app.dependency_overrides[get_firebase_auth_service] = lambda: mock_firebase_auth
    app.dependency_overrides[get_settings] = lambda: test_settings

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
