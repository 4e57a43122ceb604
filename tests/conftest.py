from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vahub.core.rate_limiter import rate_limiter
from vahub.core.security import create_access_token
from vahub.database import Base, enable_sqlite_foreign_keys, get_db
from vahub.dependencies import get_current_active_user, get_current_admin, get_current_user
from vahub.main import app
from vahub.models.enums import JobStatus, UserRole, UserStatus
from vahub.repos import job_repo, user_repo


@dataclass
class StubUser:
    id: str = "user-1"
    name: str = "Stub User"
    email: str = "user@example.com"
    role: str = UserRole.JOB_SEEKER.value
    status: str = UserStatus.ACTIVE.value
    subscription_status: str = "none"
    password_hash: str = "hashed-password"
    created_at: object | None = None


@pytest.fixture(autouse=True)
def _reset_rate_limiter():
    rate_limiter.reset()
    yield
    rate_limiter.reset()


@pytest.fixture
def stub_user() -> StubUser:
    return StubUser()


@pytest.fixture
def admin_user() -> StubUser:
    return StubUser(id="admin-1", name="Admin", email="admin@example.com", role=UserRole.ADMIN.value)


@pytest.fixture
def employer_user() -> StubUser:
    return StubUser(id="emp-1", name="Employer", email="boss@example.com", role=UserRole.EMPLOYER.value)


def _override_with(user):
    def _db_override():
        yield object()

    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: user
    app.dependency_overrides[get_current_active_user] = lambda: user


@pytest.fixture
def client(stub_user: StubUser):
    _override_with(stub_user)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def employer_client(employer_user: StubUser):
    _override_with(employer_user)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(admin_user: StubUser):
    _override_with(admin_user)
    app.dependency_overrides[get_current_admin] = lambda: admin_user
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---- Real database (in-memory SQLite) ----


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api(session_factory):
    """TestClient wired to the in-memory database with real authentication."""

    def _db_override():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}

    return _headers


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(
        role=UserRole.JOB_SEEKER,
        *,
        name=None,
        email=None,
        status=UserStatus.ACTIVE,
        password="password123",
        company_name=None,
    ):
        counter["n"] += 1
        n = counter["n"]
        return user_repo.create(
            db,
            name or f"User {n}",
            email or f"user{n}@example.com",
            password,
            role,
            status=status,
            company_name=company_name,
        )

    return _make


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN, name="Root Admin", email="root@vahub.com")


@pytest.fixture
def employer(make_user):
    return make_user(UserRole.EMPLOYER, name="Acme Hiring", email="hiring@acme.com", company_name="Acme Inc")


@pytest.fixture
def make_job(db, employer):
    def _make(title="Virtual Assistant", *, status=JobStatus.PENDING, skills=None, owner=None, **kwargs):
        return job_repo.create(
            db,
            (owner or employer).id,
            title,
            f"{title} description",
            skills=skills,
            status=status,
            **kwargs,
        )

    return _make


@pytest.fixture(autouse=True)
def _fast_password_hashing(monkeypatch):
    """Low-cost bcrypt for fixtures; verify_password accepts any cost factor."""
    import bcrypt

    from vahub.core import security

    monkeypatch.setattr(
        user_repo,
        "hash_password",
        lambda p: bcrypt.hashpw(security._prehash(p), bcrypt.gensalt(rounds=4)).decode(),
    )
