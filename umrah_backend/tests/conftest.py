"""
Centralized Test Configuration.
"""

import pytest
from datetime import date
from decimal import Decimal
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import Pool, StaticPool

from umrah_backend.app.main import app
from umrah_backend.app.db.session import get_db, Base
from umrah_backend.app.core.jwt import create_access_token
from umrah_backend.app.core.security import get_password_hash
from umrah_backend.app.models.user import User
from umrah_backend.app.models.enums import UserRole
from umrah_backend.app.models.pilgrim import Pilgrim
from umrah_backend.app.models.package_type import PackageType
from umrah_backend.app.models.package import Package
from umrah_backend.app.models.package_enums import PackageKind

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@event.listens_for(Pool, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable foreign key constraints for SQLite."""
    if 'sqlite' in str(type(dbapi_conn)).lower():
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


@pytest.fixture(scope="session", autouse=True)
def apply_overrides():
    """Route every request's session to the test database."""

    async def override_get_db():
        async with TestingSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides = {}


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables before each test function and drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Shared session for fixture data creation
@pytest.fixture
async def db_session():
    async with TestingSessionLocal() as session:
        yield session


async def _create_user(db_session, username: str, role: UserRole, password: str) -> User:
    user = User(
        email=f"{username}@test.com",
        username=username,
        hashed_password=get_password_hash(password),
        role=role,
        is_active=True,
    )
    db_session.add(user)
    await db_session.commit()
    return user


def _headers_for(user: User) -> dict:
    token = create_access_token(data={"sub": user.username, "user_id": user.id, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def admin_user(db_session):
    return await _create_user(db_session, "admin", UserRole.ADMIN, "admin123")


@pytest.fixture
async def owner_user(db_session):
    return await _create_user(db_session, "owner", UserRole.OWNER, "owner123")


@pytest.fixture
def admin_headers(admin_user):
    return _headers_for(admin_user)


@pytest.fixture
def owner_headers(owner_user):
    return _headers_for(owner_user)


@pytest.fixture
async def package_type(db_session):
    package_type = PackageType(type_name="Umrah Reguler", is_active=True)
    db_session.add(package_type)
    await db_session.commit()
    return package_type


@pytest.fixture
async def package(db_session, package_type):
    package = Package(
        package_name="Umrah Ramadhan 12 Hari",
        package_kind=PackageKind.UMRAH,
        package_type_id=package_type.id,
        duration_days=12,
        max_participants=45,
        departure_date=date(2024, 3, 10),
        return_date=date(2024, 3, 22),
        base_price=Decimal("2000.00"),
        is_active=True,
    )
    db_session.add(package)
    await db_session.commit()
    return package


@pytest.fixture
async def pilgrim(db_session):
    pilgrim = Pilgrim(
        full_name="Ahmad Fauzi",
        email="ahmad@example.com",
        phone="+62811000111",
        passport_number="A1234567",
        passport_expiry=date(2030, 1, 1),
        date_of_birth=date(1980, 5, 17),
        address="Jl. Merdeka 1, Jakarta",
        emergency_contact_name="Siti Aminah",
        emergency_contact_phone="+62811000222",
    )
    db_session.add(pilgrim)
    await db_session.commit()
    return pilgrim
