import os

# Settings are read once at import time, so the test environment has to be
# in place before anything from hostelmate is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-hostelmate-suite"
os.environ["ENVIRONMENT"] = "testing"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hostelmate.core.security import get_jwt_manager, get_password_hasher
from hostelmate.db.session import get_db
from hostelmate.main import app
from hostelmate.models import Base
from hostelmate.models.base.enums import ComplaintCategory, Priority, UserRole
from hostelmate.repositories.complaint import ComplaintRepository
from hostelmate.repositories.user import UserRepository
from hostelmate.services.common import Principal

PASSWORD = "password123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ------------------------------------------------------------------ #
# Accounts
# ------------------------------------------------------------------ #
@pytest.fixture
def user_repository(db_session):
    return UserRepository(db_session)


@pytest.fixture
def complaint_repository(db_session):
    return ComplaintRepository(db_session)


@pytest.fixture
def make_user(user_repository):
    hasher = get_password_hasher()

    def _make_user(email, role=UserRole.USER, room_number="A101", name="Test User"):
        return user_repository.create_user(
            name=name,
            email=email,
            password_hash=hasher.hash(PASSWORD),
            role=role,
            room_number=room_number,
            phone_number="9876543211",
        )

    return _make_user


@pytest.fixture
def resident(make_user):
    return make_user("john@hostel.com", room_number="A101", name="John Doe")


@pytest.fixture
def other_resident(make_user):
    return make_user("jane@hostel.com", room_number="B205", name="Jane Smith")


@pytest.fixture
def admin(make_user):
    return make_user("admin@hostel.com", role=UserRole.ADMIN, room_number=None, name="Admin User")


@pytest.fixture
def resident_principal(resident):
    return Principal(user_id=resident.id, role=UserRole.USER)


@pytest.fixture
def other_principal(other_resident):
    return Principal(user_id=other_resident.id, role=UserRole.USER)


@pytest.fixture
def admin_principal(admin):
    return Principal(user_id=admin.id, role=UserRole.ADMIN)


def bearer(user):
    token = get_jwt_manager().create_access_token(
        user.id,
        additional_claims={"role": user.role.value},
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def resident_headers(resident):
    return bearer(resident)


@pytest.fixture
def other_headers(other_resident):
    return bearer(other_resident)


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)


# ------------------------------------------------------------------ #
# Complaints
# ------------------------------------------------------------------ #
@pytest.fixture
def make_complaint(complaint_repository):
    def _make_complaint(
        user,
        title="Fan not working!",
        description="The ceiling fan stopped working last night.",
        category=ComplaintCategory.ELECTRICAL,
        subcategory="Fan",
        priority=Priority.MEDIUM,
        room_number=None,
    ):
        return complaint_repository.create_complaint(
            user_id=user.id,
            room_number=room_number or user.room_number,
            title=title,
            description=description,
            category=category,
            subcategory=subcategory,
            priority=priority,
        )

    return _make_complaint
