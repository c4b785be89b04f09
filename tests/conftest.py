import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from softflow.database.database import Base, get_db
from softflow.main import app
from softflow.models.user import User
from softflow.utils.security import create_access_token, get_password_hash

PASSWORD = "password123"
PASSWORD_HASH = get_password_hash(PASSWORD)

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def auth_headers(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.username})}"}


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db):
    def _make(username, is_admin=False, is_blocked=False, email=None):
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password_hash=PASSWORD_HASH,
            is_admin=is_admin,
            is_blocked=is_blocked,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make


@pytest.fixture()
def admin(make_user):
    return make_user("admin", is_admin=True)


@pytest.fixture()
def member(make_user):
    return make_user("alice")


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture()
def member_headers(member):
    return auth_headers(member)


@pytest.fixture()
def project_payload(member):
    return {
        "user_id": member.id,
        "title": "Inventory portal",
        "description": "Internal stock tracking",
        "service_type": "Backend Development",
    }
