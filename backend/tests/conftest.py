import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SESSION_TOKEN_SALT", "test-salt")

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from shipwrecked import models  # noqa: F401 - registers tables
from shipwrecked.constants import UserRole
from shipwrecked.database import Base, get_db, get_session_factory
from shipwrecked.main import app as shipwrecked_app
from shipwrecked.models import AuthSession, User
from shipwrecked.utils.hashing import hash_session_token


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite so worker threads can open their own connections."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'shipwrecked.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory) -> Session:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(session_factory) -> FastAPI:
    """The real application wired to the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    shipwrecked_app.dependency_overrides[get_db] = override_get_db
    shipwrecked_app.dependency_overrides[get_session_factory] = lambda: session_factory
    yield shipwrecked_app
    shipwrecked_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def make_user(db: Session, **fields) -> User:
    fields.setdefault("email", f"{uuid4().hex[:8]}@example.com")
    fields.setdefault("name", "Sailor")
    user = User(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_session_token(
    db: Session,
    user_id: Optional[str],
    expires_in: timedelta = timedelta(days=1),
) -> str:
    # Sessions are issued by the sign-in provider; mint one the same way
    token = f"swk_{secrets.token_urlsafe(32)}"
    db.add(
        AuthSession(
            token_hash=hash_session_token(token),
            user_id=user_id,
            expires_at=datetime.now(timezone.utc) + expires_in,
        )
    )
    db.commit()
    return token


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(db: Session) -> User:
    return make_user(db, email="sailor@example.com")


@pytest.fixture
def user_headers(db: Session, user: User) -> dict:
    return bearer(make_session_token(db, user.id))


@pytest.fixture
def admin(db: Session) -> User:
    return make_user(db, email="captain@example.com", role=UserRole.ADMIN)


@pytest.fixture
def admin_headers(db: Session, admin: User) -> dict:
    return bearer(make_session_token(db, admin.id))
