"""
Fixtures for API tests against an in-memory SQLite database.
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from timekeeper.domain.models.user import User, UserRole
from timekeeper.infrastructure.auth.jwt_handler import JWTHandler
from timekeeper.infrastructure.db.database import get_db
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from timekeeper.main import app


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(session_factory):
    """Store a user directly and return it."""
    def _create(username: str, role: UserRole = UserRole.EMPLOYEE, **kwargs) -> User:
        session = session_factory()
        try:
            user = SQLAlchemyUserRepository(session).save(User(username=username, role=role, **kwargs))
            session.commit()
            return user
        finally:
            session.close()
    return _create


@pytest.fixture
def auth_headers():
    """Bearer headers for a user."""
    handler = JWTHandler()

    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {handler.create_access_token(user.id)}"}
    return _headers


@pytest.fixture
def employee(create_user):
    return create_user("anna", first_name="Anna", last_name="Schmidt", hourly_rate=Decimal("20.00"))


@pytest.fixture
def admin(create_user):
    return create_user("chefin", role=UserRole.ADMIN, first_name="Clara")
