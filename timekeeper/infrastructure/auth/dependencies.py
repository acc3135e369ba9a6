"""
Authentication dependencies for FastAPI.
Resolves the bearer token to the active user making the request.
"""

from typing import Optional, Annotated
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.domain.models.base import AuthenticationError, AuthorizationError
from timekeeper.infrastructure.auth.jwt_handler import JWTHandler
from timekeeper.infrastructure.db.database import get_db
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


# Security scheme; missing credentials are reported as a domain error
security = HTTPBearer(auto_error=False)

# Global instance
jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


def get_user_repository(session: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> str:
    """
    FastAPI dependency to get the authenticated user ID from the token.

    Raises:
        AuthenticationError: If no valid bearer token was sent
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    return handler.get_user_id(credentials.credentials)


def get_current_user(
    user_id: Annotated[str, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
) -> CurrentUser:
    """
    FastAPI dependency to get the current user.
    Unknown and deactivated users are treated as unauthenticated.
    """
    user = repository.get_by_id(user_id)
    if not user or not user.is_active:
        raise AuthenticationError("User not found or inactive")

    return CurrentUser(user)


def require_admin(current_user: Annotated[CurrentUser, Depends(get_current_user)]) -> CurrentUser:
    """FastAPI dependency that only lets administrators through."""
    if not current_user.is_admin:
        raise AuthorizationError("Administrator role required")

    return current_user
