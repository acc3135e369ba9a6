"""
Authentication infrastructure module.
Handles JWT validation, user authentication, and authorization.
"""

from .jwt_handler import JWTHandler
from .dependencies import (
    get_current_user_id,
    get_current_user,
    get_user_repository,
    require_admin
)

__all__ = [
    "JWTHandler",
    "get_current_user_id",
    "get_current_user",
    "get_user_repository",
    "require_admin"
]
