"""
JWT token handler.
Validates bearer tokens and extracts the user they were issued for.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt as jose_jwt

from timekeeper.config import get_settings
from timekeeper.domain.models.base import AuthenticationError


class JWTHandler:
    """Handles JWT token creation, validation and user extraction."""

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None):
        self.settings = get_settings()
        self.jwt_secret = secret_key or self.settings.jwt_secret_key
        self.jwt_algorithm = algorithm or self.settings.jwt_algorithm

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string, optionally prefixed with 'Bearer '

        Returns:
            Dict containing token payload

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        # Remove 'Bearer ' prefix if present
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise AuthenticationError(f"Invalid token: {e}")

        # Validate required claims
        if not payload.get('sub'):
            raise AuthenticationError("Token missing user ID (sub claim)")

        if 'exp' not in payload:
            raise AuthenticationError("Token missing expiration (exp claim)")

        return payload

    def get_user_id(self, token: str) -> str:
        """
        Extract user ID from JWT token.

        Raises:
            AuthenticationError: If token is invalid
        """
        payload = self.verify_token(token)
        return str(payload['sub'])

    def create_access_token(self, user_id: str, expires_minutes: Optional[int] = None, **claims: Any) -> str:
        """
        Issue a signed access token for a user.

        Args:
            user_id: User ID stored in the `sub` claim
            expires_minutes: Lifetime, defaults to the configured expiry
            claims: Additional claims to embed

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        lifetime = expires_minutes if expires_minutes is not None else self.settings.jwt_access_token_expire_minutes
        expire = now + timedelta(minutes=lifetime)

        payload = {
            **claims,
            "sub": user_id,  # Subject (user ID)
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expire.timestamp()),  # Expires at
        }

        return jose_jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def generate_test_token(self, user_id: str, expires_minutes: int = 60) -> str:
        """Generate a short-lived token for development and testing."""
        return self.create_access_token(user_id, expires_minutes=expires_minutes)
