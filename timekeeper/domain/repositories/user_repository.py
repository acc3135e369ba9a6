"""User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from timekeeper.domain.models.user import User


class UserRepository(ABC):
    """Repository interface for User entity."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Save a user entity."""
        pass

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by ID. Returns None if not found."""
        pass

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        """Find a user by username. Returns None if not found."""
        pass

    @abstractmethod
    def list_active(self) -> List[User]:
        """Active users ordered by first name."""
        pass

    @abstractmethod
    def admin_exists(self) -> bool:
        """Check whether any user holds the administrator role."""
        pass

    @abstractmethod
    def lock(self, user_id: str) -> Optional[User]:
        """
        Load a user and lock its row for the rest of the transaction.
        Serializes timer and manual-entry writes of the same user.
        """
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        """Delete a user together with their time entries."""
        pass
