"""
User use cases for the application layer.
Implements business logic for user operations.
"""

import logging
from typing import List

from timekeeper.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CurrentUser,
    require_found,
    require_reference
)
from timekeeper.application.dto.user_dto import CreateUserRequestDTO, UpdateUserRequestDTO
from timekeeper.domain.models.base import AuthorizationError, DuplicateEntityError, BusinessRuleViolation
from timekeeper.domain.models.user import User, UserCreatedEvent
from timekeeper.domain.repositories.user_repository import UserRepository
from timekeeper.domain.repositories.group_repository import GroupRepository


logger = logging.getLogger(__name__)


class ListUsersUseCase(AuthorizedUseCase):
    """Use case for listing active users (administrators only)."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def execute(self, current_user: CurrentUser) -> List[User]:
        self._require_admin(current_user)
        return self.user_repository.list_active()


class CreateUserUseCase(AuthorizedUseCase):
    """Use case for creating a new user."""

    def __init__(self, user_repository: UserRepository, group_repository: GroupRepository):
        self.user_repository = user_repository
        self.group_repository = group_repository

    def execute(self, current_user: CurrentUser, request: CreateUserRequestDTO) -> User:
        self._require_admin(current_user)

        # Check if user already exists
        if self.user_repository.get_by_username(request.username):
            raise DuplicateEntityError("User", "username", request.username)

        if request.group_id:
            require_reference(self.group_repository.get_by_id(request.group_id), "group_id", "Group not found")

        user = User(
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            role=request.role,
            group_id=request.group_id,
            hourly_rate=request.hourly_rate,
            target_hours_per_day=request.target_hours_per_day
        )

        saved = self.user_repository.save(user)
        saved.add_event(UserCreatedEvent(saved.id, saved.username))
        self._publish_events(saved)
        return saved


class UpdateUserUseCase(AuthorizedUseCase):
    """Use case for updating a user (administrators only)."""

    def __init__(self, user_repository: UserRepository, group_repository: GroupRepository):
        self.user_repository = user_repository
        self.group_repository = group_repository

    def execute(self, current_user: CurrentUser, user_id: str, request: UpdateUserRequestDTO) -> User:
        self._require_admin(current_user)
        user = require_found(self.user_repository.get_by_id(user_id), "User", user_id)

        if request.username and request.username != user.username:
            existing = self.user_repository.get_by_username(request.username)
            if existing and existing.id != user.id:
                raise DuplicateEntityError("User", "username", request.username)

        if request.group_id:
            require_reference(self.group_repository.get_by_id(request.group_id), "group_id", "Group not found")

        if user.id == current_user.user_id and request.role is not None and request.role != user.role:
            raise BusinessRuleViolation("Administrators cannot change their own role")

        fields = request.provided_fields()
        user.update_profile(
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            # An explicit null removes the group assignment
            group_id="" if "group_id" in fields and not request.group_id else request.group_id,
            hourly_rate=request.hourly_rate,
            target_hours_per_day=request.target_hours_per_day,
            role=request.role,
            is_active=request.is_active
        )
        if "hourly_rate" in fields and request.hourly_rate is None:
            user.hourly_rate = None

        return self.user_repository.save(user)


class DeleteUserUseCase(AuthorizedUseCase):
    """Use case for deleting a user together with their time entries."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def execute(self, current_user: CurrentUser, user_id: str) -> None:
        self._require_admin(current_user)
        require_found(self.user_repository.get_by_id(user_id), "User", user_id)

        if user_id == current_user.user_id:
            raise BusinessRuleViolation("Administrators cannot delete themselves")

        self.user_repository.delete(user_id)
        logger.info("User %s deleted by %s", user_id, current_user.user_id)


class PromoteUserUseCase(AuthorizedUseCase):
    """
    Use case for the initial administrator setup.
    While no administrator exists, a user may promote themselves; afterwards
    promotion goes through the regular user update.
    """

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    def execute(self, current_user: CurrentUser, user_id: str) -> User:
        if user_id != current_user.user_id:
            raise AuthorizationError("Users can only promote themselves")

        if self.user_repository.admin_exists():
            raise AuthorizationError("An administrator already exists")

        user = require_found(self.user_repository.get_by_id(user_id), "User", user_id)
        user.promote_to_admin()

        saved = self.user_repository.save(user)
        self._publish_events(saved)
        return saved
