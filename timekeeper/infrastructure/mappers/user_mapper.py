"""
User and group mappers for converting between domain entities and database models.
"""

from typing import Optional

from timekeeper.domain.models.user import User, UserRole
from timekeeper.domain.models.group import Group
from timekeeper.infrastructure.db.models import UserModel, GroupModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User, model: Optional[UserModel] = None) -> UserModel:
        """Convert User domain entity to UserModel, updating `model` when given."""
        model = model or UserModel(id=user.id)
        model.username = user.username
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.role = user.role
        model.group_id = user.group_id
        model.hourly_rate = user.hourly_rate
        model.target_hours_per_day = user.target_hours_per_day
        model.is_active = user.is_active
        model.created_at = user.created_at
        model.updated_at = user.updated_at
        return model

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            role=UserRole(model.role) if model.role else UserRole.EMPLOYEE,
            group_id=model.group_id,
            hourly_rate=model.hourly_rate,
            target_hours_per_day=model.target_hours_per_day if model.target_hours_per_day is not None else 8,
            is_active=model.is_active if model.is_active is not None else True,
            created_at=model.created_at,
            updated_at=model.updated_at
        )


class GroupMapper:
    """Maps between Group domain entity and GroupModel database model."""

    def domain_to_model(self, group: Group, model: Optional[GroupModel] = None) -> GroupModel:
        model = model or GroupModel(id=group.id)
        model.name = group.name
        model.description = group.description
        model.color = group.color
        model.is_active = group.is_active
        model.created_at = group.created_at
        model.updated_at = group.updated_at
        return model

    def model_to_domain(self, model: GroupModel) -> Group:
        return Group(
            id=model.id,
            name=model.name,
            description=model.description,
            color=model.color,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
