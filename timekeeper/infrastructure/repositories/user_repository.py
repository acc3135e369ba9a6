"""
User and group repository implementations using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy.orm import Session

from timekeeper.domain.models.user import User, UserRole
from timekeeper.domain.models.group import Group
from timekeeper.domain.repositories.user_repository import UserRepository as UserRepositoryInterface
from timekeeper.domain.repositories.group_repository import GroupRepository as GroupRepositoryInterface
from timekeeper.infrastructure.db.models import UserModel, GroupModel, TimeEntryModel
from timekeeper.infrastructure.mappers.user_mapper import UserMapper, GroupMapper
from timekeeper.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository, UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    model = UserModel
    entity_name = "User"

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = UserMapper()

    def save(self, user: User) -> User:
        """Save a user entity."""
        return self._save(user, conflict_message=f"Username '{user.username}' is already taken")

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        model = self._find_model(user_id)
        return self.mapper.model_to_domain(model) if model else None

    def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        model = self.session.query(UserModel).filter_by(username=username).first()
        return self.mapper.model_to_domain(model) if model else None

    def list_active(self) -> List[User]:
        """Get active users ordered by first name."""
        models = self.session.query(UserModel).filter(
            UserModel.is_active.is_(True)
        ).order_by(UserModel.first_name, UserModel.username).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def admin_exists(self) -> bool:
        return self.session.query(UserModel.id).filter(UserModel.role == UserRole.ADMIN).first() is not None

    def lock(self, user_id: str) -> Optional[User]:
        """Load a user with a row lock (no-op on SQLite)."""
        model = self.session.query(UserModel).filter_by(id=user_id).with_for_update().first()
        return self.mapper.model_to_domain(model) if model else None

    def delete(self, user_id: str) -> bool:
        """Delete a user and their time entries."""
        if not self._find_model(user_id):
            return False

        self.session.query(TimeEntryModel).filter(
            TimeEntryModel.user_id == user_id
        ).delete(synchronize_session=False)
        return self._delete(user_id)


class SQLAlchemyGroupRepository(SQLAlchemyRepository, GroupRepositoryInterface):
    """SQLAlchemy implementation of group repository."""

    model = GroupModel
    entity_name = "Group"

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = GroupMapper()

    def save(self, group: Group) -> Group:
        return self._save(group, conflict_message=f"Group '{group.name}' already exists")

    def get_by_id(self, group_id: str) -> Optional[Group]:
        model = self._find_model(group_id)
        return self.mapper.model_to_domain(model) if model else None

    def get_by_name(self, name: str) -> Optional[Group]:
        model = self.session.query(GroupModel).filter_by(name=name).first()
        return self.mapper.model_to_domain(model) if model else None

    def list_active(self) -> List[Group]:
        models = self.session.query(GroupModel).filter(
            GroupModel.is_active.is_(True)
        ).order_by(GroupModel.name).all()

        return [self.mapper.model_to_domain(model) for model in models]
