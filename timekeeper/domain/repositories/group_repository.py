"""Group repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from timekeeper.domain.models.group import Group


class GroupRepository(ABC):
    """Repository interface for Group entity."""

    @abstractmethod
    def save(self, group: Group) -> Group:
        pass

    @abstractmethod
    def get_by_id(self, group_id: str) -> Optional[Group]:
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Group]:
        pass

    @abstractmethod
    def list_active(self) -> List[Group]:
        """Active groups ordered by name."""
        pass
