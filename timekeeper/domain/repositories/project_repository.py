"""Project repository interface.
Defines the contract for project data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from timekeeper.domain.models.project import Project


class ProjectRepository(ABC):
    """Repository interface for Project entity."""

    @abstractmethod
    def save(self, project: Project) -> Project:
        """Save a project entity."""
        pass

    @abstractmethod
    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Find a project by ID, active or not. Returns None if not found."""
        pass

    @abstractmethod
    def list_active(self) -> List[Project]:
        """Active projects ordered by name."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored projects, including inactive ones."""
        pass
