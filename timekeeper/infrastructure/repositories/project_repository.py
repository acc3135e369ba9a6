"""
Project and holiday repository implementations using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import func

from timekeeper.domain.models.project import Project
from timekeeper.domain.models.holiday import Holiday
from timekeeper.domain.repositories.project_repository import ProjectRepository as ProjectRepositoryInterface
from timekeeper.domain.repositories.holiday_repository import HolidayRepository as HolidayRepositoryInterface
from timekeeper.infrastructure.db.models import ProjectModel, HolidayModel
from timekeeper.infrastructure.mappers.project_mapper import ProjectMapper, HolidayMapper
from timekeeper.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProjectRepository(SQLAlchemyRepository, ProjectRepositoryInterface):
    """SQLAlchemy implementation of project repository."""

    model = ProjectModel
    entity_name = "Project"

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = ProjectMapper()

    def save(self, project: Project) -> Project:
        """Save a project entity."""
        return self._save(project)

    def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get project by ID."""
        model = self._find_model(project_id)
        return self.mapper.model_to_domain(model) if model else None

    def list_active(self) -> List[Project]:
        """Get active projects ordered by name."""
        models = self.session.query(ProjectModel).filter(
            ProjectModel.is_active.is_(True)
        ).order_by(ProjectModel.name).all()

        return [self.mapper.model_to_domain(model) for model in models]

    def count(self) -> int:
        """Count all projects, active or not."""
        return self.session.query(func.count(ProjectModel.id)).scalar() or 0


class SQLAlchemyHolidayRepository(SQLAlchemyRepository, HolidayRepositoryInterface):
    """SQLAlchemy implementation of holiday repository."""

    model = HolidayModel
    entity_name = "Holiday"

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = HolidayMapper()

    def save(self, holiday: Holiday) -> Holiday:
        return self._save(holiday)

    def get_by_id(self, holiday_id: str) -> Optional[Holiday]:
        model = self._find_model(holiday_id)
        return self.mapper.model_to_domain(model) if model else None

    def list_all(self) -> List[Holiday]:
        models = self.session.query(HolidayModel).order_by(HolidayModel.date).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def delete(self, holiday_id: str) -> bool:
        return self._delete(holiday_id)
