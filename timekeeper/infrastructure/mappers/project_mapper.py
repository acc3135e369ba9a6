"""
Project and holiday mappers for converting between domain entities and database models.
"""

from typing import Optional

from timekeeper.domain.models.project import Project
from timekeeper.domain.models.holiday import Holiday
from timekeeper.infrastructure.db.models import ProjectModel, HolidayModel


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project, model: Optional[ProjectModel] = None) -> ProjectModel:
        """Convert Project domain entity to ProjectModel, updating `model` when given."""
        model = model or ProjectModel(id=project.id)
        model.name = project.name
        model.description = project.description
        model.color = project.color
        model.is_active = project.is_active
        model.created_at = project.created_at
        model.updated_at = project.updated_at
        return model

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity."""
        return Project(
            id=model.id,
            name=model.name,
            description=model.description,
            color=model.color,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at
        )


class HolidayMapper:
    """Maps between Holiday domain entity and HolidayModel database model."""

    def domain_to_model(self, holiday: Holiday, model: Optional[HolidayModel] = None) -> HolidayModel:
        model = model or HolidayModel(id=holiday.id)
        model.name = holiday.name
        model.date = holiday.date
        model.is_recurring = holiday.is_recurring
        model.created_at = holiday.created_at
        model.updated_at = holiday.updated_at
        return model

    def model_to_domain(self, model: HolidayModel) -> Holiday:
        return Holiday(
            id=model.id,
            name=model.name,
            date=model.date,
            is_recurring=model.is_recurring,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
