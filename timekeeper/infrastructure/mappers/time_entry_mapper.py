"""
Time entry mapper for converting between domain entities and database models.
"""

from typing import Optional

from timekeeper.domain.models.time_entry import TimeEntry, TimeEntryStatus
from timekeeper.infrastructure.db.models import TimeEntryModel
from timekeeper.infrastructure.mappers.user_mapper import UserMapper
from timekeeper.infrastructure.mappers.project_mapper import ProjectMapper


class TimeEntryMapper:
    """
    Maps between TimeEntry domain entity and TimeEntryModel database model.
    Loaded user and project rows are attached to the entity as read-only snapshots.
    """

    def __init__(self):
        self.user_mapper = UserMapper()
        self.project_mapper = ProjectMapper()

    def domain_to_model(self, time_entry: TimeEntry, model: Optional[TimeEntryModel] = None) -> TimeEntryModel:
        """Convert TimeEntry domain entity to TimeEntryModel, updating `model` when given."""
        model = model or TimeEntryModel(id=time_entry.id)
        model.user_id = time_entry.user_id
        model.project_id = time_entry.project_id
        model.date = time_entry.date
        model.start_time = time_entry.start_time
        model.end_time = time_entry.end_time
        model.break_minutes = time_entry.break_minutes
        model.description = time_entry.description
        model.status = time_entry.status
        model.is_running = time_entry.is_running
        model.created_at = time_entry.created_at
        model.updated_at = time_entry.updated_at
        return model

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry domain entity."""
        return TimeEntry(
            id=model.id,
            user_id=model.user_id,
            project_id=model.project_id,
            date=model.date,
            start_time=model.start_time,
            end_time=model.end_time,
            break_minutes=model.break_minutes or 0,
            description=model.description,
            status=TimeEntryStatus(model.status) if model.status else TimeEntryStatus.DRAFT,
            is_running=bool(model.is_running),
            created_at=model.created_at,
            updated_at=model.updated_at,
            user=self.user_mapper.model_to_domain(model.user) if model.user else None,
            project=self.project_mapper.model_to_domain(model.project) if model.project else None
        )
