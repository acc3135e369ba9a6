"""
Time entry repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import desc

from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository as TimeEntryRepositoryInterface
from timekeeper.infrastructure.db.models import TimeEntryModel
from timekeeper.infrastructure.mappers.time_entry_mapper import TimeEntryMapper
from timekeeper.infrastructure.repositories.base_repository import SQLAlchemyRepository


RUNNING_TIMER_CONFLICT = "A timer is already running"


class SQLAlchemyTimeEntryRepository(SQLAlchemyRepository, TimeEntryRepositoryInterface):
    """SQLAlchemy implementation of time entry repository."""

    model = TimeEntryModel
    entity_name = "TimeEntry"

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = TimeEntryMapper()

    def save(self, time_entry: TimeEntry) -> TimeEntry:
        """Save a time entry; the running-timer index rejects a second running entry."""
        return self._save(time_entry, conflict_message=RUNNING_TIMER_CONFLICT)

    def get_by_id(self, entry_id: str) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        model = self.session.query(TimeEntryModel).filter_by(id=entry_id).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def _range_query(self, start_date: Optional[date], end_date: Optional[date]):
        query = self.session.query(TimeEntryModel)

        if start_date:
            query = query.filter(TimeEntryModel.date >= start_date)
        if end_date:
            query = query.filter(TimeEntryModel.date <= end_date)

        return query

    def _ordered(self, query) -> List[TimeEntry]:
        models = query.order_by(desc(TimeEntryModel.date), desc(TimeEntryModel.start_time)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def list_by_user(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None
    ) -> List[TimeEntry]:
        """Get time entries of one user within the date range."""
        query = self._range_query(start_date, end_date).filter(TimeEntryModel.user_id == user_id)
        return self._ordered(query)

    def list_all(self, start_date: Optional[date] = None, end_date: Optional[date] = None) -> List[TimeEntry]:
        """Get time entries of all users within the date range."""
        return self._ordered(self._range_query(start_date, end_date))

    def list_by_user_and_date(self, user_id: str, entry_date: date) -> List[TimeEntry]:
        """Get the time entries a user recorded on one day."""
        query = self.session.query(TimeEntryModel).filter(
            TimeEntryModel.user_id == user_id,
            TimeEntryModel.date == entry_date
        )
        return self._ordered(query)

    def get_running_entry(self, user_id: str) -> Optional[TimeEntry]:
        """Get currently running time entry for user."""
        model = self.session.query(TimeEntryModel).filter(
            TimeEntryModel.user_id == user_id,
            TimeEntryModel.is_running.is_(True)
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def delete(self, entry_id: str) -> bool:
        """Delete time entry by ID."""
        return self._delete(entry_id)
