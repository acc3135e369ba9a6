"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

from timekeeper.domain.models.base import (
    BaseEntity,
    AuthorizationError,
    EntityNotFoundError,
    ValidationError,
    utcnow
)
from timekeeper.domain.models.user import User, UserRole


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """
    Identity of the caller of a use case.
    Built once per request from the verified token and passed explicitly.
    """

    user: User

    @property
    def user_id(self) -> str:
        return self.user.id

    @property
    def role(self) -> UserRole:
        return self.user.role

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin


class Clock:
    """
    Source of the current time.
    Timestamps are naive UTC; calendar days are taken in the business timezone.
    """

    def __init__(self, timezone_name: str = "UTC"):
        self.tz = ZoneInfo(timezone_name)

    def now(self) -> datetime:
        return utcnow()

    def local_date(self, moment: datetime) -> date:
        """Calendar day of a naive UTC timestamp in the business timezone."""
        return moment.replace(tzinfo=timezone.utc).astimezone(self.tz).date()

    def today(self) -> date:
        return self.local_date(self.now())


class BaseUseCase(ABC):
    """
    Base class for all use cases.
    Domain exceptions propagate to the caller; the web layer maps them to responses.
    """

    def _publish_events(self, *entities: Optional[BaseEntity]) -> None:
        """Publish collected domain events."""
        for entity in entities:
            if entity is None:
                continue
            for event in entity.pull_events():
                logger.info("Domain event %s: %s", event.event_name, event.to_dict()["data"])


class AuthorizedUseCase(BaseUseCase):
    """
    Base class for use cases that check the caller's role or ownership.
    """

    def _require_admin(self, current_user: CurrentUser) -> None:
        """Check if user has the administrator role."""
        if not current_user.is_admin:
            raise AuthorizationError("Administrator role required")

    def _require_owner_or_admin(self, current_user: CurrentUser, resource_owner_id: str) -> None:
        """Check if user is owner or an administrator."""
        if current_user.user_id != resource_owner_id and not current_user.is_admin:
            raise AuthorizationError("Insufficient permissions")


def require_found(entity: Any, entity_type: str, entity_id: Any) -> Any:
    """Return the entity or raise EntityNotFoundError."""
    if entity is None:
        raise EntityNotFoundError(entity_type, entity_id)
    return entity


def require_reference(entity: Any, field: str, message: str) -> Any:
    """Return a referenced entity or raise a ValidationError for the referencing field."""
    if entity is None:
        raise ValidationError(message, field)
    return entity
