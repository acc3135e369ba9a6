"""
Shared save logic for the SQLAlchemy repositories.
"""

from typing import Any, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from timekeeper.domain.models.base import BaseEntity, EntityNotFoundError, BusinessRuleViolation, new_id


class SQLAlchemyRepository:
    """
    Base class for repositories persisting one entity type.
    Subclasses set `model`, `mapper` and `entity_name`.
    """

    model: Type[Any]
    entity_name: str = "Entity"

    def __init__(self, session: Session):
        self.session = session

    def _find_model(self, entity_id: str) -> Optional[Any]:
        return self.session.get(self.model, entity_id)

    def _save(self, entity: BaseEntity, conflict_message: Optional[str] = None) -> BaseEntity:
        """
        Insert a new entity (assigning its ID) or update the stored row.
        Unique constraint violations surface as BusinessRuleViolation.
        """
        if entity.is_new:
            entity.id = new_id()
            model = self.mapper.domain_to_model(entity)
            self.session.add(model)
        else:
            model = self._find_model(entity.id)
            if not model:
                raise EntityNotFoundError(self.entity_name, entity.id)

            # Update model with new data
            self.mapper.domain_to_model(entity, model)

        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            raise BusinessRuleViolation(
                conflict_message or f"{self.entity_name} conflicts with existing data"
            ) from exc

        return entity

    def _delete(self, entity_id: str) -> bool:
        model = self._find_model(entity_id)
        if not model:
            return False

        self.session.delete(model)
        self.session.flush()
        return True
