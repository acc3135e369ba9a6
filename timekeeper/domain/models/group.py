"""
Group domain model.
"""

from dataclasses import dataclass
from typing import Optional

from timekeeper.domain.models.base import BaseEntity, ValidationError
from timekeeper.domain.models.project import validate_color


DEFAULT_GROUP_COLOR = "#10b981"


@dataclass
class Group(BaseEntity):
    """Team of users. Removing a group deactivates it and never touches its members."""

    name: Optional[str] = None
    description: Optional[str] = None
    color: str = DEFAULT_GROUP_COLOR
    is_active: bool = True

    def __post_init__(self):
        super().__post_init__()
        if self.color is None:
            self.color = DEFAULT_GROUP_COLOR
        self.validate()

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Group name is required", "name")

        if len(self.name) > 255:
            raise ValidationError("Group name too long (max 255 characters)", "name")

        validate_color(self.color)

    def update_info(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> None:
        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if color is not None:
            self.color = color
        if is_active is not None:
            self.is_active = is_active

        self.validate()
        self.mark_as_updated()

    def deactivate(self) -> None:
        self.is_active = False
        self.mark_as_updated()
