"""
Project domain model.
Projects are the optional bucket a time entry is booked against.
"""

import re
from dataclasses import dataclass
from typing import Optional

from timekeeper.domain.models.base import BaseEntity, ValidationError


DEFAULT_PROJECT_COLOR = "#3b82f6"

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def validate_color(color: str, field_name: str = "color") -> None:
    """Ensure a color is a #RRGGBB hex string."""
    if not color or not HEX_COLOR.match(color):
        raise ValidationError(f"Invalid color '{color}', expected #RRGGBB", field_name)


@dataclass
class Project(BaseEntity):
    """
    Project entity.
    Deleting a project only deactivates it so historic entries keep their label.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    color: str = DEFAULT_PROJECT_COLOR
    is_active: bool = True

    def __post_init__(self):
        super().__post_init__()
        if self.color is None:
            self.color = DEFAULT_PROJECT_COLOR
        self.validate()

    def validate(self) -> None:
        """Validate project state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Project name is required", "name")

        if len(self.name) > 255:
            raise ValidationError("Project name too long (max 255 characters)", "name")

        validate_color(self.color)

    def update_info(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> None:
        """Update project information."""
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
        """Soft-delete the project."""
        self.is_active = False
        self.mark_as_updated()
