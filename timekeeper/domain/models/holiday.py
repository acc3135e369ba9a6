"""
Holiday domain model.
Holidays are excluded from the working days that make up a user's target hours.
"""

from dataclasses import dataclass
from datetime import date as Date
from typing import Optional

from timekeeper.domain.models.base import BaseEntity, ValidationError


@dataclass
class Holiday(BaseEntity):
    """
    Holiday entity.
    A recurring holiday applies to the same month and day in every year.
    """

    name: Optional[str] = None
    date: Optional[Date] = None
    is_recurring: bool = False

    def __post_init__(self):
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate holiday state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Holiday name is required", "name")

        if self.date is None:
            raise ValidationError("Holiday date is required", "date")

    def falls_on(self, day: Date) -> bool:
        """Check whether this holiday applies to the given day."""
        if self.is_recurring:
            return (self.date.month, self.date.day) == (day.month, day.day)
        return self.date == day

    def update_info(
        self,
        name: Optional[str] = None,
        date: Optional[Date] = None,
        is_recurring: Optional[bool] = None
    ) -> None:
        """Update holiday information."""
        if name is not None:
            self.name = name.strip()
        if date is not None:
            self.date = date
        if is_recurring is not None:
            self.is_recurring = is_recurring

        self.validate()
        self.mark_as_updated()
