"""
Project, group and holiday DTOs for the application layer.
Master data maintained by administrators.
"""

from typing import Optional
from datetime import date as Date
from pydantic import Field

from timekeeper.domain.models.project import Project, DEFAULT_PROJECT_COLOR
from timekeeper.domain.models.group import Group, DEFAULT_GROUP_COLOR
from timekeeper.domain.models.holiday import Holiday

from .base_dto import BaseDTO, ResponseDTO, CreateRequestDTO, UpdateRequestDTO


COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"


# Projects
class CreateProjectRequestDTO(CreateRequestDTO):
    """DTO for project creation requests."""

    name: str = Field(min_length=1, max_length=255, description="Project name")
    description: Optional[str] = Field(default=None, max_length=2000, description="Project description")
    color: str = Field(default=DEFAULT_PROJECT_COLOR, pattern=COLOR_PATTERN, description="Display color")


class UpdateProjectRequestDTO(UpdateRequestDTO):
    """DTO for project update requests."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)
    is_active: Optional[bool] = Field(default=None)


class ProjectSummaryDTO(BaseDTO):
    """Compact project representation embedded in time entries."""

    id: str
    name: str
    color: str

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectSummaryDTO":
        return cls(id=project.id, name=project.name, color=project.color)


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    name: str
    description: Optional[str] = None
    color: str
    is_active: bool

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            color=project.color,
            is_active=project.is_active,
            created_at=project.created_at
        )


# Groups
class CreateGroupRequestDTO(CreateRequestDTO):
    """DTO for group creation requests."""

    name: str = Field(min_length=1, max_length=255, description="Unique group name")
    description: Optional[str] = Field(default=None, max_length=2000)
    color: str = Field(default=DEFAULT_GROUP_COLOR, pattern=COLOR_PATTERN)


class UpdateGroupRequestDTO(UpdateRequestDTO):
    """DTO for group update requests."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)
    is_active: Optional[bool] = Field(default=None)


class GroupResponseDTO(ResponseDTO):
    """DTO for group responses."""

    name: str
    description: Optional[str] = None
    color: str
    is_active: bool

    @classmethod
    def from_domain(cls, group: Group) -> "GroupResponseDTO":
        return cls(
            id=group.id,
            name=group.name,
            description=group.description,
            color=group.color,
            is_active=group.is_active,
            created_at=group.created_at
        )


# Holidays
class CreateHolidayRequestDTO(CreateRequestDTO):
    """DTO for holiday creation requests."""

    name: str = Field(min_length=1, max_length=255, description="Holiday name")
    date: Date = Field(description="Holiday date")
    is_recurring: bool = Field(default=False, description="Repeats every year on the same day")


class UpdateHolidayRequestDTO(UpdateRequestDTO):
    """DTO for holiday update requests."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date: Optional[Date] = Field(default=None)
    is_recurring: Optional[bool] = Field(default=None)


class HolidayResponseDTO(ResponseDTO):
    """DTO for holiday responses."""

    name: str
    date: Date
    is_recurring: bool

    @classmethod
    def from_domain(cls, holiday: Holiday) -> "HolidayResponseDTO":
        return cls(
            id=holiday.id,
            name=holiday.name,
            date=holiday.date,
            is_recurring=holiday.is_recurring,
            created_at=holiday.created_at
        )
