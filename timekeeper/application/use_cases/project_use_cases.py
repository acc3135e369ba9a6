"""
Project, group and holiday use cases for the application layer.
Master data is readable by every user and maintained by administrators.
"""

import logging
from typing import List

from timekeeper.application.use_cases.base_use_case import AuthorizedUseCase, CurrentUser, require_found
from timekeeper.application.dto.project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    CreateGroupRequestDTO,
    UpdateGroupRequestDTO,
    CreateHolidayRequestDTO,
    UpdateHolidayRequestDTO
)
from timekeeper.domain.models.base import DuplicateEntityError
from timekeeper.domain.models.project import Project
from timekeeper.domain.models.group import Group
from timekeeper.domain.models.holiday import Holiday
from timekeeper.domain.repositories.project_repository import ProjectRepository
from timekeeper.domain.repositories.group_repository import GroupRepository
from timekeeper.domain.repositories.holiday_repository import HolidayRepository


logger = logging.getLogger(__name__)


SAMPLE_PROJECTS = (
    ("Internes Projekt", "Interne Arbeiten und Meetings", "#3b82f6"),
    ("Kundenprojekt A", "Entwicklungsarbeiten für Kunde A", "#10b981"),
    ("Administration", "Administrative Tätigkeiten", "#f59e0b"),
)


# Projects

class ListProjectsUseCase(AuthorizedUseCase):
    """Use case for listing active projects."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def execute(self, current_user: CurrentUser) -> List[Project]:
        return self.project_repository.list_active()


class GetProjectUseCase(AuthorizedUseCase):
    """Use case for reading one project."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def execute(self, current_user: CurrentUser, project_id: str) -> Project:
        return require_found(self.project_repository.get_by_id(project_id), "Project", project_id)


class CreateProjectUseCase(AuthorizedUseCase):
    """Use case for creating a project."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def execute(self, current_user: CurrentUser, request: CreateProjectRequestDTO) -> Project:
        self._require_admin(current_user)

        project = Project(
            name=request.name.strip(),
            description=request.description,
            color=request.color
        )
        return self.project_repository.save(project)


class UpdateProjectUseCase(AuthorizedUseCase):
    """Use case for updating a project."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def execute(self, current_user: CurrentUser, project_id: str, request: UpdateProjectRequestDTO) -> Project:
        self._require_admin(current_user)
        project = require_found(self.project_repository.get_by_id(project_id), "Project", project_id)

        project.update_info(
            name=request.name,
            description=request.description,
            color=request.color,
            is_active=request.is_active
        )
        return self.project_repository.save(project)


class DeleteProjectUseCase(AuthorizedUseCase):
    """Use case for deactivating a project; its entries keep the reference."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def execute(self, current_user: CurrentUser, project_id: str) -> None:
        self._require_admin(current_user)
        project = require_found(self.project_repository.get_by_id(project_id), "Project", project_id)

        project.deactivate()
        self.project_repository.save(project)
        logger.info("Project %s deactivated", project_id)


class SeedProjectsUseCase:
    """Create the sample projects when no project exists yet."""

    def __init__(self, project_repository: ProjectRepository):
        self.project_repository = project_repository

    def execute(self) -> List[Project]:
        if self.project_repository.count() > 0:
            return []

        return [
            self.project_repository.save(Project(name=name, description=description, color=color))
            for name, description, color in SAMPLE_PROJECTS
        ]


# Groups

class ListGroupsUseCase(AuthorizedUseCase):
    """Use case for listing active groups."""

    def __init__(self, group_repository: GroupRepository):
        self.group_repository = group_repository

    def execute(self, current_user: CurrentUser) -> List[Group]:
        return self.group_repository.list_active()


class CreateGroupUseCase(AuthorizedUseCase):
    """Use case for creating a group with a unique name."""

    def __init__(self, group_repository: GroupRepository):
        self.group_repository = group_repository

    def execute(self, current_user: CurrentUser, request: CreateGroupRequestDTO) -> Group:
        self._require_admin(current_user)

        name = request.name.strip()
        if self.group_repository.get_by_name(name):
            raise DuplicateEntityError("Group", "name", name)

        group = Group(name=name, description=request.description, color=request.color)
        return self.group_repository.save(group)


class UpdateGroupUseCase(AuthorizedUseCase):
    """Use case for updating a group."""

    def __init__(self, group_repository: GroupRepository):
        self.group_repository = group_repository

    def execute(self, current_user: CurrentUser, group_id: str, request: UpdateGroupRequestDTO) -> Group:
        self._require_admin(current_user)
        group = require_found(self.group_repository.get_by_id(group_id), "Group", group_id)

        if request.name is not None:
            existing = self.group_repository.get_by_name(request.name.strip())
            if existing and existing.id != group.id:
                raise DuplicateEntityError("Group", "name", request.name.strip())

        group.update_info(
            name=request.name,
            description=request.description,
            color=request.color,
            is_active=request.is_active
        )
        return self.group_repository.save(group)


class DeleteGroupUseCase(AuthorizedUseCase):
    """Use case for deactivating a group; members stay untouched."""

    def __init__(self, group_repository: GroupRepository):
        self.group_repository = group_repository

    def execute(self, current_user: CurrentUser, group_id: str) -> None:
        self._require_admin(current_user)
        group = require_found(self.group_repository.get_by_id(group_id), "Group", group_id)

        group.deactivate()
        self.group_repository.save(group)


# Holidays

class ListHolidaysUseCase(AuthorizedUseCase):
    """Use case for listing holidays ordered by date."""

    def __init__(self, holiday_repository: HolidayRepository):
        self.holiday_repository = holiday_repository

    def execute(self, current_user: CurrentUser) -> List[Holiday]:
        return self.holiday_repository.list_all()


class CreateHolidayUseCase(AuthorizedUseCase):
    def __init__(self, holiday_repository: HolidayRepository):
        self.holiday_repository = holiday_repository

    def execute(self, current_user: CurrentUser, request: CreateHolidayRequestDTO) -> Holiday:
        self._require_admin(current_user)

        holiday = Holiday(name=request.name.strip(), date=request.date, is_recurring=request.is_recurring)
        return self.holiday_repository.save(holiday)


class UpdateHolidayUseCase(AuthorizedUseCase):
    def __init__(self, holiday_repository: HolidayRepository):
        self.holiday_repository = holiday_repository

    def execute(self, current_user: CurrentUser, holiday_id: str, request: UpdateHolidayRequestDTO) -> Holiday:
        self._require_admin(current_user)
        holiday = require_found(self.holiday_repository.get_by_id(holiday_id), "Holiday", holiday_id)

        holiday.update_info(name=request.name, date=request.date, is_recurring=request.is_recurring)
        return self.holiday_repository.save(holiday)


class DeleteHolidayUseCase(AuthorizedUseCase):
    """Use case for removing a holiday for good."""

    def __init__(self, holiday_repository: HolidayRepository):
        self.holiday_repository = holiday_repository

    def execute(self, current_user: CurrentUser, holiday_id: str) -> None:
        self._require_admin(current_user)
        require_found(self.holiday_repository.get_by_id(holiday_id), "Holiday", holiday_id)
        self.holiday_repository.delete(holiday_id)
