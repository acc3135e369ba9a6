"""
Application layer use cases.
Business logic for the time tracking system.
"""

from .base_use_case import BaseUseCase, AuthorizedUseCase, CurrentUser, Clock
from .time_entry_use_cases import (
    ListTimeEntriesUseCase,
    GetTimeEntryUseCase,
    GetRunningEntryUseCase,
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    StartTimerUseCase,
    StopTimerUseCase
)
from .balance_use_cases import GetBalanceUseCase
from .user_use_cases import (
    ListUsersUseCase,
    CreateUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    PromoteUserUseCase
)
from .project_use_cases import (
    ListProjectsUseCase,
    GetProjectUseCase,
    CreateProjectUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
    SeedProjectsUseCase,
    ListGroupsUseCase,
    CreateGroupUseCase,
    UpdateGroupUseCase,
    DeleteGroupUseCase,
    ListHolidaysUseCase,
    CreateHolidayUseCase,
    UpdateHolidayUseCase,
    DeleteHolidayUseCase
)
from .report_use_cases import ReportData, GetReportDataUseCase, ExportReportUseCase

__all__ = [
    # Base
    "BaseUseCase",
    "AuthorizedUseCase",
    "CurrentUser",
    "Clock",

    # Time entries
    "ListTimeEntriesUseCase",
    "GetTimeEntryUseCase",
    "GetRunningEntryUseCase",
    "CreateTimeEntryUseCase",
    "UpdateTimeEntryUseCase",
    "DeleteTimeEntryUseCase",
    "StartTimerUseCase",
    "StopTimerUseCase",
    "GetBalanceUseCase",

    # Users
    "ListUsersUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "PromoteUserUseCase",

    # Master data
    "ListProjectsUseCase",
    "GetProjectUseCase",
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "SeedProjectsUseCase",
    "ListGroupsUseCase",
    "CreateGroupUseCase",
    "UpdateGroupUseCase",
    "DeleteGroupUseCase",
    "ListHolidaysUseCase",
    "CreateHolidayUseCase",
    "UpdateHolidayUseCase",
    "DeleteHolidayUseCase",

    # Reports
    "ReportData",
    "GetReportDataUseCase",
    "ExportReportUseCase",
]
