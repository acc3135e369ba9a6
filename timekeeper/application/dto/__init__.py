"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .user_dto import *
from .project_dto import *
from .time_entry_dto import *
from .report_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "CreateRequestDTO",
    "UpdateRequestDTO",
    "MessageResponseDTO",
    "ErrorResponseDTO",

    # Users
    "CreateUserRequestDTO",
    "UpdateUserRequestDTO",
    "UserSummaryDTO",
    "UserResponseDTO",

    # Projects, groups, holidays
    "CreateProjectRequestDTO",
    "UpdateProjectRequestDTO",
    "ProjectSummaryDTO",
    "ProjectResponseDTO",
    "CreateGroupRequestDTO",
    "UpdateGroupRequestDTO",
    "GroupResponseDTO",
    "CreateHolidayRequestDTO",
    "UpdateHolidayRequestDTO",
    "HolidayResponseDTO",

    # Time entries
    "StartTimerRequestDTO",
    "CreateTimeEntryRequestDTO",
    "UpdateTimeEntryRequestDTO",
    "TimeEntryResponseDTO",

    # Reports and balances
    "ExportFormat",
    "ReportRequestDTO",
    "ReportExportRequestDTO",
    "ReportGroupDTO",
    "ReportDataResponseDTO",
    "PeriodBalanceDTO",
    "BalanceResponseDTO",
]
