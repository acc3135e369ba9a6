"""
Report and balance DTOs for the application layer.
"""

from typing import Any, Dict, List, Optional
from datetime import date
from enum import Enum
from pydantic import Field, model_validator

from timekeeper.domain.services.balance_service import BalanceSummary, PeriodBalance
from timekeeper.domain.services.report_service import ReportGroup, ReportGrouping

from .base_dto import BaseDTO, RequestDTO
from .time_entry_dto import TimeEntryResponseDTO


class ExportFormat(str, Enum):
    """Export format options."""
    CSV = "csv"
    XLSX = "xlsx"
    PDF = "pdf"


class ReportRequestDTO(RequestDTO):
    """Parameters shared by report data and report export."""

    start_date: date = Field(description="First day of the report, inclusive")
    end_date: date = Field(description="Last day of the report, inclusive")
    group_by: Optional[str] = Field(default=ReportGrouping.DAY.value, description="day, week, month, project or user")
    user_id: Optional[str] = Field(default=None, description="Restrict to one user (admins only)")

    @model_validator(mode='after')
    def validate_date_range(self):
        """Validate that end date is not before start date."""
        if self.end_date < self.start_date:
            raise ValueError('End date must not be before start date')
        return self


class ReportExportRequestDTO(ReportRequestDTO):
    """Parameters for a report file export."""

    format: ExportFormat = Field(default=ExportFormat.CSV, description="Output format")
    include_costs: bool = Field(default=False, description="Add personnel costs (admins only)")
    detailed: bool = Field(default=False, description="One row per entry instead of grouped totals")


class ReportGroupDTO(BaseDTO):
    """One aggregated report group."""

    key: str = Field(description="Grouping key, e.g. a date, week start, month or name")
    total_hours: float = Field(description="Net hours of the group")
    total_costs: Optional[float] = Field(default=None, description="Personnel costs, admins only")
    entry_count: int = Field(description="Number of entries in the group")
    entries: List[TimeEntryResponseDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, group: ReportGroup) -> "ReportGroupDTO":
        return cls(
            key=group.key,
            total_hours=round(group.total_hours, 2),
            total_costs=round(group.total_costs, 2) if group.total_costs is not None else None,
            entry_count=group.entry_count,
            entries=[TimeEntryResponseDTO.from_domain(entry) for entry in group.entries]
        )


class ReportDataResponseDTO(BaseDTO):
    """Aggregated report data for on-screen display."""

    data: List[ReportGroupDTO]
    group_by: ReportGrouping
    is_admin: bool
    total_entries: int
    summary: Dict[str, Any] = Field(default_factory=dict)


class PeriodBalanceDTO(BaseDTO):
    """Worked and target hours of one window."""

    worked_hours: float
    target_hours: float
    balance: float
    label: str

    @classmethod
    def from_domain(cls, period: PeriodBalance) -> "PeriodBalanceDTO":
        data = period.to_dict()
        return cls(
            worked_hours=round(data["worked_hours"], 2),
            target_hours=round(data["target_hours"], 2),
            balance=round(data["balance"], 2),
            label=data["label"]
        )


class BalanceResponseDTO(BaseDTO):
    """Balance summary of a user."""

    user_id: str
    today: PeriodBalanceDTO
    week: PeriodBalanceDTO
    month: PeriodBalanceDTO
    total: PeriodBalanceDTO

    @classmethod
    def from_domain(cls, user_id: str, summary: BalanceSummary) -> "BalanceResponseDTO":
        return cls(
            user_id=user_id,
            today=PeriodBalanceDTO.from_domain(summary.today),
            week=PeriodBalanceDTO.from_domain(summary.week),
            month=PeriodBalanceDTO.from_domain(summary.month),
            total=PeriodBalanceDTO.from_domain(summary.total)
        )
