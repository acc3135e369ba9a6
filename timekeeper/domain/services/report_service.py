"""Report service for aggregating time entries.
Groups entries by day, week, month, project or user and totals hours and costs.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Callable, Dict, List, Optional, Any

from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.services.timer_service import entry_hours


NO_PROJECT = "No project"
UNKNOWN_USER = "Unknown"


class ReportGrouping(str, Enum):
    """Dimensions a report can be grouped by."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    PROJECT = "project"
    USER = "user"


@dataclass
class ReportGroup:
    """Entries sharing one grouping key, with their totals."""

    key: str
    entries: List[TimeEntry] = field(default_factory=list)
    total_hours: float = 0.0
    total_costs: Optional[float] = None

    @property
    def entry_count(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class DetailRow:
    """One flattened report line per time entry."""

    date: date
    start_time: Optional[str]
    end_time: Optional[str]
    duration_hours: float
    break_minutes: int
    description: str
    employee: str
    project: str
    status: str
    hourly_rate: Optional[float] = None
    cost: Optional[float] = None


def week_start_sunday(day: date) -> date:
    """Sunday on or before `day`, the start of a report week."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def project_name(entry: TimeEntry) -> str:
    if entry.project is not None and entry.project.name:
        return entry.project.name
    return NO_PROJECT


def employee_name(entry: TimeEntry) -> str:
    if entry.user is not None and entry.user.full_name:
        return entry.user.full_name
    return UNKNOWN_USER


def hourly_rate_of(entry: TimeEntry) -> float:
    """Hourly rate of the entry's user; missing or unparseable rates count as 0."""
    if entry.user is None:
        return 0.0
    return entry.user.hourly_rate_value


class ReportService:
    """
    Domain service for report aggregation.
    Works on entries already loaded together with their user and project.
    """

    def __init__(self):
        self._key_functions: Dict[ReportGrouping, Callable[[TimeEntry], str]] = {
            ReportGrouping.DAY: lambda entry: entry.date.isoformat(),
            ReportGrouping.WEEK: lambda entry: week_start_sunday(entry.date).isoformat(),
            ReportGrouping.MONTH: lambda entry: f"{entry.date.year:04d}-{entry.date.month:02d}",
            ReportGrouping.PROJECT: project_name,
            ReportGrouping.USER: employee_name,
        }

    def resolve_grouping(self, group_by: Optional[str], is_admin: bool) -> ReportGrouping:
        """
        Map a requested grouping to the one actually applied.
        Unknown values fall back to day; grouping by user is admin-only and
        falls back to day for everyone else.
        """
        try:
            grouping = ReportGrouping(group_by) if group_by else ReportGrouping.DAY
        except ValueError:
            grouping = ReportGrouping.DAY

        if grouping == ReportGrouping.USER and not is_admin:
            return ReportGrouping.DAY
        return grouping

    def aggregate(
        self,
        entries: List[TimeEntry],
        group_by: ReportGrouping,
        include_costs: bool = False
    ) -> List[ReportGroup]:
        """
        Partition entries into groups keyed by the grouping function.
        Groups keep the order in which their key was first seen.
        """
        key_function = self._key_functions[ReportGrouping(group_by)]
        groups: Dict[str, ReportGroup] = {}

        for entry in entries:
            key = key_function(entry)
            group = groups.get(key)
            if group is None:
                group = ReportGroup(key=key, total_costs=0.0 if include_costs else None)
                groups[key] = group

            group.entries.append(entry)

            # Running entries have no end time and contribute nothing
            hours = entry_hours(entry)
            group.total_hours += hours
            if include_costs:
                group.total_costs += hours * hourly_rate_of(entry)

        return list(groups.values())

    def detail_rows(self, entries: List[TimeEntry], include_costs: bool = False) -> List[DetailRow]:
        """Flatten entries into one row each, in the given order."""
        rows = []
        for entry in entries:
            hours = entry_hours(entry)
            rate = hourly_rate_of(entry) if include_costs else None
            rows.append(DetailRow(
                date=entry.date,
                start_time=entry.start_time.strftime("%H:%M") if entry.start_time else None,
                end_time=entry.end_time.strftime("%H:%M") if entry.end_time else None,
                duration_hours=hours,
                break_minutes=entry.break_minutes or 0,
                description=entry.description or "",
                employee=employee_name(entry),
                project=project_name(entry),
                status=entry.status.value,
                hourly_rate=rate,
                cost=hours * rate if include_costs else None
            ))
        return rows

    def summarize(self, groups: List[ReportGroup], include_costs: bool = False) -> Dict[str, Any]:
        """Grand totals over all groups."""
        summary = {
            "total_hours": self._round(sum(group.total_hours for group in groups)),
            "entry_count": sum(group.entry_count for group in groups),
        }
        if include_costs:
            summary["total_costs"] = self._round(sum(group.total_costs or 0.0 for group in groups))
        return summary

    def _round(self, value: float) -> float:
        """Round to two decimals, half up."""
        return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
