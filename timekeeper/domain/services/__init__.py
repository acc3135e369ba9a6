"""
Domain services for time tracking.
Pure business logic that does not belong to a single entity.
"""

from .timer_service import TimerService, calculate_duration, entry_hours, format_duration
from .balance_service import BalanceService, BalanceSummary, PeriodBalance, balance_label
from .report_service import ReportService, ReportGroup, ReportGrouping, DetailRow

__all__ = [
    "TimerService",
    "calculate_duration",
    "entry_hours",
    "format_duration",
    "BalanceService",
    "BalanceSummary",
    "PeriodBalance",
    "balance_label",
    "ReportService",
    "ReportGroup",
    "ReportGrouping",
    "DetailRow",
]
