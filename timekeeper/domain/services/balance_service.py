"""Balance service for overtime and undertime calculations.
Compares worked hours against a user's target hours over several windows.
"""

from dataclasses import dataclass, asdict
from datetime import date, timedelta
from typing import Iterable, List, Dict, Any, Optional, Sequence

from timekeeper.domain.models.holiday import Holiday
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.services.timer_service import entry_hours


WORKING_DAYS_PER_WEEK = 5
WORKING_DAYS_PER_MONTH = 22


@dataclass(frozen=True)
class PeriodBalance:
    """Worked against target hours for one window."""

    worked_hours: float
    target_hours: float

    @property
    def balance(self) -> float:
        """Positive means overtime, negative means undertime."""
        return self.worked_hours - self.target_hours

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["balance"] = self.balance
        data["label"] = balance_label(self.balance)
        return data


@dataclass(frozen=True)
class BalanceSummary:
    """Balances for today, the current week, the current month and all time."""

    today: PeriodBalance
    week: PeriodBalance
    month: PeriodBalance
    total: PeriodBalance

    def to_dict(self) -> Dict[str, Any]:
        return {
            "today": self.today.to_dict(),
            "week": self.week.to_dict(),
            "month": self.month.to_dict(),
            "total": self.total.to_dict(),
        }


def balance_label(balance: float) -> str:
    """Presentation label for a signed balance."""
    if balance > 0:
        return "Überstunden"
    if balance < 0:
        return "Minusstunden"
    return "Ausgeglichen"


def start_of_week(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def is_holiday(day: date, holidays: Iterable[Holiday]) -> bool:
    """Check whether any holiday falls on the given day."""
    return any(holiday.falls_on(day) for holiday in holidays)


def count_working_days(start: date, end: date, holidays: Sequence[Holiday] = ()) -> int:
    """Monday to Friday days in [start, end] that are not holidays."""
    days = 0
    current = start
    while current <= end:
        if current.weekday() < 5 and not is_holiday(current, holidays):
            days += 1
        current += timedelta(days=1)
    return days


def calculate_target_hours_for_period(
    start: date,
    end: date,
    target_hours_per_day: float,
    holidays: Sequence[Holiday] = ()
) -> float:
    """Target hours for a period, counting only working days."""
    return count_working_days(start, end, holidays) * target_hours_per_day


class BalanceService:
    """
    Domain service for balance calculations.

    Day, week and month targets use fixed multipliers of the daily target
    (1, 5 and 22). Only the all-time balance is holiday-aware: its baseline is
    the number of working days from the user's first entry up to today.
    Running entries contribute no hours.
    """

    def calculate_balance(
        self,
        entries: List[TimeEntry],
        target_hours_per_day: float,
        today: date,
        holidays: Optional[Sequence[Holiday]] = None
    ) -> BalanceSummary:
        """
        Compute balances for today, this week (Monday..today), this month
        (1st..today) and the total since the earliest entry.
        """
        holidays = holidays or ()
        closed_entries = [entry for entry in entries if not entry.is_running]

        week_start = start_of_week(today)
        month_start = today.replace(day=1)

        today_worked = self._worked_hours(closed_entries, today, today)
        week_worked = self._worked_hours(closed_entries, week_start, today)
        month_worked = self._worked_hours(closed_entries, month_start, today)

        return BalanceSummary(
            today=PeriodBalance(today_worked, float(target_hours_per_day)),
            week=PeriodBalance(week_worked, float(target_hours_per_day * WORKING_DAYS_PER_WEEK)),
            month=PeriodBalance(month_worked, float(target_hours_per_day * WORKING_DAYS_PER_MONTH)),
            total=self._total_balance(entries, closed_entries, target_hours_per_day, today, holidays),
        )

    def _worked_hours(self, entries: List[TimeEntry], start: date, end: date) -> float:
        """Sum net hours of entries whose date lies in [start, end]."""
        return sum(
            entry_hours(entry)
            for entry in entries
            if entry.date is not None and start <= entry.date <= end
        )

    def _total_balance(
        self,
        entries: List[TimeEntry],
        closed_entries: List[TimeEntry],
        target_hours_per_day: float,
        today: date,
        holidays: Sequence[Holiday]
    ) -> PeriodBalance:
        """All-time balance measured from the first recorded day."""
        dates = [entry.date for entry in entries if entry.date is not None and entry.date <= today]
        if not dates:
            return PeriodBalance(0.0, 0.0)

        first_day = min(dates)
        worked = self._worked_hours(closed_entries, first_day, today)
        target = calculate_target_hours_for_period(first_day, today, target_hours_per_day, holidays)
        return PeriodBalance(worked, float(target))
