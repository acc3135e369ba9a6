"""
Unit tests for ReportService domain service.
"""

from datetime import date, datetime, time
from decimal import Decimal

from timekeeper.domain.services.report_service import (
    ReportService,
    ReportGrouping,
    NO_PROJECT,
    UNKNOWN_USER,
    week_start_sunday
)
from timekeeper.domain.services.timer_service import entry_hours
from timekeeper.domain.models.project import Project
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.models.user import User


ANNA = User(id="u-1", username="anna", first_name="Anna", last_name="Schmidt", hourly_rate=Decimal("20.00"))
BEN = User(id="u-2", username="ben", first_name="Ben", hourly_rate=None)
INTERNAL = Project(id="p-1", name="Internes Projekt")


def entry(day: date, start: time, end: time, user: User = ANNA, project: Project = None, break_minutes: int = 0, entry_id: str = None):
    return TimeEntry(
        id=entry_id,
        user_id=user.id,
        project_id=project.id if project else None,
        date=day,
        start_time=datetime.combine(day, start),
        end_time=datetime.combine(day, end),
        break_minutes=break_minutes,
        user=user,
        project=project
    )


class TestReportService:
    """Test cases for ReportService domain service."""

    def setup_method(self):
        """Set up test fixtures."""
        self.report_service = ReportService()
        self.working_day = entry(date(2024, 1, 1), time(9, 0), time(17, 0), break_minutes=30, entry_id="e-1")

    def test_single_entry_grouped_by_day(self):
        """Test one 7.5 hour entry yields one day group."""
        groups = self.report_service.aggregate([self.working_day], ReportGrouping.DAY)

        assert len(groups) == 1
        assert groups[0].key == "2024-01-01"
        assert groups[0].total_hours == 7.5
        assert groups[0].entries == [self.working_day]
        assert groups[0].total_costs is None

    def test_costs_use_hourly_rate(self):
        """Test 7.5 hours at 20.00 cost 150.00."""
        groups = self.report_service.aggregate([self.working_day], ReportGrouping.DAY, include_costs=True)

        assert groups[0].total_costs == 150.0

    def test_missing_rate_costs_nothing(self):
        """Test users without a rate add zero cost."""
        ben_entry = entry(date(2024, 1, 1), time(8, 0), time(10, 0), user=BEN)

        groups = self.report_service.aggregate([ben_entry], ReportGrouping.USER, include_costs=True)

        assert groups[0].key == "Ben"
        assert groups[0].total_costs == 0.0

    def test_day_grouping_partitions_entries(self):
        """Test groups are disjoint, cover all entries and keep the hour total."""
        entries = [
            entry(date(2024, 1, 1), time(8, 0), time(12, 0), entry_id="a"),
            entry(date(2024, 1, 2), time(8, 0), time(9, 30), entry_id="b"),
            entry(date(2024, 1, 1), time(13, 0), time(15, 0), user=BEN, entry_id="c"),
            entry(date(2024, 1, 3), time(9, 0), time(9, 45), break_minutes=15, entry_id="d"),
        ]

        groups = self.report_service.aggregate(entries, ReportGrouping.DAY)

        grouped_ids = [item.id for group in groups for item in group.entries]
        assert sorted(grouped_ids) == ["a", "b", "c", "d"]
        assert len(grouped_ids) == len(set(grouped_ids))
        assert sum(group.total_hours for group in groups) == sum(entry_hours(item) for item in entries)

    def test_groups_keep_first_seen_order(self):
        """Test group order follows the first appearance of each key."""
        entries = [
            entry(date(2024, 1, 3), time(8, 0), time(9, 0)),
            entry(date(2024, 1, 1), time(8, 0), time(9, 0)),
            entry(date(2024, 1, 3), time(10, 0), time(11, 0)),
        ]

        groups = self.report_service.aggregate(entries, ReportGrouping.DAY)

        assert [group.key for group in groups] == ["2024-01-03", "2024-01-01"]
        assert groups[0].entry_count == 2

    def test_week_grouping_starts_on_sunday(self):
        """Test report weeks are keyed by their Sunday."""
        # 2024-01-10 is a Wednesday, 2024-01-07 a Sunday
        assert week_start_sunday(date(2024, 1, 10)) == date(2024, 1, 7)
        assert week_start_sunday(date(2024, 1, 7)) == date(2024, 1, 7)

        groups = self.report_service.aggregate(
            [entry(date(2024, 1, 10), time(8, 0), time(9, 0))], ReportGrouping.WEEK
        )
        assert groups[0].key == "2024-01-07"

    def test_month_and_project_keys(self):
        """Test month keys and the no-project sentinel."""
        entries = [
            entry(date(2024, 2, 5), time(8, 0), time(9, 0), project=INTERNAL),
            entry(date(2024, 2, 6), time(8, 0), time(9, 0)),
        ]

        months = self.report_service.aggregate(entries, ReportGrouping.MONTH)
        projects = self.report_service.aggregate(entries, ReportGrouping.PROJECT)

        assert [group.key for group in months] == ["2024-02"]
        assert [group.key for group in projects] == ["Internes Projekt", NO_PROJECT]

    def test_user_grouping_names(self):
        """Test user keys use the full name or the unknown sentinel."""
        orphan = TimeEntry(
            user_id="u-9",
            date=date(2024, 1, 1),
            start_time=datetime(2024, 1, 1, 8, 0),
            end_time=datetime(2024, 1, 1, 9, 0)
        )

        groups = self.report_service.aggregate([self.working_day, orphan], ReportGrouping.USER)

        assert [group.key for group in groups] == ["Anna Schmidt", UNKNOWN_USER]

    def test_running_entries_count_zero_hours(self):
        """Test running entries are grouped but add no hours."""
        running = TimeEntry.start_timer("u-1", datetime(2024, 1, 1, 18, 0), date(2024, 1, 1))

        groups = self.report_service.aggregate([self.working_day, running], ReportGrouping.DAY)

        assert groups[0].entry_count == 2
        assert groups[0].total_hours == 7.5

    def test_resolve_grouping(self):
        """Test user grouping is admin-only and unknown values fall back to day."""
        assert self.report_service.resolve_grouping("user", is_admin=True) == ReportGrouping.USER
        assert self.report_service.resolve_grouping("user", is_admin=False) == ReportGrouping.DAY
        assert self.report_service.resolve_grouping("quarter", is_admin=True) == ReportGrouping.DAY
        assert self.report_service.resolve_grouping(None, is_admin=False) == ReportGrouping.DAY
        assert self.report_service.resolve_grouping("project", is_admin=False) == ReportGrouping.PROJECT

    def test_detail_rows(self):
        """Test detail rows flatten entries with optional rate and cost."""
        rows = self.report_service.detail_rows([self.working_day], include_costs=True)

        assert len(rows) == 1
        row = rows[0]
        assert row.start_time == "09:00"
        assert row.end_time == "17:00"
        assert row.duration_hours == 7.5
        assert row.break_minutes == 30
        assert row.employee == "Anna Schmidt"
        assert row.project == NO_PROJECT
        assert row.status == "draft"
        assert row.hourly_rate == 20.0
        assert row.cost == 150.0

    def test_detail_rows_without_costs(self):
        """Test cost columns stay empty unless requested."""
        row = self.report_service.detail_rows([self.working_day])[0]

        assert row.hourly_rate is None
        assert row.cost is None

    def test_summarize(self):
        """Test grand totals are rounded to two decimals."""
        entries = [
            self.working_day,
            entry(date(2024, 1, 2), time(9, 0), time(9, 20)),
        ]
        groups = self.report_service.aggregate(entries, ReportGrouping.DAY, include_costs=True)

        summary = self.report_service.summarize(groups, include_costs=True)

        assert summary["total_hours"] == 7.83
        assert summary["entry_count"] == 2
        assert summary["total_costs"] == 156.67
