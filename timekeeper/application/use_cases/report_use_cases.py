"""
Report use cases for the application layer.
Loads the entries a caller may see and hands them to the report aggregator.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from timekeeper.application.use_cases.base_use_case import AuthorizedUseCase, CurrentUser
from timekeeper.application.dto.report_dto import ReportRequestDTO, ReportExportRequestDTO
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.repositories.time_entry_repository import TimeEntryRepository
from timekeeper.domain.services.report_service import ReportService, ReportGroup, ReportGrouping, DetailRow


logger = logging.getLogger(__name__)


@dataclass
class ReportData:
    """Aggregated report ready for display or export."""

    start_date: date
    end_date: date
    grouping: ReportGrouping
    groups: List[ReportGroup]
    include_costs: bool
    is_admin: bool
    total_entries: int
    summary: Dict[str, Any] = field(default_factory=dict)
    detailed: bool = False
    detail_rows: List[DetailRow] = field(default_factory=list)


class ReportUseCase(AuthorizedUseCase):
    """Shared entry scoping for report use cases."""

    def __init__(self, time_entry_repository: TimeEntryRepository, report_service: Optional[ReportService] = None):
        self.time_entry_repository = time_entry_repository
        self.report_service = report_service or ReportService()

    def _load_entries(self, current_user: CurrentUser, request: ReportRequestDTO) -> List[TimeEntry]:
        """
        Administrators see one user's entries when user_id is given and
        everybody's otherwise; other users always see their own.
        """
        if current_user.is_admin and request.user_id:
            return self.time_entry_repository.list_by_user(request.user_id, request.start_date, request.end_date)

        if current_user.is_admin:
            return self.time_entry_repository.list_all(request.start_date, request.end_date)

        return self.time_entry_repository.list_by_user(current_user.user_id, request.start_date, request.end_date)

    def _build(
        self,
        current_user: CurrentUser,
        request: ReportRequestDTO,
        include_costs: bool,
        detailed: bool = False
    ) -> ReportData:
        entries = self._load_entries(current_user, request)
        grouping = self.report_service.resolve_grouping(request.group_by, current_user.is_admin)
        groups = self.report_service.aggregate(entries, grouping, include_costs)

        return ReportData(
            start_date=request.start_date,
            end_date=request.end_date,
            grouping=grouping,
            groups=groups,
            include_costs=include_costs,
            is_admin=current_user.is_admin,
            total_entries=len(entries),
            summary=self.report_service.summarize(groups, include_costs),
            detailed=detailed,
            detail_rows=self.report_service.detail_rows(entries, include_costs) if detailed else []
        )


class GetReportDataUseCase(ReportUseCase):
    """Report data for on-screen display; administrators always see costs."""

    def execute(self, current_user: CurrentUser, request: ReportRequestDTO) -> ReportData:
        return self._build(current_user, request, include_costs=current_user.is_admin)


class ExportReportUseCase(ReportUseCase):
    """
    Report export as a file.
    Costs are included only when an administrator asks for them.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        exporter,
        report_service: Optional[ReportService] = None
    ):
        super().__init__(time_entry_repository, report_service)
        self.exporter = exporter

    def execute(self, current_user: CurrentUser, request: ReportExportRequestDTO):
        include_costs = current_user.is_admin and request.include_costs
        report = self._build(current_user, request, include_costs=include_costs, detailed=request.detailed)

        logger.info(
            "Exporting %s report (%s, %d entries) for user %s",
            request.format.value, report.grouping.value, report.total_entries, current_user.user_id
        )
        return self.exporter.export(report, request.format)
