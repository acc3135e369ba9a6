"""
Reports router.
Aggregated report data for display and file exports.
"""

from typing import Annotated, Optional
from datetime import date
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from timekeeper.infrastructure.auth import get_current_user
from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.application.use_cases.report_use_cases import GetReportDataUseCase, ExportReportUseCase
from timekeeper.application.dto.report_dto import (
    ExportFormat,
    ReportRequestDTO,
    ReportExportRequestDTO,
    ReportGroupDTO,
    ReportDataResponseDTO
)
from timekeeper.infrastructure.export.export_service import ReportExporter
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from timekeeper.infrastructure.web.dependencies import get_time_entry_repository, get_report_exporter


router = APIRouter()


@router.get("/data", response_model=ReportDataResponseDTO)
def get_report_data(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    start_date: date = Query(..., alias="startDate", description="First day, inclusive"),
    end_date: date = Query(..., alias="endDate", description="Last day, inclusive"),
    group_by: Optional[str] = Query("day", alias="groupBy", description="day, week, month, project or user"),
    user_id: Optional[str] = Query(None, alias="userId", description="Restrict to one user (admins only)")
):
    """
    Aggregate the caller's visible entries.

    Administrators see every user's entries (or one user's with **userId**)
    and always get costs; grouping by user is reserved to them.
    """
    request = ReportRequestDTO(start_date=start_date, end_date=end_date, group_by=group_by, user_id=user_id)
    report = GetReportDataUseCase(repository).execute(current_user, request)

    return ReportDataResponseDTO(
        data=[ReportGroupDTO.from_domain(group) for group in report.groups],
        group_by=report.grouping,
        is_admin=report.is_admin,
        total_entries=report.total_entries,
        summary=report.summary
    )


@router.get("/export")
def export_report(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    exporter: Annotated[ReportExporter, Depends(get_report_exporter)],
    start_date: date = Query(..., alias="startDate", description="First day, inclusive"),
    end_date: date = Query(..., alias="endDate", description="Last day, inclusive"),
    group_by: Optional[str] = Query("day", alias="groupBy", description="day, week, month, project or user"),
    export_format: ExportFormat = Query(ExportFormat.CSV, alias="format", description="csv, xlsx or pdf"),
    include_costs: bool = Query(False, alias="includeCosts", description="Add costs (admins only)"),
    detailed: bool = Query(False, description="One row per entry"),
    user_id: Optional[str] = Query(None, alias="userId", description="Restrict to one user (admins only)")
):
    """Download the report as a CSV, XLSX or PDF file."""
    request = ReportExportRequestDTO(
        start_date=start_date,
        end_date=end_date,
        group_by=group_by,
        user_id=user_id,
        format=export_format,
        include_costs=include_costs,
        detailed=detailed
    )
    exported = ExportReportUseCase(repository, exporter).execute(current_user, request)

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'}
    )
