"""
Overtime balance router.
"""

from typing import Annotated, Optional
from fastapi import APIRouter, Depends, Query

from timekeeper.infrastructure.auth import get_current_user, get_user_repository
from timekeeper.application.use_cases.base_use_case import CurrentUser, Clock
from timekeeper.application.use_cases.balance_use_cases import GetBalanceUseCase
from timekeeper.application.dto.report_dto import BalanceResponseDTO
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from timekeeper.infrastructure.repositories.project_repository import SQLAlchemyHolidayRepository
from timekeeper.infrastructure.web.dependencies import (
    get_time_entry_repository,
    get_holiday_repository,
    get_clock
)


router = APIRouter()


@router.get("", response_model=BalanceResponseDTO)
def get_balance(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    user_repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    holiday_repository: Annotated[SQLAlchemyHolidayRepository, Depends(get_holiday_repository)],
    clock: Annotated[Clock, Depends(get_clock)],
    user_id: Optional[str] = Query(None, alias="userId", description="Another user's balance (admins only)")
):
    """
    Worked hours, target hours and balance for today, this week, this month
    and the whole recorded history. Positive balances are overtime.
    """
    use_case = GetBalanceUseCase(repository, user_repository, holiday_repository, clock=clock)
    user, summary = use_case.execute(current_user, user_id)
    return BalanceResponseDTO.from_domain(user.id, summary)
