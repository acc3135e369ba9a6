"""
Holiday calendar router.
Holidays are excluded from the working days of the overtime balance.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, status

from timekeeper.infrastructure.auth import get_current_user
from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.application.use_cases.project_use_cases import (
    ListHolidaysUseCase,
    CreateHolidayUseCase,
    UpdateHolidayUseCase,
    DeleteHolidayUseCase
)
from timekeeper.application.dto.project_dto import (
    CreateHolidayRequestDTO,
    UpdateHolidayRequestDTO,
    HolidayResponseDTO
)
from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.infrastructure.repositories.project_repository import SQLAlchemyHolidayRepository
from timekeeper.infrastructure.web.dependencies import get_holiday_repository


router = APIRouter()


@router.get("", response_model=List[HolidayResponseDTO])
def list_holidays(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyHolidayRepository, Depends(get_holiday_repository)]
):
    holidays = ListHolidaysUseCase(repository).execute(current_user)
    return [HolidayResponseDTO.from_domain(holiday) for holiday in holidays]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=HolidayResponseDTO)
def create_holiday(
    request: CreateHolidayRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyHolidayRepository, Depends(get_holiday_repository)]
):
    """
    Create a holiday (administrators only).

    - **isRecurring**: Repeats on the same month and day every year
    """
    holiday = CreateHolidayUseCase(repository).execute(current_user, request)
    return HolidayResponseDTO.from_domain(holiday)


@router.put("/{holiday_id}", response_model=HolidayResponseDTO)
def update_holiday(
    holiday_id: str,
    request: UpdateHolidayRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyHolidayRepository, Depends(get_holiday_repository)]
):
    holiday = UpdateHolidayUseCase(repository).execute(current_user, holiday_id, request)
    return HolidayResponseDTO.from_domain(holiday)


@router.delete("/{holiday_id}", response_model=MessageResponseDTO)
def delete_holiday(
    holiday_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyHolidayRepository, Depends(get_holiday_repository)]
):
    DeleteHolidayUseCase(repository).execute(current_user, holiday_id)
    return MessageResponseDTO(message="Holiday deleted")
