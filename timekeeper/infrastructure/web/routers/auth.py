"""
Authentication router.
Exposes the profile of the user the bearer token belongs to.
"""

from typing import Annotated
from fastapi import APIRouter, Depends

from timekeeper.infrastructure.auth import get_current_user
from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.application.dto.user_dto import UserResponseDTO


router = APIRouter()


@router.get("/user", response_model=UserResponseDTO)
def get_current_user_profile(current_user: Annotated[CurrentUser, Depends(get_current_user)]):
    """Get the current user's profile, including role and targets."""
    return UserResponseDTO.from_domain(current_user.user)
