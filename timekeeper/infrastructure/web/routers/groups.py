"""
Group management router.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, status

from timekeeper.infrastructure.auth import get_current_user
from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.application.use_cases.project_use_cases import (
    ListGroupsUseCase,
    CreateGroupUseCase,
    UpdateGroupUseCase,
    DeleteGroupUseCase
)
from timekeeper.application.dto.project_dto import CreateGroupRequestDTO, UpdateGroupRequestDTO, GroupResponseDTO
from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.infrastructure.repositories.user_repository import SQLAlchemyGroupRepository
from timekeeper.infrastructure.web.dependencies import get_group_repository


router = APIRouter()


@router.get("", response_model=List[GroupResponseDTO])
def list_groups(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyGroupRepository, Depends(get_group_repository)]
):
    """List active groups ordered by name."""
    groups = ListGroupsUseCase(repository).execute(current_user)
    return [GroupResponseDTO.from_domain(group) for group in groups]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=GroupResponseDTO)
def create_group(
    request: CreateGroupRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyGroupRepository, Depends(get_group_repository)]
):
    """Create a group with a unique name (administrators only)."""
    group = CreateGroupUseCase(repository).execute(current_user, request)
    return GroupResponseDTO.from_domain(group)


@router.put("/{group_id}", response_model=GroupResponseDTO)
def update_group(
    group_id: str,
    request: UpdateGroupRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyGroupRepository, Depends(get_group_repository)]
):
    """Update a group (administrators only)."""
    group = UpdateGroupUseCase(repository).execute(current_user, group_id, request)
    return GroupResponseDTO.from_domain(group)


@router.delete("/{group_id}", response_model=MessageResponseDTO)
def delete_group(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyGroupRepository, Depends(get_group_repository)]
):
    """Deactivate a group (administrators only)."""
    DeleteGroupUseCase(repository).execute(current_user, group_id)
    return MessageResponseDTO(message="Group deactivated")
