"""
Project management router.
Every user can read active projects; administrators maintain them.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, status

from timekeeper.infrastructure.auth import get_current_user
from timekeeper.application.use_cases.base_use_case import CurrentUser
from timekeeper.application.use_cases.project_use_cases import (
    CreateProjectUseCase,
    UpdateProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    DeleteProjectUseCase
)
from timekeeper.application.dto.project_dto import (
    CreateProjectRequestDTO,
    UpdateProjectRequestDTO,
    ProjectResponseDTO
)
from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from timekeeper.infrastructure.web.dependencies import get_project_repository


router = APIRouter()


@router.get("", response_model=List[ProjectResponseDTO])
def list_projects(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
):
    """List active projects ordered by name."""
    projects = ListProjectsUseCase(repository).execute(current_user)
    return [ProjectResponseDTO.from_domain(project) for project in projects]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponseDTO)
def create_project(
    request: CreateProjectRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
):
    """
    Create a new project (administrators only).

    - **name**: Project name (required)
    - **description**: Project description
    - **color**: Display color as #RRGGBB
    """
    project = CreateProjectUseCase(repository).execute(current_user, request)
    return ProjectResponseDTO.from_domain(project)


@router.get("/{project_id}", response_model=ProjectResponseDTO)
def get_project(
    project_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
):
    """Get a specific project by ID."""
    project = GetProjectUseCase(repository).execute(current_user, project_id)
    return ProjectResponseDTO.from_domain(project)


@router.put("/{project_id}", response_model=ProjectResponseDTO)
def update_project(
    project_id: str,
    request: UpdateProjectRequestDTO,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
):
    """Update a project (administrators only)."""
    project = UpdateProjectUseCase(repository).execute(current_user, project_id, request)
    return ProjectResponseDTO.from_domain(project)


@router.delete("/{project_id}", response_model=MessageResponseDTO)
def delete_project(
    project_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)]
):
    """Deactivate a project; existing entries keep pointing to it."""
    DeleteProjectUseCase(repository).execute(current_user, project_id)
    return MessageResponseDTO(message="Project deactivated")
