import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from project_manager.api.deps import get_project_service, record_id_path
from project_manager.api.payloads import json_or_form_body, read_payload
from project_manager.schemas.common import MessageResponse
from project_manager.schemas.projects import ProjectCreate, ProjectItem, ProjectUpdate
from project_manager.services.project_service import ProjectService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])

ERRORS = {400: {"description": "Invalid input"}, 500: {"description": "Database error"}}


@router.post(
    "/new",
    response_model=ProjectItem,
    status_code=201,
    summary="Create a new project",
    responses=ERRORS,
)
def create_project(data: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    return service.create(data)


@router.get("", response_model=List[ProjectItem], summary="Get all projects")
def list_projects(service: ProjectService = Depends(get_project_service)):
    return service.list_all()


@router.get(
    "/{project_id}",
    response_model=ProjectItem,
    summary="Get a project by ID",
    responses={404: {"description": "Project not found"}, **ERRORS},
)
def get_project(
    project_id: int = record_id_path("Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    return service.get(project_id)


@router.put(
    "/{project_id}",
    response_model=ProjectItem,
    summary="Update a project",
    description="Only non-empty fields are applied. Accepts JSON or multipart form data.",
    responses={404: {"description": "Project not found"}, **ERRORS},
    openapi_extra=json_or_form_body(ProjectUpdate),
)
async def update_project(
    request: Request,
    project_id: int = record_id_path("Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    payload = await read_payload(request, ProjectUpdate)
    return await run_in_threadpool(service.update, project_id, payload)


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Delete a project",
    responses={404: {"description": "Project not found"}, **ERRORS},
)
def delete_project(
    project_id: int = record_id_path("Project ID"),
    service: ProjectService = Depends(get_project_service),
):
    return service.delete(project_id)
