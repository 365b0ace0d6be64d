import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from project_manager.api.deps import get_package_service, record_id_path
from project_manager.api.payloads import json_or_form_body, read_payload
from project_manager.schemas.common import MessageResponse
from project_manager.schemas.packages import PackageCreate, PackageItem, PackageUpdate
from project_manager.services.package_service import PackageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/packages", tags=["packages"])

ERRORS = {400: {"description": "Invalid input"}, 500: {"description": "Database error"}}


@router.post(
    "/new",
    response_model=PackageItem,
    status_code=201,
    summary="Create a new package",
    responses=ERRORS,
)
def create_package(data: PackageCreate, service: PackageService = Depends(get_package_service)):
    return service.create(data)


@router.get("", response_model=List[PackageItem], summary="Get all packages")
def list_packages(service: PackageService = Depends(get_package_service)):
    return service.list_all()


@router.get(
    "/{package_id}",
    response_model=PackageItem,
    summary="Get a package by ID",
    responses={404: {"description": "Package not found"}, **ERRORS},
)
def get_package(
    package_id: int = record_id_path("Package ID"),
    service: PackageService = Depends(get_package_service),
):
    return service.get(package_id)


@router.put(
    "/{package_id}",
    response_model=PackageItem,
    summary="Update a package",
    description="Only non-empty fields are applied. Accepts JSON or multipart form data.",
    responses={404: {"description": "Package not found"}, **ERRORS},
    openapi_extra=json_or_form_body(PackageUpdate),
)
async def update_package(
    request: Request,
    package_id: int = record_id_path("Package ID"),
    service: PackageService = Depends(get_package_service),
):
    payload = await read_payload(request, PackageUpdate)
    return await run_in_threadpool(service.update, package_id, payload)


@router.delete(
    "/{package_id}",
    response_model=MessageResponse,
    summary="Delete a package",
    responses={404: {"description": "Package not found"}, **ERRORS},
)
def delete_package(
    package_id: int = record_id_path("Package ID"),
    service: PackageService = Depends(get_package_service),
):
    return service.delete(package_id)
