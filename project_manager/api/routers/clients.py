import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from project_manager.api.deps import get_client_service, record_id_path
from project_manager.api.payloads import json_or_form_body, read_payload
from project_manager.schemas.common import MessageResponse
from project_manager.schemas.clients import ClientCreate, ClientItem, ClientUpdate
from project_manager.services.client_service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clients", tags=["clients"])

ERRORS = {
    400: {"description": "Invalid input"},
    409: {"description": "Client name already exists"},
    500: {"description": "Database error"},
}


@router.post(
    "/new",
    response_model=ClientItem,
    status_code=201,
    summary="Create a new client",
    responses=ERRORS,
)
def create_client(data: ClientCreate, service: ClientService = Depends(get_client_service)):
    return service.create(data)


@router.get("", response_model=List[ClientItem], summary="Get all clients")
def list_clients(service: ClientService = Depends(get_client_service)):
    return service.list_all()


@router.get(
    "/{client_id}",
    response_model=ClientItem,
    summary="Get a client by ID",
    responses={404: {"description": "Client not found"}, **ERRORS},
)
def get_client(
    client_id: int = record_id_path("Client ID"),
    service: ClientService = Depends(get_client_service),
):
    return service.get(client_id)


@router.put(
    "/{client_id}",
    response_model=ClientItem,
    summary="Update a client",
    description="Only non-empty fields are applied. Accepts JSON or multipart form data.",
    responses={404: {"description": "Client not found"}, **ERRORS},
    openapi_extra=json_or_form_body(ClientUpdate),
)
async def update_client(
    request: Request,
    client_id: int = record_id_path("Client ID"),
    service: ClientService = Depends(get_client_service),
):
    payload = await read_payload(request, ClientUpdate)
    return await run_in_threadpool(service.update, client_id, payload)


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Delete a client",
    responses={404: {"description": "Client not found"}, **ERRORS},
)
def delete_client(
    client_id: int = record_id_path("Client ID"),
    service: ClientService = Depends(get_client_service),
):
    return service.delete(client_id)
