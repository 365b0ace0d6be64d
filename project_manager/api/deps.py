# project_manager/api/deps.py
from __future__ import annotations

from fastapi import Depends, Path, Request

from project_manager.db.store import Store
from project_manager.errors import StoreError
from project_manager.services.client_service import ClientService
from project_manager.services.package_service import PackageService
from project_manager.services.project_service import ProjectService


def get_store(request: Request) -> Store:
    """Return the store attached to the app at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreError("Database is not initialised")
    return store


def get_project_service(store: Store = Depends(get_store)) -> ProjectService:
    return ProjectService(store)


def get_package_service(store: Store = Depends(get_store)) -> PackageService:
    return PackageService(store)


def get_client_service(store: Store = Depends(get_store)) -> ClientService:
    return ClientService(store)


# ids are INTEGER primary keys; anything outside 1..2**31-1 can never match a row
MAX_RECORD_ID = 2**31 - 1


def record_id_path(description: str):
    return Path(..., ge=1, le=MAX_RECORD_ID, description=description)
