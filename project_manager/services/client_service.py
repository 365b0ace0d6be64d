# project_manager/services/client_service.py
from __future__ import annotations

from project_manager.db.store import Store
from project_manager.schemas.clients import ClientItem
from project_manager.services.resource_service import ResourceService

CLIENT_REQUIRED_FIELDS = ("name", "link", "image_url")


class ClientService(ResourceService[ClientItem]):
    """
    Clients are unique by name; a duplicate name on create or update is
    reported by the store as a ConflictError (409).
    """

    def __init__(self, store: Store):
        super().__init__(
            store.clients,
            ClientItem,
            required_fields=CLIENT_REQUIRED_FIELDS,
        )
