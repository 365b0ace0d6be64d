# project_manager/services/package_service.py
from __future__ import annotations

from project_manager.db.store import Store
from project_manager.schemas.packages import PackageItem
from project_manager.services.resource_service import ResourceService

# link and description are optional and stored as "" when omitted
PACKAGE_REQUIRED_FIELDS = ("name",)


class PackageService(ResourceService[PackageItem]):
    def __init__(self, store: Store):
        super().__init__(
            store.packages,
            PackageItem,
            required_fields=PACKAGE_REQUIRED_FIELDS,
        )
