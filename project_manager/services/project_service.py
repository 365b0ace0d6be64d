# project_manager/services/project_service.py
from __future__ import annotations

from project_manager.db.store import Store
from project_manager.schemas.projects import ProjectItem
from project_manager.services.resource_service import ResourceService

PROJECT_REQUIRED_FIELDS = ("name", "image_url", "link", "description")


class ProjectService(ResourceService[ProjectItem]):
    def __init__(self, store: Store):
        super().__init__(
            store.projects,
            ProjectItem,
            required_fields=PROJECT_REQUIRED_FIELDS,
        )
