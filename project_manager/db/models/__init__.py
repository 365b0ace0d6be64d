# project_manager/db/models/__init__.py

from project_manager.db.base import Base

from .clients import Client
from .packages import Package
from .projects import Project

__all__ = [
    "Base",
    "Client",
    "Package",
    "Project",
]
