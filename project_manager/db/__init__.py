# project_manager/db/__init__.py

from .base import Base
from .store import Store, open_store
from . import models  # noqa: F401  # ensure models are imported so Base.metadata is populated

__all__ = [
    "Base",
    "Store",
    "open_store",
    "models",
]
