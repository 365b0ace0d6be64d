from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from project_manager.db.models.clients import CLIENT_NAME_MAX_LENGTH
from project_manager.schemas.common import ApiModel


class ClientCreate(ApiModel):
    name: Optional[str] = Field(default=None, max_length=CLIENT_NAME_MAX_LENGTH, examples=["Acme Corp"])
    link: Optional[str] = Field(default=None, examples=["https://acme.example"])
    image_url: Optional[str] = Field(default=None, examples=["https://acme.example/logo.png"])


class ClientUpdate(ClientCreate):
    pass


class ClientItem(ApiModel):
    id: int
    name: str
    link: str
    image_url: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
