# project_manager/schemas/projects.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from project_manager.schemas.common import ApiModel, decode_stacks


class ProjectCreate(ApiModel):
    """
    Payload for creating a new project.

    name, imageUrl, link and description must all be non-empty.
    """
    name: Optional[str] = Field(default=None, max_length=255, examples=["Demo"])
    image_url: Optional[str] = Field(default=None, examples=["http://x/im.png"])
    link: Optional[str] = Field(default=None, examples=["http://x"])
    description: Optional[str] = Field(default=None, examples=["d"])
    stacks: Optional[List[str]] = Field(default=None, examples=[["python", "postgres"]])


class ProjectUpdate(ProjectCreate):
    """
    Payload for updating a project.

    Only non-empty fields are applied; everything else keeps its stored value.
    """


class ProjectItem(ApiModel):
    """
    A single project, as returned to the frontend.
    """
    id: int
    name: str
    image_url: str
    link: str
    description: str
    stacks: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("stacks", mode="before")
    @classmethod
    def _decode_stacks(cls, value):
        return decode_stacks(value)
