# project_manager/schemas/packages.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from project_manager.schemas.common import ApiModel, decode_stacks


class PackageCreate(ApiModel):
    name: Optional[str] = Field(default=None, max_length=255, examples=["fastapi-crud"])
    link: Optional[str] = None
    description: Optional[str] = None
    stacks: Optional[List[str]] = None


class PackageUpdate(PackageCreate):
    pass


class PackageItem(ApiModel):
    id: int
    name: str
    link: str = ""
    description: str = ""
    stacks: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("stacks", mode="before")
    @classmethod
    def _decode_stacks(cls, value):
        return decode_stacks(value)
