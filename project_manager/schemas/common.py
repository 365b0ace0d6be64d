# project_manager/schemas/common.py
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class ApiModel(BaseModel):
    """
    Base for every request/response body.

    Fields are declared in snake_case and exposed as camelCase on the wire
    (`image_url` <-> `imageUrl`); requests may use either spelling.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


def encode_stacks(stacks: Optional[Iterable[str]]) -> str:
    """Serialize a stacks list for the text column. Missing means empty."""
    return json.dumps(list(stacks) if stacks is not None else [])


def decode_stacks(raw: Any) -> List[str]:
    """
    Read a stacks column back into a list.

    Anything that is not a JSON array (NULL, garbage, a bare string) reads
    as an empty list.
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (list, tuple)):
        return [str(x) for x in raw]
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Unreadable stacks value %r, treating as empty", raw)
        return []
    if not isinstance(value, list):
        return []
    return [str(x) for x in value]
