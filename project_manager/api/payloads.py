# project_manager/api/payloads.py
"""
Request body decoding for endpoints that take either JSON or form data.

FastAPI binds a body parameter to one content type; updates accept both
`application/json` and `multipart/form-data` (or urlencoded forms), so the
body is read from the raw request here instead.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import FormData
from fastapi import Request

from project_manager.errors import MalformedInputError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")
LIST_FIELDS = ("stacks",)


def json_or_form_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """`openapi_extra` documenting a body that may be JSON or a form."""
    schema = model.model_json_schema(by_alias=True)
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema},
                "multipart/form-data": {"schema": schema},
            },
        }
    }


async def read_payload(request: Request, model: Type[ModelT]) -> ModelT:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        data = form_to_dict(form, model)
    else:
        body = await request.body()
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise MalformedInputError(f"Invalid JSON format: {exc}") from exc
        if not isinstance(data, dict):
            raise MalformedInputError("Invalid JSON format: expected an object")

    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise MalformedInputError(f"Invalid request: {problems}") from exc


def form_to_dict(form: FormData, model: Type[BaseModel]) -> Dict[str, Any]:
    """
    Pick the model's fields out of a parsed form.

    Both the camelCase alias and the snake_case name are accepted as form
    keys. List fields may be sent as repeated keys, a JSON array, or a
    comma-separated string.
    """
    data: Dict[str, Any] = {}
    for name, field in model.model_fields.items():
        for key in (field.alias, name):
            if not key or key not in form:
                continue
            if name in LIST_FIELDS:
                data[name] = split_list_field(key, form.getlist(key))
            else:
                value = form[key]
                if not isinstance(value, str):
                    raise MalformedInputError(f"Invalid form field {key}: expected text")
                data[name] = value
            break
    return data


def split_list_field(key: str, values: List[Any]) -> List[str]:
    texts = [v for v in values if isinstance(v, str)]
    if len(texts) != len(values):
        raise MalformedInputError(f"Invalid form field {key}: expected text")

    if len(texts) == 1:
        single = texts[0].strip()
        if single.startswith("["):
            try:
                parsed = json.loads(single)
            except ValueError as exc:
                raise MalformedInputError(f"Invalid form field {key}: {exc}") from exc
            if not isinstance(parsed, list):
                raise MalformedInputError(f"Invalid form field {key}: expected a list")
            return [str(x) for x in parsed]
        return [part.strip() for part in single.split(",") if part.strip()]

    return [t for t in texts if t]
