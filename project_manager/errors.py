# =============================================================================
# project_manager/errors.py - Error taxonomy and exception handlers
# =============================================================================
# Every error a request can end in maps to exactly one HTTP status code.
# =============================================================================
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ProjectManagerError(Exception):
    """
    Base exception for request-terminating errors.

    Subclasses fix the HTTP status code; the message becomes the `detail`
    field of the JSON error body.
    """

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message}


class ValidationError(ProjectManagerError):
    """A required field is missing or empty, or a value breaks a field rule."""

    status_code = 400


class MalformedInputError(ProjectManagerError):
    """The request body or path could not be parsed."""

    status_code = 400


class NotFoundError(ProjectManagerError):
    """No record with the requested id exists."""

    status_code = 404

    def __init__(self, label: str, record_id: Any = None):
        super().__init__(f"{label} not found")
        self.label = label
        self.record_id = record_id


class StoreError(ProjectManagerError):
    """The backing store failed to carry out an operation."""

    status_code = 500


class ConflictError(StoreError):
    """A write violated a uniqueness constraint."""

    status_code = 409


class StartupError(RuntimeError):
    """The store could not be opened at process start."""


# =============================================================================
# Exception Handlers
# =============================================================================

async def project_manager_exception_handler(
    request: Request,
    exc: ProjectManagerError,
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Report FastAPI's own body/path parsing failures as malformed input.

    FastAPI answers 422 by default; this API answers 400 for every
    client-side input problem.
    """
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    error = MalformedInputError("Invalid request: " + "; ".join(problems))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())
