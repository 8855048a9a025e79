# dating_api/schemas/common.py

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    - camelCase on the wire, snake_case in Python
    - readable straight off ORM objects
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(APIModel):
    """
    Base for request bodies: unknown fields are rejected so the frontend gets
    early feedback on mistakes.
    """

    model_config = ConfigDict(extra="forbid")


def require_text(value: str) -> str:
    """
    Explicit non-empty check: surrounding whitespace is dropped and an empty
    result is rejected, so ``""`` and ``"   "`` both fail validation.
    """
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class FieldError(APIModel):
    field: str = Field(..., description="Dotted path of the offending field.")
    message: str


class ErrorDetail(APIModel):
    """
    Machine- and human-readable error description.
    """

    code: str = Field(
        ...,
        description="Stable, machine-readable error code (e.g. 'duplicate_email').",
    )
    message: str = Field(
        ...,
        description="Human-readable explanation of the error.",
    )
    details: Optional[Any] = Field(
        default=None,
        description="Optional structured details (field errors, etc.).",
    )


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    error: ErrorDetail


def error_body(code: str, message: str, details: Any = None) -> dict:
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    ).model_dump(by_alias=True)


def field_errors(errors: List[dict]) -> List[dict]:
    """
    Flatten pydantic/FastAPI validation errors into ``{field, message}`` rows.

    The leading location segment ("body", "query", ...) is dropped.
    """
    rows: List[dict] = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        message = str(err.get("msg", "invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        rows.append(
            FieldError(field=".".join(loc) or "body", message=message).model_dump()
        )
    return rows


__all__ = [
    "APIModel",
    "RequestModel",
    "require_text",
    "FieldError",
    "ErrorDetail",
    "ErrorResponse",
    "error_body",
    "field_errors",
]
