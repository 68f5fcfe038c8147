"""JSON bodies shared by every onboarding endpoint.

Successes are wrapped as {"data": ...}; failures as {"error": {...}},
built by the handlers in app.main.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Success body: {"data": <payload>}."""

    data: T


class ErrorDetail(BaseModel):
    """Inner error object.

    Attributes:
        code: Stable identifier clients branch on (e.g., "QUERY_FAILED").
        message: Text safe to show the user.
        details: Per-field problems, set only for validation failures.
    """

    code: str
    message: str
    details: list[dict] | None = None


class ErrorResponse(BaseModel):
    """Failure body: {"error": ErrorDetail}."""

    error: ErrorDetail
