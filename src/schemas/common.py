"""Response envelope shared by every endpoint."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_serializer

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Successful response envelope."""

    success: bool = True
    data: T | None = None
    message: str | None = None

    @model_serializer(mode="wrap")
    def omit_empty_keys(self, handler):
        return {key: value for key, value in handler(self).items() if value is not None}


class ErrorDetail(BaseModel):
    """A single field-level validation problem."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope."""

    success: bool = False
    error: str
    message: str | None = None
    details: list[Any] | None = None
