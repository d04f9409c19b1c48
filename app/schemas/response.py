# app/schemas/response.py
import enum
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorKind(enum.Enum):
    VALIDATION_FAILED = "ValidationFailed"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    CONFLICT = "Conflict"
    UNAUTHORIZED = "Unauthorized"


class ApiResponse(BaseModel, Generic[T]):
    """Uniform result envelope returned by every service call.

    ``error_kind`` is for the transport layer only and never serialized.
    """

    success: bool = False
    message: Optional[str] = None
    data: Optional[T] = None
    errors: List[str] = Field(default_factory=list)
    error_kind: Optional[ErrorKind] = Field(default=None, exclude=True)

    @classmethod
    def ok(cls, data: Optional[T] = None, message: Optional[str] = None) -> "ApiResponse[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        errors: Optional[List[str]] = None,
    ) -> "ApiResponse[T]":
        return cls(success=False, message=message, errors=errors or [], error_kind=kind)
