"""
Response envelope shared by every endpoint.

Success:  {"success": true,  "data": <payload or null>, "error": null}
Failure:  {"success": false, "data": null, "error": {"code": ..., "message": ...}}
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[Any] = None


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[ErrorBody] = None

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls, code: str, message: str, details: Optional[Any] = None
    ) -> "ApiResponse[T]":
        return cls(
            success=False,
            error=ErrorBody(code=code, message=message, details=details),
        )
