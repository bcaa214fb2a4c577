"""
Shared error handling for the Kong admin API access layer.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class AdminApiException(Exception):
    """Base exception for the admin API access layer."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class HttpError(AdminApiException):
    """Non-success HTTP status returned by the admin API."""

    def __init__(self, target: str, status: int, status_text: str, response: Any = None):
        self.target = target
        self.status = status
        self.status_text = status_text
        self.response = response
        super().__init__(
            "HTTP_ERROR",
            f"{target}: {status} {status_text}",
            {"target": target, "status": status, "status_text": status_text}
        )


class RouteError(AdminApiException):
    """Unknown route name or missing route parameter."""

    def __init__(self, message: str = "Route error", details: Optional[Dict[str, Any]] = None):
        super().__init__("ROUTE_ERROR", message, details)


class VersionParseError(AdminApiException):
    """Server version string could not be parsed."""

    def __init__(self, version: Any):
        super().__init__(
            "VERSION_PARSE_ERROR",
            f"Unable to parse version {version!r}",
            {"version": str(version)}
        )


class ResponseShapeError(AdminApiException):
    """Admin API response body does not have the expected shape."""

    def __init__(self, target: str, message: str):
        self.target = target
        super().__init__(
            "RESPONSE_SHAPE_ERROR",
            f"{target}: {message}",
            {"target": target}
        )
