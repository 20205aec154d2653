"""
Shared error handling for the Showcase project feed.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class ShowcaseError(Exception):
    """Base exception for the project feed."""

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


class ConfigurationError(ShowcaseError):
    """Missing or unusable configuration."""

    def __init__(self, message: str = "Configuration error", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class FetchError(ShowcaseError):
    """Network or unexpected failure while fetching projects."""

    def __init__(self, message: str = "Fetch failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("FETCH_ERROR", message, details)


class ParseError(ShowcaseError):
    """Response body is not valid JSON."""

    def __init__(self, endpoint: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.endpoint = endpoint
        super().__init__(
            "PARSE_ERROR",
            f"Invalid JSON received from {endpoint}: {message}",
            {"endpoint": endpoint, **(details or {})}
        )


class ValidationError(ShowcaseError):
    """Decoded payload does not have the expected shape."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)
