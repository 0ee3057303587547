"""
Shared error handling for the News Proxy service.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Client-facing error body: a single fixed message."""

    message: str


class NewsProxyException(Exception):
    """Base exception for News Proxy services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(NewsProxyException):
    """Validation-related errors."""

    def __init__(self, message: str = "Invalid request", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class ExternalServiceError(NewsProxyException):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service}: {message}", details)
