"""Figma Data - Errors.

Every failure raised by the client is a ``FigmaError``. Operations stamp the
error with their label so the message reads e.g.
``Failed to list components: Figma API error: 404 Not Found``.
"""
from typing import Optional


class FigmaError(Exception):
    """Base class for client failures."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class MissingConfiguration(FigmaError):
    """A required setting is absent. Raised before any I/O."""

    def __init__(self, setting: str, message: Optional[str] = None, operation: Optional[str] = None):
        self.setting = setting
        super().__init__(message or f"{setting} is required", operation)


class MissingCredential(MissingConfiguration):
    """No API token configured for the REST transport."""

    def __init__(self, setting: str = "FIGMA_TOKEN", operation: Optional[str] = None):
        super().__init__(setting, f"{setting} is required for REST API fallback", operation)


class RemoteAPIError(FigmaError):
    """Figma answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        detail: Optional[str] = None,
        operation: Optional[str] = None
    ):
        self.status_code = status_code
        self.status_text = status_text
        # ``err`` from the response body, when it had one
        self.detail = detail
        super().__init__(f"Figma API error: {status_code} {status_text}", operation)


class RequestFailed(FigmaError):
    """Transport failure or a response that does not match its schema."""

    def __init__(self, cause: BaseException, operation: Optional[str] = None):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__, operation)
