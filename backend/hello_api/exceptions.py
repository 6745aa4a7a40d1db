"""
Hello API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the two error kinds the endpoint knows
       (bad client input, unexpected processing failure) plus method mismatch.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error envelopes with the matching HTTP status code.
Who:   Raised by the hello service; caught by global handlers.

Exception Hierarchy:
    HelloAPIError (base)
    ├── ValidationError        → 400 Bad Request
    ├── MethodNotAllowedError  → 405 Method Not Allowed
    └── ProcessingError        → 500 Internal Server Error
"""

from typing import Any, Dict, Iterable, Optional


class HelloAPIError(Exception):
    """
    Base exception for all Hello API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    status_code = 500
    error = "Internal Server Error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HelloAPIError):
    """
    Raised when a required request field is absent.

    HTTP:    400 Bad Request

    Example response:
        {
            "error": "Bad Request",
            "message": "Name and message are required",
            "details": {"missing": ["name"]}
        }
    """

    status_code = 400
    error = "Bad Request"

    def __init__(
        self,
        message: str = "Validation failed",
        missing: Optional[Iterable[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        self.missing = list(missing or [])
        if self.missing:
            ctx["missing"] = self.missing
        super().__init__(message=message, context=ctx)


class MethodNotAllowedError(HelloAPIError):
    """
    Raised when a request reaches a handler restricted to a different method,
    or uses a method the endpoint does not support at all.

    HTTP:    405 Method Not Allowed (with an Allow header)
    """

    status_code = 405
    error = "Method not allowed"

    def __init__(
        self,
        method: str,
        allowed: Iterable[str] = (),
        context: Optional[Dict[str, Any]] = None,
    ):
        self.method = method
        self.allowed = list(allowed)
        if len(self.allowed) == 1:
            message = f"Only {self.allowed[0]} requests are allowed for this endpoint"
        else:
            message = f"Method {method} is not supported by this endpoint"
        ctx = context or {}
        ctx["method"] = method
        super().__init__(message=message, context=ctx)


class ProcessingError(HelloAPIError):
    """
    Raised when a handler fails unexpectedly while building its response.

    HTTP:    500 Internal Server Error

    The message is the handler's generic failure text ("Failed to update message");
    the original exception is chained and logged server-side only.
    """

    status_code = 500
    error = "Internal Server Error"

    def __init__(
        self,
        message: str = "Failed to process request",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
