"""
Console Demo API - Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions mapped to HTTP responses.
How:   Each exception carries a message and an optional context dict.
       Global handlers registered in main.py turn them into JSON errors.

Exception Hierarchy:
    ConsoleDemoError (base)
    ├── AuthenticationError      → 401 Unauthorized (global handler)
    └── RateLimitExceededError   → 429 Too Many Requests (built by RateLimitMiddleware,
                                   which answers before routing)

Anything else that escapes a route is caught by the catch-all handler and
reported as a generic 500. POST /save is the exception: it converts its own
failures into a plain-text 500 inside the route.
"""

from typing import Any, Dict, Optional


class ConsoleDemoError(Exception):
    """
    Base exception for all Console Demo application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AuthenticationError(ConsoleDemoError):
    """
    Raised when a request does not present the configured API key.

    When:    API_KEY is set and the x-api-key header is missing or wrong.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(ConsoleDemoError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests
    Response includes a Retry-After header with seconds until the window frees up.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Too many requests. Please wait {retry_after} seconds before retrying."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
