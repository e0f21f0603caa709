"""
Errors surfaced to proxy callers as ``{"error": message}`` envelopes.
"""

from typing import Optional


class ProxyError(Exception):
    """Base error carrying the HTTP status to answer with."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ProxyError):
    """Request body failed validation."""

    status_code = 400


class MethodNotAllowedError(ProxyError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class UpstreamError(ProxyError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API request failed: {status_code} - {body}", status_code)
        self.body = body
