# ra_strapi/exceptions.py
from typing import Any, Optional


class ProviderError(Exception):
    """Base exception for ra_strapi operations"""
    pass


class HttpError(ProviderError):
    """Raised by the transport when the backend answers outside the 2xx range"""

    def __init__(self, message: str, status: int, body: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def __str__(self):
        return f"{self.status} - {self.message}"
