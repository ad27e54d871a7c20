"""
Authentication-related exceptions.
"""

from fastapi import status

from .base import BasketServiceException


class AuthException(BasketServiceException):
    """Base exception for authentication errors."""
    status_code = status.HTTP_401_UNAUTHORIZED


class AuthenticationRequiredException(AuthException):
    """Raised when no session resolves or the principal has no basket."""

    def __init__(self):
        super().__init__("Authentication required")
