"""
Base exception class for the basket service.
"""

from fastapi import status


class BasketServiceException(Exception):
    """
    Expected, client-facing failure of a basket request.

    Subclasses pin the HTTP status they map to; the router turns any of them
    into {"status": "error", "message": ...} without knowing the concrete type.
    Anything that is not a BasketServiceException is an internal error (500).

    Attributes:
        message: Returned to the client verbatim
        details: Context for logs only (ids of the caller and target), never sent
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response_body(self) -> dict:
        return {"status": "error", "message": self.message}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        context = ''.join(f", {k}={v}" for k, v in self.details.items())
        return f"{self.__class__.__name__}('{self.message}'{context})"
