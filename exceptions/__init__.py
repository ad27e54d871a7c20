"""
Custom exceptions for the basket service.

Exception Hierarchy:
--------------------
BasketServiceException (base)
├── AuthException
│   └── AuthenticationRequiredException   -> 401
└── BasketException
    ├── BasketNotFoundException           -> 404
    └── BasketOwnershipException          -> 403

Usage:
------
Services raise specific exceptions:
    raise BasketNotFoundException(basket_id=42)

Each class carries its HTTP status, so the API router maps any of them
with a single handler:
    except BasketServiceException as e:
        return error_response(e)

Anything outside this hierarchy is unexpected and reaches the
application-wide exception handler (500).
"""

from .base import BasketServiceException
from .auth import AuthException, AuthenticationRequiredException
from .basket import BasketException, BasketNotFoundException, BasketOwnershipException

__all__ = [
    # Base
    'BasketServiceException',

    # Auth
    'AuthException',
    'AuthenticationRequiredException',

    # Basket
    'BasketException',
    'BasketNotFoundException',
    'BasketOwnershipException',
]
