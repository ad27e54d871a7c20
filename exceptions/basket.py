"""
Basket-related exceptions.
"""

from fastapi import status

from .base import BasketServiceException


class BasketException(BasketServiceException):
    """Base exception for basket-related errors."""
    pass


class BasketNotFoundException(BasketException):
    """Raised when basket is not found in database."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, basket_id: int | str):
        super().__init__(
            "Basket not found",
            details={'basket_id': basket_id}
        )
        self.basket_id = basket_id


class BasketOwnershipException(BasketException):
    """Raised when user attempts to access a basket they don't own."""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, basket_id: int, user_id: int, user_basket_id: int):
        super().__init__(
            "Access denied: You can only access your own basket",
            details={'basket_id': basket_id, 'user_id': user_id, 'user_basket_id': user_basket_id}
        )
        self.basket_id = basket_id
        self.user_id = user_id
        self.user_basket_id = user_basket_id
