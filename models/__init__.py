"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for relationships to work correctly.
"""

from models.base import Base
from models.user import User
from models.product import Product
from models.basket import Basket
from models.basketItem import BasketItem

__all__ = [
    'Base',
    'User',
    'Product',
    'Basket',
    'BasketItem',
]
