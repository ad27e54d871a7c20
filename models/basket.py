from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship

from models.base import Base
from models.basketItem import BasketItemDTO
from models.product import ProductDTO


class Basket(Base):
    __tablename__ = 'baskets'

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True, unique=True)
    coupon = Column(String, nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="basket")
    # Line order is insertion order, responses must list items stably
    items = relationship("BasketItem", back_populates="basket", order_by="BasketItem.id",
                         cascade="all, delete-orphan")


class BasketProductDTO(ProductDTO):
    """Product as it appears inside a basket, together with its basket line."""
    basket_item: BasketItemDTO | None = None


class BasketDTO(BaseModel):
    id: int | None = None
    user_id: int | None = None
    coupon: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    products: list[BasketProductDTO] = []
