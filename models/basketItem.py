from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, ForeignKey, DateTime, CheckConstraint, UniqueConstraint, func
from sqlalchemy.orm import relationship

from models.base import Base


class BasketItem(Base):
    __tablename__ = 'basket_items'

    id = Column(Integer, primary_key=True)
    basket_id = Column(Integer, ForeignKey('baskets.id', ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey('products.id'), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    basket = relationship("Basket", back_populates="items")
    product = relationship("Product")

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_basket_item_quantity_positive'),
        UniqueConstraint('basket_id', 'product_id', name='uq_basket_item_product'),
    )


class BasketItemDTO(BaseModel):
    id: int | None = None
    basket_id: int | None = None
    product_id: int | None = None
    quantity: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
