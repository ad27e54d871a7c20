from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, DateTime, String, func
from sqlalchemy.orm import relationship

from models.base import Base


class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False, unique=True)
    username = Column(String, nullable=True)
    created_at = Column(DateTime, default=func.now())

    # Each account owns at most one basket
    basket = relationship("Basket", back_populates="user", uselist=False)


class UserDTO(BaseModel):
    id: int | None = None
    email: str | None = None
    username: str | None = None
    created_at: datetime | None = None
