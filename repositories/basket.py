from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from db import session_execute
from models.basket import Basket, BasketDTO, BasketProductDTO
from models.basketItem import BasketItem, BasketItemDTO
from models.product import ProductDTO

SQLITE_MAX_INT = 2 ** 63 - 1


class BasketRepository:
    @staticmethod
    def parse_basket_id(basket_id: int | str) -> int | None:
        """
        Normalize a requested basket id to the primary key type.

        Malformed identifiers (non-numeric, negative, empty) can never match a
        row, so they map to None instead of raising.
        """
        if isinstance(basket_id, int):
            parsed = basket_id
        else:
            candidate = str(basket_id).strip()
            if not (candidate.isascii() and candidate.isdecimal()):
                return None
            parsed = int(candidate)
        # SQLite integers are signed 64-bit
        if not 0 <= parsed <= SQLITE_MAX_INT:
            return None
        return parsed

    @staticmethod
    async def get_by_id_including_deleted(basket_id: int | str, session: AsyncSession) -> BasketDTO | None:
        """
        Load a basket with all of its products, soft-deleted products included.

        Products retired after being put into a basket keep their deleted_at
        timestamp but must still appear in the basket they belong to, so no
        deleted_at filter is applied to the joined rows.

        Args:
            basket_id: Requested basket id (raw path value or int)
            session: Database session

        Returns:
            BasketDTO with products in basket-line order, or None if no basket matches
        """
        parsed_id = BasketRepository.parse_basket_id(basket_id)
        if parsed_id is None:
            return None

        stmt = (
            select(Basket)
            .where(Basket.id == parsed_id)
            .options(selectinload(Basket.items).selectinload(BasketItem.product))
        )
        result = await session_execute(stmt, session)
        basket = result.scalar()
        if basket is None:
            return None

        products = [
            BasketProductDTO(
                **ProductDTO.model_validate(item.product, from_attributes=True).model_dump(),
                basket_item=BasketItemDTO.model_validate(item, from_attributes=True)
            )
            for item in basket.items
        ]
        return BasketDTO(
            id=basket.id,
            user_id=basket.user_id,
            coupon=basket.coupon,
            created_at=basket.created_at,
            updated_at=basket.updated_at,
            products=products
        )
