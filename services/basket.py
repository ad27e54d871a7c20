import logging

from sqlalchemy.ext.asyncio import AsyncSession

from enums.security_event import SecurityEvent
from exceptions.auth import AuthenticationRequiredException
from exceptions.basket import BasketNotFoundException, BasketOwnershipException
from models.basket import BasketDTO
from models.request_context import RequestContext
from repositories.basket import BasketRepository
from services.audit import AuditService
from services.session import SessionProvider
from utils.localizator import Localizator

logger = logging.getLogger(__name__)


class BasketService:

    @staticmethod
    async def retrieve_basket(basket_id: int | str,
                              context: RequestContext,
                              session_provider: SessionProvider,
                              session: AsyncSession) -> BasketDTO:
        """
        Return the caller's own basket with localized product names.

        Args:
            basket_id: Requested basket id as received in the path
            context: Caller token, language and address
            session_provider: Session registry resolving the caller
            session: Database session

        Returns:
            BasketDTO whose product names are translated to context.language

        Raises:
            AuthenticationRequiredException: No session, or principal without basket
            BasketNotFoundException: No basket with this id
            BasketOwnershipException: Basket belongs to someone else (audited)
        """
        principal = await session_provider.resolve_principal(context)
        if principal is None or not principal.bid:
            raise AuthenticationRequiredException()

        basket = await BasketRepository.get_by_id_including_deleted(basket_id, session)
        if basket is None:
            raise BasketNotFoundException(basket_id)

        if basket.id != principal.bid:
            AuditService.log_security_event(
                SecurityEvent.UNAUTHORIZED_BASKET_ACCESS_ATTEMPT,
                userId=principal.id,
                userBasketId=principal.bid,
                attemptedBasketId=basket.id,
                ip=context.client_ip,
            )
            raise BasketOwnershipException(basket.id, principal.id, principal.bid)

        # Names are translated on the DTO only, ORM rows stay untouched
        catalog = Localizator.get_catalog(context.language)
        for product in basket.products:
            product.name = Localizator.translate(product.name, catalog=catalog)

        logger.debug(f"Basket {basket.id} served to user {principal.id} ({len(basket.products)} products)")
        return basket
