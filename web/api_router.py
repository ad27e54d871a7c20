"""
REST API router for basket retrieval.

Security:
- Caller resolved from bearer token (Authorization header or token cookie)
- Basket ownership verification (principal.bid must equal the basket id)
- Cross-user access attempts written to the audit log
"""

import logging
import uuid
from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from db import get_session
from exceptions import (
    BasketServiceException,
    BasketOwnershipException
)
from models.request_context import RequestContext
from services.basket import BasketService
from services.session import SessionProvider
from utils.query_result import query_result_to_json
from web.dependencies import get_request_context, get_session_provider

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix="/rest", tags=["basket"])


def generate_correlation_id() -> str:
    """Generate unique correlation ID for request tracing."""
    return f"{datetime.now().strftime('%Y%m%d-%H%M%S')}-{uuid.uuid4().hex[:8]}"


def error_response(exc: BasketServiceException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response_body())


@api_router.get("/basket/{basket_id}")
async def retrieve_basket(
    basket_id: str,
    context: RequestContext = Depends(get_request_context),
    session_provider: SessionProvider = Depends(get_session_provider),
    session: AsyncSession = Depends(get_session)
):
    """
    Retrieve the caller's basket with its products.

    Request Headers:
        Authorization: Bearer <token> (or "token" cookie)
        Accept-Language: optional, product names are localized (or "language" cookie)

    Returns:
        200: {"status": "success", "data": {...basket, "products": [...]}}
        401: Authentication required
        403: Basket belongs to another user
        404: Basket not found
        500: Unexpected failure (application exception handler)

    Example:
        curl https://shop.example.com/rest/basket/42 \\
          -H "Authorization: Bearer <token>" \\
          -H "Accept-Language: de"
    """
    correlation_id = generate_correlation_id()
    logger.info(f"[{correlation_id}] Basket {basket_id} requested")

    try:
        basket = await BasketService.retrieve_basket(basket_id, context, session_provider, session)

    except BasketOwnershipException as e:
        logger.warning(f"[{correlation_id}] Ownership violation: user {e.user_id} requested basket {e.basket_id}")
        return error_response(e)

    except BasketServiceException as e:
        logger.info(f"[{correlation_id}] Basket {basket_id} request rejected: {e!r}")
        return error_response(e)

    logger.info(f"[{correlation_id}] ✅ Basket {basket.id} returned ({len(basket.products)} products)")
    return JSONResponse(content=query_result_to_json(basket))
