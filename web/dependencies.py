"""
FastAPI dependencies turning the raw request into explicit collaborators.

Handlers receive a RequestContext and a SessionProvider instead of reaching
into global state, which also lets tests swap them via dependency_overrides.
"""

from fastapi import Request

import config
from models.request_context import RequestContext
from services.session import SessionProvider
from utils.localizator import Localizator

TOKEN_COOKIE = "token"
LANGUAGE_COOKIE = "language"


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None

    return token.strip()


def resolve_client_ip(request: Request) -> str | None:
    if config.TRUST_PROXY_HEADERS:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            # Left-most entry is the original client
            return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else None


def get_request_context(request: Request) -> RequestContext:
    token = extract_bearer_token(request.headers.get("Authorization")) or request.cookies.get(TOKEN_COOKIE)
    language = Localizator.resolve_language(
        request.cookies.get(LANGUAGE_COOKIE),
        request.headers.get("Accept-Language")
    )
    return RequestContext(token=token, language=language, client_ip=resolve_client_ip(request))


def get_session_provider(request: Request) -> SessionProvider:
    return request.app.state.session_provider
