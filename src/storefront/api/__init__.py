"""Storefront HTTP API package."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from storefront import settings
from storefront.api.errors import register_error_handlers
from storefront.api.routes import cart_router, category_router, health_router, order_router, product_router

__all__ = ["cart_router", "category_router", "create_api", "health_router", "order_router", "product_router"]


def create_api(prefix: str = "/api") -> FastAPI:
    """Assemble the FastAPI application: routers, error handlers, CORS and the session cookie.

    The Protean domain context is not pushed here; the caller owns it.
    """
    api = FastAPI(
        title="Storefront API",
        description="Catalogue, session cart and checkout",
    )

    api.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key(),
        session_cookie=settings.session_cookie(),
        max_age=settings.session_max_age(),
        same_site="lax",
    )
    api.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (category_router, product_router, cart_router, order_router, health_router):
        api.include_router(router, prefix=prefix)

    register_error_handlers(api)
    return api
