"""Storefront FastAPI application.

Commands are processed synchronously inside each HTTP request, with the
storefront domain context pushed for the lifetime of the request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay (e.g. "production" → PostgreSQL).
from fastapi import Request

from storefront.domain import storefront
from storefront.utils.logging import clear_context

storefront.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
from storefront.api import create_api  # noqa: E402

app = create_api()


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and start each request with fresh log context."""
    clear_context()
    with storefront.domain_context():
        response = await call_next(request)
    return response
