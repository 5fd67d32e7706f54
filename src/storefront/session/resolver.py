"""Anonymous session identity.

Shoppers never log in. Their cart is keyed by an opaque id kept in the signed
session cookie; the first request without one gets a freshly minted id.
"""

import uuid
from collections.abc import Callable, MutableMapping

from fastapi import Request

from storefront.domain import logger
from storefront.utils.logging import add_context

SESSION_KEY = "cart_id"


def mint_session_id() -> str:
    return f"cart_{uuid.uuid4().hex}"


class SessionResolver:
    """Read the cart session id from a session mapping, minting one if absent."""

    def __init__(self, key: str = SESSION_KEY, mint: Callable[[], str] = mint_session_id):
        self.key = key
        self.mint = mint

    def resolve(self, session: MutableMapping) -> str:
        session_id = session.get(self.key)
        if not session_id:
            session_id = self.mint()
            session[self.key] = session_id
            logger.info("Started anonymous session", session_id=session_id)
        return session_id


resolver = SessionResolver()


async def current_session_id(request: Request) -> str:
    """FastAPI dependency returning the caller's session id.

    Also binds ``session_id`` to the logging context for the rest of the request.
    """
    session_id = resolver.resolve(request.session)
    add_context(session_id=session_id)
    return session_id
