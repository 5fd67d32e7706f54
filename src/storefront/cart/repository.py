"""Repository for the ShoppingCart aggregate."""

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront


@storefront.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def for_session(self, session_id: str) -> ShoppingCart | None:
        """The session's cart, or None if the session never added anything."""
        results = self._dao.query.filter(session_id=session_id).all().items
        if not results:
            return None
        return self.get(results[0].id)
