"""Cart clearing — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront


@storefront.command(part_of="ShoppingCart")
class ClearCart:
    session_id = String(required=True, max_length=255)


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_session(command.session_id)
        if cart is None:
            return 0

        removed = cart.clear()
        repo.add(cart)
        return removed
