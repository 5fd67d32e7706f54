"""Order placement — command and handler.

The order is written and the cart is emptied inside one unit of work: either
both changes commit or neither does.
"""

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.cart import service as cart_service
from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront
from storefront.exceptions import EmptyCart, InvalidOrderData
from storefront.order.buyer import validate_buyer
from storefront.order.order import Order

BUYER_FIELDS = ("email", "first_name", "last_name", "address", "city", "postal_code", "country", "phone")


@storefront.command(part_of="Order")
class PlaceOrder:
    session_id = String(required=True, max_length=255)
    # Buyer fields are unconstrained here; validate_buyer reports their problems.
    email = Text()
    first_name = Text()
    last_name = Text()
    address = Text()
    city = Text()
    postal_code = Text()
    country = Text()
    phone = Text()


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        summary = cart_service.get_summary(command.session_id)
        if summary.is_empty:
            raise EmptyCart(command.session_id)

        buyer = {field: getattr(command, field) for field in BUYER_FIELDS}
        errors = validate_buyer(buyer, requires_shipping=summary.has_physical_items)
        if errors:
            raise InvalidOrderData(errors)

        order = Order.place(session_id=command.session_id, buyer=buyer, summary=summary)
        current_domain.repository_for(Order).add(order)

        # Stock is not decremented here; availability is only checked when adding to the cart.
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.for_session(command.session_id)
        cart.clear()
        cart_repo.add(cart)

        return str(order.id)
