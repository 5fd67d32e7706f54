"""Domain events for the Order aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into an order at checkout."""

    __version__ = 1

    order_id = Identifier(required=True)
    session_id = String(required=True)
    email = String(required=True)
    item_count = Integer(required=True)
    subtotal_cents = Integer(required=True)
    tax_cents = Integer(required=True)
    total_cents = Integer(required=True)
