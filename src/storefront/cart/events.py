"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="ShoppingCart")
class CartItemAdded:
    """Units of a product were added to a cart, either as a new line or merged into one."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    """The quantity of a cart line was overwritten."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A line was removed from a cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="ShoppingCart")
class CartCleared:
    """All lines were removed from a cart, explicitly or after checkout."""

    __version__ = 1

    cart_id = Identifier(required=True)
    session_id = String(required=True)
    items_removed = Integer(required=True)
