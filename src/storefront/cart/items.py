"""Cart line management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.queries import find_product, get_product
from storefront.domain import storefront
from storefront.exceptions import CartItemNotFound


@storefront.command(part_of="ShoppingCart")
class AddToCart:
    session_id = String(required=True, max_length=255)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="ShoppingCart")
class UpdateCartQuantity:
    session_id = String(required=True, max_length=255)
    item_id = Identifier(required=True)
    quantity = Integer(required=True)  # zero or less removes the line


@storefront.command(part_of="ShoppingCart")
class RemoveFromCart:
    session_id = String(required=True, max_length=255)
    item_id = Identifier(required=True)


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = get_product(command.product_id)
        product.ensure_available(command.quantity)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_session(command.session_id) or ShoppingCart.create(command.session_id)
        item = cart.add_item(product_id=str(product.id), quantity=command.quantity)
        repo.add(cart)
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_session(command.session_id)
        if cart is None:
            raise CartItemNotFound(command.item_id)

        # Lines of deleted products are hidden from the cart and cannot be resized.
        line = cart.find_item(command.item_id)
        if line is not None and command.quantity > 0 and find_product(str(line.product_id)) is None:
            raise CartItemNotFound(command.item_id)

        item = cart.update_item_quantity(item_id=command.item_id, quantity=command.quantity)
        repo.add(cart)
        return str(item.id) if item is not None else None

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_session(command.session_id)
        if cart is None:
            return False

        removed = cart.remove_item(item_id=command.item_id)
        if removed:
            repo.add(cart)
        return removed
