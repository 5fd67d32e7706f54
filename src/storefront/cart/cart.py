"""Shopping Cart aggregate — one cart per anonymous session.

The cart holds at most one line per product. Adding a product that is already
in the cart merges the quantities into the existing line. Lines disappear when
their quantity drops to zero, when they are removed, or when the cart is
cleared (which also happens right after checkout).
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from storefront.domain import storefront
from storefront.exceptions import CartItemNotFound


@storefront.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class ShoppingCart:
    session_id = String(required=True, max_length=255, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can only appear once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------
    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def item_for_product(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def ordered_items(self):
        """Lines in the order they were first added."""
        return sorted(self.items, key=lambda item: item.added_at or self.created_at)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity):
        """Add ``quantity`` units of a product, merging into an existing line."""
        now = datetime.now(UTC)

        existing = self.item_for_product(product_id)
        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(product_id=product_id, quantity=quantity, added_at=now)
            self.add_items(item)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                session_id=self.session_id,
                item_id=str(item.id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=item.quantity,
            )
        )
        return item

    def update_item_quantity(self, item_id, quantity):
        """Overwrite a line's quantity; zero or less removes the line.

        Returns the updated line, or ``None`` when the line was removed.
        """
        item = self.find_item(item_id)
        if item is None:
            raise CartItemNotFound(item_id)

        if quantity <= 0:
            self._drop(item)
            return None

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                session_id=self.session_id,
                item_id=str(item.id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )
        return item

    def remove_item(self, item_id):
        """Remove a line. Returns False when the cart had no such line."""
        item = self.find_item(item_id)
        if item is None:
            return False

        self._drop(item)
        return True

    def clear(self):
        """Remove every line and return how many were removed."""
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                session_id=self.session_id,
                items_removed=len(removed),
            )
        )
        return len(removed)

    def _drop(self, item):
        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                session_id=self.session_id,
                item_id=str(item.id),
                product_id=str(item.product_id),
            )
        )
