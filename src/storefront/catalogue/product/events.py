"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    slug: String(required=True)
    name: String(required=True)
    product_type: String(required=True)
    price_cents: Integer(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Product details were changed. Open carts pick up the new price on their next read."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: Text(required=True)  # JSON array of field names
    price_cents: Integer(required=True)
