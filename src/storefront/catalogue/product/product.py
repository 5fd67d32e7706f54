"""Product aggregate root.

Prices are stored as integer cents and exposed as ``Decimal`` through the
``price`` and ``original_price`` properties. Images and tags are stored as JSON
arrays in text columns so the same record shape works on every provider.
"""

import json
from datetime import datetime
from decimal import Decimal
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from storefront.catalogue.product.events import ProductCreated, ProductUpdated
from storefront.domain import storefront
from storefront.exceptions import InsufficientStock
from storefront.shared.money import from_cents
from storefront.shared.slugs import is_valid_slug


class ProductType(Enum):
    PHYSICAL = "physical"
    DIGITAL = "digital"


# Attributes that UpdateProduct may change
UPDATABLE_FIELDS = (
    "name",
    "slug",
    "description",
    "price_cents",
    "original_price_cents",
    "images",
    "category",
    "category_id",
    "brand",
    "product_type",
    "in_stock",
    "stock_quantity",
    "rating",
    "review_count",
    "is_featured",
    "is_on_sale",
    "tags",
    "download_url",
)


@storefront.aggregate
class Product:
    """A sellable catalogue item, either shipped (physical) or downloaded (digital)."""

    name: String(required=True, max_length=255)
    slug: String(required=True, max_length=200, unique=True)
    description: Text(required=True)
    price_cents: Integer(required=True, min_value=0)
    original_price_cents: Integer(min_value=0)
    images: Text()  # JSON array of image URLs, in display order
    category: String(required=True, max_length=100)
    category_id: Identifier()
    brand: String(max_length=100)
    product_type: String(required=True, choices=ProductType)
    in_stock: Boolean(default=True)
    stock_quantity: Integer(min_value=0)  # None means unlimited
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    review_count: Integer(default=0, min_value=0)
    is_featured: Boolean(default=False)
    is_on_sale: Boolean(default=False)
    tags: Text()  # JSON array of tag strings
    download_url: String(max_length=500)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def slug_must_be_url_safe(self):
        if self.slug and not is_valid_slug(self.slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

    @invariant.post
    def original_price_must_exceed_price(self):
        if self.original_price_cents is None or self.price_cents is None:
            return
        if self.original_price_cents <= self.price_cents:
            raise ValidationError({"original_price": ["Original price must be greater than the current price"]})

    @invariant.post
    def sale_requires_original_price(self):
        if self.is_on_sale and self.original_price_cents is None:
            raise ValidationError({"is_on_sale": ["A product on sale needs an original price"]})

    @invariant.post
    def download_url_only_for_digital_products(self):
        if self.download_url and self.product_type != ProductType.DIGITAL.value:
            raise ValidationError({"download_url": ["Only digital products can have a download URL"]})

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    @property
    def original_price(self) -> Decimal | None:
        return from_cents(self.original_price_cents)

    @property
    def image_list(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    @property
    def tag_list(self) -> list[str]:
        return json.loads(self.tags) if self.tags else []

    @property
    def is_physical(self) -> bool:
        return self.product_type == ProductType.PHYSICAL.value

    def ensure_available(self, quantity):
        """Reject a request for more physical units than are in stock.

        Only the requested quantity is checked, never what is already in a
        cart. Digital products and products without a stock count always pass.
        """
        if not self.is_physical or self.stock_quantity is None:
            return
        if quantity > self.stock_quantity:
            raise InsufficientStock(
                product_id=str(self.id),
                requested=quantity,
                available=self.stock_quantity,
            )

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        slug,
        description,
        price_cents,
        category,
        product_type,
        original_price_cents=None,
        images=None,
        category_id=None,
        brand=None,
        in_stock=True,
        stock_quantity=None,
        rating=0.0,
        review_count=0,
        is_featured=False,
        is_on_sale=False,
        tags=None,
        download_url=None,
    ):
        now = datetime.now()
        product = cls(
            name=name,
            slug=slug,
            description=description,
            price_cents=price_cents,
            original_price_cents=original_price_cents,
            images=json.dumps(list(images or [])),
            category=category,
            category_id=category_id,
            brand=brand,
            product_type=product_type,
            in_stock=in_stock,
            stock_quantity=stock_quantity,
            rating=rating,
            review_count=review_count,
            is_featured=is_featured,
            is_on_sale=is_on_sale,
            tags=json.dumps(list(tags or [])),
            download_url=download_url,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                slug=slug,
                name=name,
                product_type=product_type,
                price_cents=price_cents,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Catalogue management
    # -------------------------------------------------------------------
    def update_details(self, **changes):
        """Apply a partial update; invariants are checked once all fields are set."""
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in sorted(unknown)})

        if "images" in changes and changes["images"] is not None:
            changes["images"] = json.dumps(list(changes["images"]))
        if "tags" in changes and changes["tags"] is not None:
            changes["tags"] = json.dumps(list(changes["tags"]))

        with atomic_change(self):
            for field_name, value in changes.items():
                setattr(self, field_name, value)
            self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=json.dumps(sorted(changes)),
                price_cents=self.price_cents,
            )
        )
