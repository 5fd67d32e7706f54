"""Pydantic request/response schemas for the storefront API.

Attributes are snake_case in Python and camelCase on the wire. Money is
serialized as decimal strings with two places ("242.00").
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storefront.shared.money import to_cents

ProductTypeName = Literal["physical", "digital"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Catalogue Request Schemas ---


class CreateCategoryRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"name": "Electronics", "slug": "electronics", "icon": "fas fa-laptop"}]},
    )

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100)
    icon: str = Field(..., max_length=100)
    product_count: int = Field(0, ge=0)


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Mechanical Keyboard",
                    "slug": "mechanical-keyboard",
                    "description": "Hot-swappable 75% keyboard with brown switches.",
                    "price": "89.99",
                    "originalPrice": "119.99",
                    "images": ["https://cdn.example.com/keyboard.jpg"],
                    "category": "Electronics",
                    "brand": "KeyWorks",
                    "type": "physical",
                    "stockQuantity": 25,
                    "isOnSale": True,
                    "tags": ["keyboard", "mechanical"],
                }
            ]
        },
    )

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=200)
    description: str
    price: Decimal = Field(..., ge=0, decimal_places=2)
    original_price: Decimal | None = Field(None, ge=0, decimal_places=2)
    images: list[str] = Field(default_factory=list)
    category: str = Field(..., max_length=100)
    category_id: str | None = None
    brand: str | None = Field(None, max_length=100)
    product_type: ProductTypeName = Field(..., alias="type")
    in_stock: bool = True
    stock_quantity: int | None = Field(None, ge=0)
    rating: float = Field(0.0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    is_featured: bool = False
    is_on_sale: bool = False
    tags: list[str] = Field(default_factory=list)
    download_url: str | None = Field(None, max_length=500)


class UpdateProductRequest(CamelModel):
    """Partial update: only the keys present in the body are changed."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, decimal_places=2)
    original_price: Decimal | None = Field(None, ge=0, decimal_places=2)
    images: list[str] | None = None
    category: str | None = Field(None, max_length=100)
    category_id: str | None = None
    brand: str | None = Field(None, max_length=100)
    product_type: ProductTypeName | None = Field(None, alias="type")
    in_stock: bool | None = None
    stock_quantity: int | None = Field(None, ge=0)
    rating: float | None = Field(None, ge=0, le=5)
    review_count: int | None = Field(None, ge=0)
    is_featured: bool | None = None
    is_on_sale: bool | None = None
    tags: list[str] | None = None
    download_url: str | None = Field(None, max_length=500)

    def to_changes(self) -> dict:
        """Product attribute changes, with prices converted to cents."""
        changes = self.model_dump(exclude_unset=True)
        for money_field in ("price", "original_price"):
            if money_field in changes:
                amount = changes.pop(money_field)
                changes[f"{money_field}_cents"] = to_cents(amount) if amount is not None else None
        return changes


# --- Cart & Order Request Schemas ---


class AddToCartRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"productId": "4c3f0b9e-2f1d-4a51-9d8e-0f6c1a7e5b21", "quantity": 2}]},
    )

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"quantity": 3}]},
    )

    quantity: int


class CreateOrderRequest(CamelModel):
    """Buyer details. Field rules are enforced by the domain so every problem is reported at once."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "email": "ana@example.com",
                    "firstName": "Ana",
                    "lastName": "García",
                    "address": "Calle Mayor 1",
                    "city": "Madrid",
                    "postalCode": "28013",
                    "country": "Spain",
                    "phone": "+34 600 000 000",
                }
            ]
        },
    )

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None


# --- Response Schemas ---


class MessageResponse(CamelModel):
    message: str


class CategoryResponse(CamelModel):
    id: str
    name: str
    slug: str
    icon: str
    product_count: int

    @classmethod
    def from_category(cls, category) -> CategoryResponse:
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug,
            icon=category.icon,
            product_count=category.product_count or 0,
        )


class ProductResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str
    price: Decimal
    original_price: Decimal | None = None
    images: list[str]
    category: str
    category_id: str | None = None
    brand: str | None = None
    product_type: str = Field(..., alias="type")
    in_stock: bool
    stock_quantity: int | None = None
    rating: float
    review_count: int
    is_featured: bool
    is_on_sale: bool
    tags: list[str]
    download_url: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            original_price=product.original_price,
            images=product.image_list,
            category=product.category,
            category_id=str(product.category_id) if product.category_id else None,
            brand=product.brand,
            product_type=product.product_type,
            in_stock=bool(product.in_stock),
            stock_quantity=product.stock_quantity,
            rating=product.rating or 0.0,
            review_count=product.review_count or 0,
            is_featured=bool(product.is_featured),
            is_on_sale=bool(product.is_on_sale),
            tags=product.tag_list,
            download_url=product.download_url,
            created_at=product.created_at,
        )


class CartItemResponse(CamelModel):
    id: str
    session_id: str
    product_id: str
    quantity: int
    line_total: Decimal
    product: ProductResponse

    @classmethod
    def from_line(cls, line, session_id) -> CartItemResponse:
        return cls(
            id=line.item_id,
            session_id=session_id,
            product_id=line.product_id,
            quantity=line.quantity,
            line_total=line.line_total,
            product=ProductResponse.from_product(line.product),
        )


class CartSummaryResponse(CamelModel):
    items: list[CartItemResponse]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    item_count: int

    @classmethod
    def from_summary(cls, summary, session_id) -> CartSummaryResponse:
        return cls(
            items=[CartItemResponse.from_line(line, session_id) for line in summary.lines],
            subtotal=summary.subtotal,
            tax=summary.tax,
            total=summary.total,
            item_count=summary.item_count,
        )


class CartItemChangeResponse(CamelModel):
    item: CartItemResponse | None
    summary: CartSummaryResponse
    message: str


class CartRemovalResponse(CamelModel):
    summary: CartSummaryResponse
    message: str


class OrderLineResponse(CamelModel):
    product_id: str
    product_name: str
    unit_price: Decimal
    quantity: int
    line_total: Decimal


class OrderResponse(CamelModel):
    id: str
    session_id: str
    email: str
    first_name: str
    last_name: str
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    phone: str | None = None
    lines: list[OrderLineResponse]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    status: str
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        return cls(
            id=str(order.id),
            session_id=order.session_id,
            email=order.email,
            first_name=order.first_name,
            last_name=order.last_name,
            address=order.address,
            city=order.city,
            postal_code=order.postal_code,
            country=order.country,
            phone=order.phone,
            lines=[
                OrderLineResponse(
                    product_id=str(line.product_id),
                    product_name=line.product_name,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    line_total=line.line_total,
                )
                for line in order.lines
            ],
            subtotal=order.subtotal,
            tax=order.tax,
            total=order.total,
            status=order.status,
            created_at=order.created_at,
        )


class OrderCreatedResponse(CamelModel):
    order: OrderResponse
    message: str


class HealthResponse(CamelModel):
    status: str
    domain: str
    timestamp: datetime
