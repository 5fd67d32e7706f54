"""FastAPI endpoints for the storefront."""

import json
from datetime import UTC, datetime
from decimal import Decimal

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddToCartRequest,
    CartItemChangeResponse,
    CartItemResponse,
    CartRemovalResponse,
    CartSummaryResponse,
    CategoryResponse,
    CreateCategoryRequest,
    CreateOrderRequest,
    CreateProductRequest,
    HealthResponse,
    MessageResponse,
    OrderCreatedResponse,
    OrderResponse,
    ProductResponse,
    ProductTypeName,
    UpdateCartItemRequest,
    UpdateProductRequest,
)
from storefront.cart import service as cart_service
from storefront.catalogue import queries
from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.creation import CreateProduct
from storefront.catalogue.product.details import UpdateProduct
from storefront.catalogue.product.removal import DeleteProduct
from storefront.catalogue.product.search import ProductFilter
from storefront.exceptions import CartItemNotFound
from storefront.order import service as order_service
from storefront.session.resolver import current_session_id
from storefront.shared.money import to_cents

category_router = APIRouter(prefix="/categories", tags=["categories"])
product_router = APIRouter(prefix="/products", tags=["products"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
health_router = APIRouter(tags=["health"])


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in queries.list_categories()]


@category_router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str) -> CategoryResponse:
    return CategoryResponse.from_category(queries.get_category_by_slug(slug))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    command = CreateCategory(
        name=body.name,
        slug=body.slug,
        icon=body.icon,
        product_count=body.product_count,
    )
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_category(queries.get_category_by_slug(body.slug))


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(
    category: str | None = None,
    product_type: ProductTypeName | None = Query(None, alias="type"),
    search: str | None = None,
    featured: bool | None = None,
    on_sale: bool | None = Query(None, alias="onSale"),
    price_min: Decimal | None = Query(None, alias="priceMin", ge=0),
    price_max: Decimal | None = Query(None, alias="priceMax", ge=0),
    brands: list[str] | None = Query(None),
    bracketed_brands: list[str] | None = Query(None, alias="brands[]"),
) -> list[ProductResponse]:
    brand_names = [*(brands or []), *(bracketed_brands or [])]
    product_filter = ProductFilter(
        category=category or None,
        product_type=product_type,
        search=search or None,
        featured=featured,
        on_sale=on_sale,
        price_min=price_min,
        price_max=price_max,
        brands=frozenset(brand_names) if brand_names else None,
    )
    return [ProductResponse.from_product(product) for product in queries.list_products(product_filter)]


@product_router.get("/slug/{slug}", response_model=ProductResponse)
async def get_product_by_slug(slug: str) -> ProductResponse:
    return ProductResponse.from_product(queries.get_product_by_slug(slug))


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(queries.get_product(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        slug=body.slug,
        description=body.description,
        price_cents=to_cents(body.price),
        original_price_cents=to_cents(body.original_price) if body.original_price is not None else None,
        images=json.dumps(body.images),
        category=body.category,
        category_id=body.category_id,
        brand=body.brand,
        product_type=body.product_type,
        in_stock=body.in_stock,
        stock_quantity=body.stock_quantity,
        rating=body.rating,
        review_count=body.review_count,
        is_featured=body.is_featured,
        is_on_sale=body.is_on_sale,
        tags=json.dumps(body.tags),
        download_url=body.download_url,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(queries.get_product(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(product_id=product_id, changes=json.dumps(body.to_changes()))
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(queries.get_product(product_id))


@product_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted")


# --- Cart endpoints ---


@cart_router.get("", response_model=CartSummaryResponse)
async def get_cart(session_id: str = Depends(current_session_id)) -> CartSummaryResponse:
    return CartSummaryResponse.from_summary(cart_service.get_summary(session_id), session_id)


@cart_router.post("", response_model=CartItemChangeResponse)
async def add_to_cart(
    body: AddToCartRequest, session_id: str = Depends(current_session_id)
) -> CartItemChangeResponse:
    line = cart_service.add_item(session_id, body.product_id, body.quantity)
    return CartItemChangeResponse(
        item=CartItemResponse.from_line(line, session_id) if line is not None else None,
        summary=CartSummaryResponse.from_summary(cart_service.get_summary(session_id), session_id),
        message="Product added to cart",
    )


@cart_router.put("/{item_id}", response_model=CartItemChangeResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, session_id: str = Depends(current_session_id)
) -> CartItemChangeResponse:
    line = cart_service.update_quantity(session_id, item_id, body.quantity)
    return CartItemChangeResponse(
        item=CartItemResponse.from_line(line, session_id) if line is not None else None,
        summary=CartSummaryResponse.from_summary(cart_service.get_summary(session_id), session_id),
        message="Cart updated" if line is not None else "Product removed from cart",
    )


@cart_router.delete("/{item_id}", response_model=CartRemovalResponse)
async def remove_cart_item(item_id: str, session_id: str = Depends(current_session_id)) -> CartRemovalResponse:
    if not cart_service.remove_item(session_id, item_id):
        raise CartItemNotFound(item_id)

    return CartRemovalResponse(
        summary=CartSummaryResponse.from_summary(cart_service.get_summary(session_id), session_id),
        message="Product removed from cart",
    )


@cart_router.delete("", response_model=MessageResponse)
async def clear_cart(session_id: str = Depends(current_session_id)) -> MessageResponse:
    cart_service.clear(session_id)
    return MessageResponse(message="Cart cleared")


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderCreatedResponse)
async def create_order(
    body: CreateOrderRequest, session_id: str = Depends(current_session_id)
) -> OrderCreatedResponse:
    order = order_service.create_order(session_id, body.model_dump())
    return OrderCreatedResponse(order=OrderResponse.from_order(order), message="Order placed")


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return OrderResponse.from_order(order_service.get_order(order_id))


# --- Health ---


@health_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", domain=current_domain.name, timestamp=datetime.now(UTC))
