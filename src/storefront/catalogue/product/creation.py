"""Product creation — command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.repository import ProductRepository
from storefront.domain import storefront


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    slug: String(required=True, max_length=200)
    description: Text(required=True)
    price_cents: Integer(required=True, min_value=0)
    original_price_cents: Integer(min_value=0)
    images: Text()  # JSON array
    category: String(required=True, max_length=100)
    category_id: Identifier()
    brand: String(max_length=100)
    product_type: String(required=True, max_length=20)
    in_stock: Boolean(default=True)
    stock_quantity: Integer(min_value=0)
    rating: Float(default=0.0)
    review_count: Integer(default=0)
    is_featured: Boolean(default=False)
    is_on_sale: Boolean(default=False)
    tags: Text()  # JSON array
    download_url: String(max_length=500)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo: ProductRepository = current_domain.repository_for(Product)
        if repo.find_by_slug(command.slug) is not None:
            raise ValidationError({"slug": [f"Product slug `{command.slug}` is already taken"]})

        product = Product.create(
            name=command.name,
            slug=command.slug,
            description=command.description,
            price_cents=command.price_cents,
            original_price_cents=command.original_price_cents,
            images=json.loads(command.images) if command.images else [],
            category=command.category,
            category_id=command.category_id,
            brand=command.brand,
            product_type=command.product_type,
            in_stock=command.in_stock if command.in_stock is not None else True,
            stock_quantity=command.stock_quantity,
            rating=command.rating or 0.0,
            review_count=command.review_count or 0,
            is_featured=bool(command.is_featured),
            is_on_sale=bool(command.is_on_sale),
            tags=json.loads(command.tags) if command.tags else [],
            download_url=command.download_url,
        )
        repo.add(product)
        return str(product.id)
