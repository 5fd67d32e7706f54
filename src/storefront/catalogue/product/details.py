"""Product detail updates — command and handler."""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.repository import ProductRepository
from storefront.domain import storefront
from storefront.exceptions import ProductNotFound


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    changes: Text(required=True)  # JSON object of field name -> new value


@storefront.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo: ProductRepository = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise ProductNotFound(command.product_id) from None

        changes = json.loads(command.changes)
        new_slug = changes.get("slug")
        if new_slug and new_slug != product.slug:
            existing = repo.find_by_slug(new_slug)
            if existing is not None:
                raise ValidationError({"slug": [f"Product slug `{new_slug}` is already taken"]})

        product.update_details(**changes)
        repo.add(product)
