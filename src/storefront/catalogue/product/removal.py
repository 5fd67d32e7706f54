"""Product removal — command and handler.

Cart lines pointing at a removed product stay in storage and are dropped when
the cart is read.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import logger, storefront
from storefront.exceptions import ProductNotFound


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise ProductNotFound(command.product_id) from None

        repo._dao.delete(product)
        logger.info("Product removed from catalogue", product_id=str(product.id), slug=product.slug)
