"""
Business Logic Layer for Product Management.

This module contains the five product operations. Each operation talks to the
record store directly and signals client errors by raising service errors; the
handler layer turns them into API responses.
"""

from typing import Any, Dict, List, Optional
from uuid import uuid4

from service.dal import RecordStore
from service.handlers.utils.errors import InjectedFaultError, ProductIdMismatchError, ProductNotFoundError
from service.handlers.utils.observability import add_count_metric, logger, tracer
from service.models.product import Product

# Maximum number of products returned by a list request
GET_ALL_PAGE_LIMIT = 20

# Product id that forces the GetById failure path
FORCE_ERROR_ID = 'ForceError'


class ProductService:
    """Business logic service for product management."""

    def __init__(self, store: RecordStore, page_limit: int = GET_ALL_PAGE_LIMIT):
        """
        Initialize product service.

        Args:
            store: Record store holding the products
            page_limit: Maximum number of products returned by list_products
        """
        self.store = store
        self.page_limit = page_limit

    @tracer.capture_method
    def upsert_product(self, product_id: Optional[str], body: Optional[str]) -> str:
        """
        Create or fully replace the product stored under product_id.

        Args:
            product_id: Product id from the path
            body: Raw JSON request body

        Returns:
            The product id written

        Raises:
            ProductIdMismatchError: If the body id differs from the path id
        """
        product = Product.from_body(body)
        if product.id != product_id:
            raise ProductIdMismatchError(path_id=product_id, body_id=product.id)

        tracer.put_annotation('product_id', product_id)
        self.store.put(product_id, product.to_item_fields())
        return product_id

    @tracer.capture_method
    def create_product(self, body: Optional[str]) -> str:
        """
        Write a new product under a freshly generated id.

        Any id present in the body is ignored, and no existence check is made.

        Args:
            body: Raw JSON request body

        Returns:
            The generated product id
        """
        product = Product.from_body(body)
        product_id = str(uuid4())

        tracer.put_annotation('product_id', product_id)
        self.store.put(product_id, product.to_item_fields())
        return product_id

    @tracer.capture_method
    def list_products(self) -> List[Dict[str, Any]]:
        """Return the first page of raw product records."""
        products = self.store.scan_limited(self.page_limit)
        add_count_metric('getAllCount', len(products))
        return products

    @tracer.capture_method
    def get_product(self, product_id: Optional[str]) -> Dict[str, Any]:
        """
        Return the raw record stored under product_id.

        Raises:
            InjectedFaultError: If product_id is the fault injection sentinel
            ProductNotFoundError: If no record exists
        """
        if product_id == FORCE_ERROR_ID:
            raise InjectedFaultError('BOOM')

        tracer.put_annotation('product_id', product_id)
        product = self.store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    @tracer.capture_method
    def delete_product(self, product_id: Optional[str]) -> None:
        """
        Delete the product stored under product_id.

        The existence check and the delete are two separate store calls; a
        concurrent delete in between is not detected.

        Raises:
            ProductNotFoundError: If no record exists
        """
        tracer.put_annotation('product_id', product_id)
        if self.store.get(product_id) is None:
            raise ProductNotFoundError(product_id)

        self.store.delete(product_id)
        logger.debug('Product deleted from store', extra={'product_id': product_id})
