"""
Business Logic Layer Module.

Product operations sit between the handler layer, which owns request parsing and
response shaping, and the data access layer, which owns DynamoDB.
"""

from service.logic.product_service import ProductService

__all__ = [
    "ProductService",
]
