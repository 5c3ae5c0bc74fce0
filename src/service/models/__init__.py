"""
Service Models Package

This package contains the Pydantic models used by the service: the Product
domain model and the response bodies.
"""

from .output import ErrorOutput, MessageOutput, dump_records
from .product import Product

__all__ = [
    "Product",
    "MessageOutput",
    "ErrorOutput",
    "dump_records",
]
