"""
Products Service Module.

This package contains the products API implementation, split in three layers:

- handlers: Lambda entry point, request routing and response shaping
- logic: Product operations
- dal: Data access layer for the DynamoDB products table
- models: Product model and response bodies
"""

__version__ = "1.0.0"
__description__ = "AWS Lambda products CRUD API"
