"""
Product domain model.

Products are stored as-is: only the identifier is used for addressing, while
name and price are passed through to the store without type or range checks.
"""

import json
from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Core Product domain model."""

    id: Annotated[Any, Field(
        default=None,
        description='Product identifier, compared as-is with the path id',
        examples=['7f5c3c2e-3b7e-4a55-9f0e-0d1c7e6f2a11']
    )] = None

    name: Annotated[Any, Field(
        default=None,
        description='Product name, stored without validation',
        examples=['Coffee mug']
    )] = None

    price: Annotated[Any, Field(
        default=None,
        description='Product price, stored without validation',
        examples=[12.5]
    )] = None

    @classmethod
    def from_body(cls, body: Optional[str]) -> 'Product':
        """
        Decode a raw request body into a Product.

        Decoding fails closed: an empty body, malformed JSON or a JSON value
        that is not an object raises instead of defaulting to an empty product.
        JSON floats are decoded as Decimal so they can be written to DynamoDB.

        Args:
            body: Raw request body

        Returns:
            Decoded Product

        Raises:
            json.JSONDecodeError: If the body is empty or not valid JSON
            ValueError: If the body is not a JSON object
        """
        payload = json.loads(body or '', parse_float=Decimal)
        if not isinstance(payload, dict):
            raise ValueError('Request body must be a JSON object')
        return cls.model_validate(payload)

    def to_item_fields(self) -> Dict[str, Any]:
        """Non-key attributes to write; absent fields are left out of the item."""
        return self.model_dump(include={'name', 'price'}, exclude_none=True)
