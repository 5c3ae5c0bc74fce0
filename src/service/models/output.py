"""
Output models for API responses using Pydantic.

This module defines the response bodies returned by the products handler and the
JSON encoding used for raw DynamoDB records.
"""

import json
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field


class MessageOutput(BaseModel):
    """Response body for successful write operations."""

    message: Annotated[str, Field(
        description='Human readable outcome of the operation',
        examples=['Product with id = 123 created']
    )]


class ErrorOutput(BaseModel):
    """Response body for failed operations."""

    error: Annotated[str, Field(
        description='Error message',
        examples=['Product with id = 123 NOT found']
    )]


def _decimal_default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


def dump_records(records: Any) -> str:
    """
    Serialize raw store records to JSON.

    DynamoDB returns numbers as Decimal; integral values are rendered as JSON
    integers and the rest as floats.

    Args:
        records: A record or a list of records as returned by the store

    Returns:
        JSON string
    """
    return json.dumps(records, default=_decimal_default)
