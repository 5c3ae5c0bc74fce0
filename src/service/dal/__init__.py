"""
Data Access Layer (DAL) for the products service.

This module provides the record store interface and the factory used by the
handler to obtain the process-wide store instance.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class RecordStore(Protocol):
    """Protocol defining the key-value record store used by the service."""

    def put(self, key: str, fields: Dict[str, Any]) -> None:
        """Create or fully replace the record stored under key."""
        ...

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Retrieve the record stored under key, None when absent."""
        ...

    def delete(self, key: str) -> None:
        """Delete the record stored under key."""
        ...

    def scan_limited(self, limit: int) -> List[Dict[str, Any]]:
        """Read at most limit records in store-native order."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for record store implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def put(self, key: str, fields: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def scan_limited(self, limit: int) -> List[Dict[str, Any]]:
        pass


def get_dal_handler(
    table_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> RecordStore:
    """
    Factory function to get the record store implementation.

    Args:
        table_name: Name of the database table
        region_name: Optional AWS region name
        endpoint_url: Optional DynamoDB endpoint (local testing)

    Returns:
        Record store instance
    """
    # Import here to avoid circular imports
    from service.dal.dynamodb_handler import DynamoDbHandler

    return DynamoDbHandler(table_name, region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'RecordStore',
    'BaseDalHandler',
    'get_dal_handler'
]
