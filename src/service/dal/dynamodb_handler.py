"""
DynamoDB implementation of the Data Access Layer (DAL).

Products live in a single table keyed by the partition key attribute ``PK``.
Errors raised by boto3 are logged and re-raised to the caller unchanged; retries
are left to the botocore client configuration.
"""

from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import ClientError

from service.dal import BaseDalHandler
from service.handlers.utils.observability import logger, tracer

# Partition key attribute of the products table
PRIMARY_KEY = 'PK'


class DynamoDbHandler(BaseDalHandler):
    """DynamoDB implementation of the record store."""

    def __init__(self, table_name: str, region_name: Optional[str] = None, endpoint_url: Optional[str] = None) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        super().__init__(table_name)

        session_config = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)
        self.table = self.dynamodb.Table(table_name)

        logger.debug('DynamoDB handler initialized', extra={
            'table_name': table_name,
            'endpoint_url': endpoint_url,
        })

    @tracer.capture_method
    def put(self, key: str, fields: Dict[str, Any]) -> None:
        """
        Write a product item, replacing any existing item with the same key.

        Args:
            key: Product identifier
            fields: Non-key attributes of the item

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            self.table.put_item(Item={**fields, PRIMARY_KEY: key})
            logger.debug(f'Successfully wrote product: {key}')
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error writing product {key}: {error_code}')
            raise

    @tracer.capture_method
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve a product item by key.

        Args:
            key: Product identifier

        Returns:
            The raw item if found, None otherwise

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.get_item(Key={PRIMARY_KEY: key})
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error retrieving product {key}: {error_code}')
            raise

        item = response.get('Item')
        if not item:
            logger.debug(f'Product not found: {key}')
            return None
        return item

    @tracer.capture_method
    def delete(self, key: str) -> None:
        """
        Delete a product item by key. Deleting a missing key is a no-op.

        Args:
            key: Product identifier

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            self.table.delete_item(Key={PRIMARY_KEY: key})
            logger.debug(f'Successfully deleted product: {key}')
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error deleting product {key}: {error_code}')
            raise

    @tracer.capture_method
    def scan_limited(self, limit: int) -> List[Dict[str, Any]]:
        """
        Read a single scan page of at most limit items, without continuation.

        Args:
            limit: Maximum number of items to evaluate

        Returns:
            List of raw items in table order

        Raises:
            ClientError: If DynamoDB operation fails
        """
        try:
            response = self.table.scan(Limit=limit)
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.error(f'DynamoDB error scanning products: {error_code}')
            raise

        items = response.get('Items', [])
        if 'LastEvaluatedKey' in response:
            logger.debug('Scan truncated at page limit', extra={'limit': limit})
        return items
