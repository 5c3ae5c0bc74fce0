"""
Pytest configuration and shared fixtures for the products service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pytest

# Observability singletons read these at import time, so they are set before
# any service module is imported.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "PRODUCT_TABLE_NAME": "test-products-table",
    "ENVIRONMENT": "test",
    "APP_VERSION": "test-1.0.0",
    "COMMIT_HASH": "abc1234",
    "POWERTOOLS_SERVICE_NAME": "test-products-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestProductsApp",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import boto3  # noqa: E402
from moto import mock_aws  # noqa: E402

from service.dal.dynamodb_handler import DynamoDbHandler  # noqa: E402
from service.handlers.products_handler import ProductsDispatcher  # noqa: E402
from service.handlers.utils.observability import metrics  # noqa: E402

TABLE_NAME = "test-products-table"


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB products table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


@pytest.fixture
def dal(dynamodb_table) -> DynamoDbHandler:
    """DynamoDB record store bound to the mock table."""
    return DynamoDbHandler(TABLE_NAME)


@pytest.fixture
def dispatcher(dal) -> ProductsDispatcher:
    """Dispatcher wired to the mock table."""
    return ProductsDispatcher(store=dal)


# Sample data fixtures
@pytest.fixture
def sample_product_data() -> Dict[str, Any]:
    """Sample product body for request testing."""
    return {
        "id": "prod-123",
        "name": "Coffee mug",
        "price": 12.5,
    }


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway REST proxy events."""

    def make_event(
        method: str,
        product_id: Optional[str] = None,
        body: Optional[str] = None,
    ) -> Dict[str, Any]:
        path = "/products" if product_id is None else f"/products/{product_id}"
        return {
            "httpMethod": method,
            "path": path,
            "resource": "/products" if product_id is None else "/products/{id}",
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
            },
            "pathParameters": None if product_id is None else {"id": product_id},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return make_event


@dataclass
class FakeLambdaContext:
    function_name: str = "test-products-function"
    function_version: str = "1"
    memory_limit_in_mb: int = 512
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-products-function"
    aws_request_id: str = "test-request-id-123"
    log_group_name: str = "/aws/lambda/test-products-function"
    log_stream_name: str = "2024/01/01/[$LATEST]test123"
    tenant_id: Optional[str] = None

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Create a Lambda context for testing."""
    return FakeLambdaContext()


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build DynamoDB client errors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error", operation_name: str = "TestOperation"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics buffered by tests that do not flush them."""
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
