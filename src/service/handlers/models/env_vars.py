"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
products Lambda handler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class ProductsHandlerEnvVars(BaseModel):
    """Environment variables for the products Lambda handler."""

    # DynamoDB table holding the product records
    PRODUCT_TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for product storage',
        min_length=1
    )]

    # Local DynamoDB endpoint, unset in AWS
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override for local testing'
    )] = None

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    AWS_ACCOUNT_ID: Annotated[str, Field(
        default='N/A',
        description='AWS account id, attached to logs and metrics'
    )] = 'N/A'

    ENVIRONMENT: Annotated[str, Field(
        default='N/A',
        description='Deployment environment name'
    )] = 'N/A'

    COMMIT_HASH: Annotated[str, Field(
        default='N/A',
        description='Commit hash of the deployed build, attached to metrics'
    )] = 'N/A'

    APP_VERSION: Annotated[str, Field(
        default='v0.0.1',
        description='Application version string'
    )] = 'v0.0.1'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='productsService',
        description='Service name for AWS Powertools'
    )] = 'productsService'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='ProductsApp',
        description='Namespace for CloudWatch metrics'
    )] = 'ProductsApp'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'


def get_handler_env_vars() -> ProductsHandlerEnvVars:
    """
    Get typed environment variables for the products handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ProductsHandlerEnvVars)
