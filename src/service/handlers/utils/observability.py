"""
Centralized observability utilities for the products Lambda handler.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection, plus a best-effort helper for emitting metrics.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import MetricUnit, Metrics
from aws_lambda_powertools.tracing import Tracer

# Service name and metrics namespace defaults, overridden by
# POWERTOOLS_SERVICE_NAME and POWERTOOLS_METRICS_NAMESPACE
SERVICE_NAME = 'productsService'
METRICS_NAMESPACE = 'ProductsApp'
APP_NAME = 'products-app'

_default_values = {
    'awsAccountId': os.environ.get('AWS_ACCOUNT_ID', 'N/A'),
    'environment': os.environ.get('ENVIRONMENT', 'N/A'),
}

# JSON output format
logger: Logger = Logger(service=os.environ.get('POWERTOOLS_SERVICE_NAME', SERVICE_NAME))
logger.append_keys(**_default_values)

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer(service=os.environ.get('POWERTOOLS_SERVICE_NAME', SERVICE_NAME))

metrics: Metrics = Metrics(
    namespace=os.environ.get('POWERTOOLS_METRICS_NAMESPACE', METRICS_NAMESPACE),
    service=os.environ.get('POWERTOOLS_SERVICE_NAME', SERVICE_NAME),
)
metrics.set_default_dimensions(
    **_default_values,
    appName=APP_NAME,
    appVersion=os.environ.get('APP_VERSION', 'v0.0.1'),
    commitHash=os.environ.get('COMMIT_HASH', 'N/A'),
    awsRegion=os.environ.get('AWS_REGION', 'N/A'),
    runtime=os.environ.get('AWS_EXECUTION_ENV', 'N/A'),
)


def add_count_metric(name: str, value: float = 1) -> None:
    """
    Emit a Count metric without ever affecting the caller.

    Metric failures are logged and dropped so that a response is never
    altered by the observability side channel.

    Args:
        name: Metric name
        value: Metric value
    """
    try:
        metrics.add_metric(name=name, unit=MetricUnit.Count, value=value)
    except Exception as exc:
        logger.warning('Failed to emit metric', extra={'metric_name': name, 'error': str(exc)})
