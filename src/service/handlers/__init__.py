"""
AWS Lambda Handlers Module.

The products handler is the entry point of the service. It uses AWS Lambda
Powertools for structured logging with correlation ids, X-Ray tracing and
CloudWatch embedded metrics.
"""

from service.handlers.utils.observability import logger, metrics, tracer

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
