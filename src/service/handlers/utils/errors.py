"""
Error handling utilities for the products Lambda handler.

This module defines the service error taxonomy, its mapping onto HTTP status
codes, and the per-operation error boundary that turns any fault into a
structured API response.
"""

import functools
from enum import Enum
from typing import Any, Callable, Dict, Optional

from service.handlers.utils.observability import add_count_metric, logger
from service.models.output import ErrorOutput


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    FAULT_INJECTION = "FAULT_INJECTION"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "error_message": self.message,
            "category": self.category.value,
        }


class ProductIdMismatchError(BaseServiceError):
    """Raised when the product id in the body differs from the path parameter."""

    def __init__(self, path_id: Optional[str], body_id: Any):
        super().__init__(
            message="Product ID in the body does not match path parameter",
            error_code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
        )
        self.path_id = path_id
        self.body_id = body_id


class ProductNotFoundError(BaseServiceError):
    """Raised when a requested product does not exist."""

    def __init__(self, product_id: Optional[str]):
        super().__init__(
            message=f"Product with id = {product_id} NOT found",
            error_code="RESOURCE_NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
        )
        self.product_id = product_id


class InjectedFaultError(BaseServiceError):
    """Raised on purpose to exercise the failure path."""

    def __init__(self, message: str = "BOOM"):
        super().__init__(
            message=message,
            error_code="INJECTED_FAULT",
            category=ErrorCategory.FAULT_INJECTION,
        )


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "VALIDATION_ERROR": 400,
        "RESOURCE_NOT_FOUND": 404,
    }

    return status_mapping.get(error.error_code, 500)


def create_api_response(status_code: int, body: Any) -> Dict[str, Any]:
    """Create an API Gateway proxy response; headers are set on finalization."""
    return {
        "statusCode": status_code,
        "body": body if isinstance(body, str) else str(body),
    }


def handle_operation_errors(operation: str) -> Callable:
    """
    Decorator that makes an operation its own error boundary.

    Client errors (id mismatch, not found) become 400/404 responses carrying the
    error message. Every other exception, injected faults included, becomes a 500
    response of the form ``Internal Server Error for <operation> :: <message>``.

    Args:
        operation: Operation label interpolated into the 500 message

    Returns:
        Decorator for handler functions returning an API response
    """

    def decorator(func: Callable[..., Dict[str, Any]]) -> Callable[..., Dict[str, Any]]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Dict[str, Any]:
            try:
                return func(*args, **kwargs)
            except BaseServiceError as e:
                status_code = get_http_status_code(e)
                if status_code == 500:
                    return _internal_error_response(operation, e)

                logger.info(e.message, extra=e.to_dict())
                return create_api_response(
                    status_code=status_code,
                    body=ErrorOutput(error=e.message).model_dump_json(),
                )
            except Exception as e:
                return _internal_error_response(operation, e)

        return wrapper

    return decorator


def _internal_error_response(operation: str, error: Exception) -> Dict[str, Any]:
    error_message = f"Internal Server Error for {operation} :: {error}"
    logger.exception(error_message, extra={"operation": operation})
    add_count_metric(f"{operation}Error")

    return create_api_response(
        status_code=500,
        body=ErrorOutput(error=error_message).model_dump_json(),
    )
