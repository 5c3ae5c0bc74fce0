"""
Unit tests for the environment variable model.
"""

import pytest
from pydantic import ValidationError

from service.handlers.models.env_vars import ProductsHandlerEnvVars, get_handler_env_vars


class TestProductsHandlerEnvVars:
    """Test cases for ProductsHandlerEnvVars."""

    def test_defaults(self):
        env_vars = ProductsHandlerEnvVars.model_validate({"PRODUCT_TABLE_NAME": "products"})

        assert env_vars.PRODUCT_TABLE_NAME == "products"
        assert env_vars.DYNAMODB_ENDPOINT is None
        assert env_vars.COMMIT_HASH == "N/A"
        assert env_vars.POWERTOOLS_SERVICE_NAME == "productsService"
        assert env_vars.POWERTOOLS_METRICS_NAMESPACE == "ProductsApp"
        assert env_vars.LOG_LEVEL == "INFO"

    def test_table_name_required(self):
        with pytest.raises(ValidationError):
            ProductsHandlerEnvVars.model_validate({})

    def test_empty_table_name_rejected(self):
        with pytest.raises(ValidationError):
            ProductsHandlerEnvVars.model_validate({"PRODUCT_TABLE_NAME": ""})

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            ProductsHandlerEnvVars.model_validate({"PRODUCT_TABLE_NAME": "products", "LOG_LEVEL": "LOUD"})

    def test_read_from_environment(self):
        env_vars = get_handler_env_vars()

        assert env_vars.PRODUCT_TABLE_NAME == "test-products-table"
        assert env_vars.ENVIRONMENT == "test"
        assert env_vars.COMMIT_HASH == "abc1234"
