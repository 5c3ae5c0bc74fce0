"""
Products Handler - Lambda function for the products CRUD API.

This module implements the handler layer: it routes API Gateway proxy events to
the product operations by HTTP method and path parameter, converts every
operation outcome into a JSON response, and stamps the fixed response headers.
"""

from functools import lru_cache
from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import RecordStore, get_dal_handler
from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.errors import create_api_response, handle_operation_errors
from service.handlers.utils.observability import add_count_metric, logger, metrics, tracer
from service.logic.product_service import ProductService
from service.models.output import MessageOutput, dump_records

RESPONSE_HEADERS = {
    'Content-Type': 'application/json',
    'X-Custom-Header': 'application/json',
}


def add_response_headers(response: Dict[str, Any]) -> Dict[str, Any]:
    """Replace the response headers with the fixed header set."""
    logger.info('Adding Response Headers')
    response['headers'] = dict(RESPONSE_HEADERS)
    return response


class ProductsDispatcher:
    """Routes a request to one of the five product operations."""

    def __init__(self, store: RecordStore):
        """
        Initialize the dispatcher.

        Args:
            store: Record store shared by every invocation of this process
        """
        self.product_service = ProductService(store=store)

    def handle(self, event: APIGatewayProxyEvent) -> Dict[str, Any]:
        """
        Dispatch an API Gateway proxy event.

        Routing is evaluated in order: PUT, POST, GET without id, GET with id,
        DELETE. Anything else gets a generic 500 response.

        Args:
            event: API Gateway proxy event

        Returns:
            API Gateway proxy response with the fixed headers
        """
        logger.info('Starting to invoke Lambda handler')
        method = event.get('httpMethod')
        product_id = (event.path_parameters or {}).get('id')

        if method == 'PUT':
            return add_response_headers(self.put_product(product_id, event.body))
        if method == 'POST':
            return add_response_headers(self.post_product(event.body))
        if method == 'GET':
            if product_id is None:
                return add_response_headers(self.get_all_products())
            return add_response_headers(self.get_product_by_id(product_id))
        if method == 'DELETE':
            return add_response_headers(self.delete_product(product_id))

        logger.error('Error happened while processing the request', extra={'http_method': method})
        return add_response_headers(create_api_response(
            status_code=500,
            body=MessageOutput(message='some error happened').model_dump_json(),
        ))

    @handle_operation_errors('Put')
    def put_product(self, product_id: str, body: str) -> Dict[str, Any]:
        logger.info('Processing Put Event')
        self.product_service.upsert_product(product_id, body)

        success_message = f'Product with id = {product_id} edited(created)'
        logger.info(success_message)
        return create_api_response(status_code=201, body=MessageOutput(message=success_message).model_dump_json())

    @handle_operation_errors('Post')
    def post_product(self, body: str) -> Dict[str, Any]:
        logger.info('Processing Post Event')
        product_id = self.product_service.create_product(body)

        success_message = f'Product with id = {product_id} created'
        logger.info(success_message)
        return create_api_response(status_code=201, body=MessageOutput(message=success_message).model_dump_json())

    @handle_operation_errors('GetAll')
    def get_all_products(self) -> Dict[str, Any]:
        logger.info('Processing Get All Event')
        products = self.product_service.list_products()

        logger.info('Successfully retrieved all products', extra={'product_count': len(products)})
        return create_api_response(status_code=200, body=dump_records(products))

    @handle_operation_errors('GetById')
    def get_product_by_id(self, product_id: str) -> Dict[str, Any]:
        logger.info('Processing Get By Id Event')
        product = self.product_service.get_product(product_id)

        logger.info(f'Product with id = {product_id} found')
        return create_api_response(status_code=200, body=dump_records(product))

    @handle_operation_errors('Delete')
    def delete_product(self, product_id: str) -> Dict[str, Any]:
        logger.info('Processing Delete Event')
        self.product_service.delete_product(product_id)

        success_message = f'Product with id = {product_id} was deleted'
        logger.info(success_message)
        return create_api_response(status_code=200, body=MessageOutput(message=success_message).model_dump_json())


@lru_cache(maxsize=1)
def get_dispatcher() -> ProductsDispatcher:
    """Build the dispatcher and its DynamoDB store once per process."""
    env_vars = get_handler_env_vars()
    store = get_dal_handler(
        env_vars.PRODUCT_TABLE_NAME,
        region_name=env_vars.AWS_REGION,
        endpoint_url=env_vars.DYNAMODB_ENDPOINT,
    )
    return ProductsDispatcher(store=store)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway proxy event payload
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    add_count_metric('RequestCount')
    return get_dispatcher().handle(APIGatewayProxyEvent(event))
