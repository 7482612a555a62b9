from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.applications.search_flights import SearchFlightsService
from flight_booking.flight.domain.value_object import FlightSearchCriteria
from flight_booking.flight.handlers.request_models import SearchFlightsRequest
from flight_booking.flight.handlers.response_models import to_list_response
from flight_booking.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from flight_booking.shared.utils import api_response, handle_errors

logger = Logger()

repository = DynamoDBFlightRepository()
service = SearchFlightsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト検索 Lambda Handler"""

    request = SearchFlightsRequest.model_validate(event.query_string_parameters or {})
    criteria = FlightSearchCriteria.from_strings(
        origin=request.origin,
        destination=request.destination,
        departure=request.departure,
    )
    logger.info(
        "Searching flights",
        extra={
            "origin": criteria.origin,
            "destination": criteria.destination,
            "departure_date": str(criteria.departure_date or ""),
        },
    )

    flights = service.search(criteria)
    return api_response(200, to_list_response(flights))
