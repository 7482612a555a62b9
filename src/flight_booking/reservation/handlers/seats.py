from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from flight_booking.reservation.applications.get_seat_availability import (
    GetSeatAvailabilityService,
)
from flight_booking.reservation.domain.service import SeatLedger
from flight_booking.reservation.handlers.request_models import FlightPathParameters
from flight_booking.reservation.handlers.response_models import (
    to_seat_availability_response,
)
from flight_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from flight_booking.shared.utils import api_response, handle_errors

logger = Logger()

flight_repository = DynamoDBFlightRepository()
reservation_repository = DynamoDBReservationRepository()
service = GetSeatAvailabilityService(
    flight_repository=flight_repository,
    ledger=SeatLedger(reservation_repository),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席状況取得 Lambda Handler"""

    params = FlightPathParameters.model_validate(event.path_parameters or {})
    logger.info("Fetching seat availability", extra={"flight_id": params.flight_id})

    availability = service.get(FlightId(value=params.flight_id))
    return api_response(200, to_seat_availability_response(availability))
