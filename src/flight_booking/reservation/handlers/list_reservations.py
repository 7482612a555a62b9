from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.applications.get_reservation import (
    ListReservationsService,
)
from flight_booking.reservation.domain.service import ReservationPricer
from flight_booking.reservation.handlers.request_models import ListReservationsRequest
from flight_booking.reservation.handlers.response_models import to_list_response
from flight_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from flight_booking.reservation.infrastructure.price_table_loader import (
    load_price_table,
)
from flight_booking.shared.utils import api_response, handle_errors

logger = Logger()

repository = DynamoDBReservationRepository()
pricer = ReservationPricer(load_price_table())
service = ListReservationsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler（?flight_id= で便を絞り込み）"""

    request = ListReservationsRequest.model_validate(event.query_string_parameters or {})
    logger.info("Listing reservations", extra={"flight_id": request.flight_id or ""})

    flight_id = FlightId(value=request.flight_id) if request.flight_id else None
    reservations = service.list(flight_id)
    return api_response(200, to_list_response(reservations, pricer))
