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
from flight_booking.reservation.applications.create_reservation import (
    CreateReservationService,
)
from flight_booking.reservation.domain.factory import ReservationFactory
from flight_booking.reservation.domain.service import ReservationPricer, SeatLedger
from flight_booking.reservation.handlers.request_models import CreateReservationRequest
from flight_booking.reservation.handlers.response_models import to_response
from flight_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from flight_booking.reservation.infrastructure.price_table_loader import (
    load_price_table,
)
from flight_booking.shared.utils import api_response, handle_errors, log_domain_events

logger = Logger()

flight_repository = DynamoDBFlightRepository()
reservation_repository = DynamoDBReservationRepository()
pricer = ReservationPricer(load_price_table())
service = CreateReservationService(
    flight_repository=flight_repository,
    reservation_repository=reservation_repository,
    factory=ReservationFactory(),
    ledger=SeatLedger(reservation_repository),
    pricer=pricer,
)


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""

    request = CreateReservationRequest.model_validate_json(event.decoded_body or "{}")
    logger.append_keys(flight_id=request.flight_id)
    logger.info(
        "Received create reservation request",
        extra={"passenger_count": len(request.passengers)},
    )

    reservation = service.reserve(
        FlightId(value=request.flight_id),
        [passenger.to_details() for passenger in request.passengers],
        notes=request.notes or "",
    )
    log_domain_events(logger, reservation)
    return api_response(201, to_response(reservation, pricer))
