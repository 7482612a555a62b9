from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.reservation.applications.cancel_reservation import (
    CancelReservationService,
)
from flight_booking.reservation.domain.service import ReservationPricer
from flight_booking.reservation.domain.value_object import ReservationId
from flight_booking.reservation.handlers.request_models import ReservationPathParameters
from flight_booking.reservation.handlers.response_models import to_response
from flight_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from flight_booking.reservation.infrastructure.price_table_loader import (
    load_price_table,
)
from flight_booking.shared.utils import api_response, handle_errors, log_domain_events

logger = Logger()

repository = DynamoDBReservationRepository()
pricer = ReservationPricer(load_price_table())
service = CancelReservationService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler

    キャンセル済みの予約に対しても 200 を返す。
    """

    params = ReservationPathParameters.model_validate(event.path_parameters or {})
    logger.info("Cancelling reservation", extra={"reservation_id": params.reservation_id})

    reservation = service.cancel(ReservationId(value=params.reservation_id))
    log_domain_events(logger, reservation)
    return api_response(200, to_response(reservation, pricer))
