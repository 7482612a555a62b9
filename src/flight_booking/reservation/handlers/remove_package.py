from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.reservation.applications.remove_optional_package import (
    RemoveOptionalPackageService,
)
from flight_booking.reservation.domain.service import ReservationPricer
from flight_booking.reservation.domain.value_object import PassengerId, ReservationId
from flight_booking.reservation.handlers.request_models import ReservationPathParameters
from flight_booking.reservation.handlers.response_models import to_response
from flight_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from flight_booking.reservation.infrastructure.price_table_loader import (
    load_price_table,
)
from flight_booking.shared.domain.exception import ValidationException
from flight_booking.shared.utils import api_response, handle_errors, log_domain_events

logger = Logger()

repository = DynamoDBReservationRepository()
pricer = ReservationPricer(load_price_table())
service = RemoveOptionalPackageService(repository=repository, pricer=pricer)


@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEventV2)
@handle_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """乗客オプション取り消し Lambda Handler"""

    params = ReservationPathParameters.model_validate(event.path_parameters or {})
    if params.passenger_id is None:
        raise ValidationException("passenger_id")

    logger.append_keys(reservation_id=params.reservation_id)
    logger.info(
        "Received remove package request", extra={"passenger_id": params.passenger_id}
    )

    reservation = service.remove(
        ReservationId(value=params.reservation_id),
        PassengerId(value=params.passenger_id),
    )
    log_domain_events(logger, reservation)
    return api_response(200, to_response(reservation, pricer))
