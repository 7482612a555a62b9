import datetime

from aws_cdk import Duration, Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# AWS 公式の Powertools for AWS Lambda (Python) レイヤー（pydantic を含む）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        price_overrides: dict[str, str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._price_overrides = price_overrides or {}
        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region),
        )

        self.search_flights = self._create_function(
            "SearchFlightsLambda",
            "flight_booking.flight.handlers.search.lambda_handler",
            "flight-service",
        )
        self.get_seat_availability = self._create_function(
            "GetSeatAvailabilityLambda",
            "flight_booking.reservation.handlers.seats.lambda_handler",
            "reservation-service",
        )
        self.get_reservation = self._create_function(
            "GetReservationLambda",
            "flight_booking.reservation.handlers.get.lambda_handler",
            "reservation-service",
        )
        self.list_reservations = self._create_function(
            "ListReservationsLambda",
            "flight_booking.reservation.handlers.list_reservations.lambda_handler",
            "reservation-service",
        )

        for fn in [
            self.search_flights,
            self.get_seat_availability,
            self.get_reservation,
            self.list_reservations,
        ]:
            table.grant_read_data(fn)

        self.create_reservation = self._create_function(
            "CreateReservationLambda",
            "flight_booking.reservation.handlers.create.lambda_handler",
            "reservation-service",
        )
        self.update_package = self._create_function(
            "UpdatePackageLambda",
            "flight_booking.reservation.handlers.update_package.lambda_handler",
            "reservation-service",
        )
        self.remove_package = self._create_function(
            "RemovePackageLambda",
            "flight_booking.reservation.handlers.remove_package.lambda_handler",
            "reservation-service",
        )
        self.confirm_reservation = self._create_function(
            "ConfirmReservationLambda",
            "flight_booking.reservation.handlers.confirm.lambda_handler",
            "reservation-service",
        )
        self.cancel_reservation = self._create_function(
            "CancelReservationLambda",
            "flight_booking.reservation.handlers.cancel.lambda_handler",
            "reservation-service",
        )

        for fn in [
            self.create_reservation,
            self.update_package,
            self.remove_package,
            self.confirm_reservation,
            self.cancel_reservation,
        ]:
            table.grant_read_write_data(fn)

    @property
    def all_functions(self) -> list[_lambda.Function]:
        return [
            self.search_flights,
            self.get_seat_availability,
            self.get_reservation,
            self.list_reservations,
            self.create_reservation,
            self.update_package,
            self.remove_package,
            self.confirm_reservation,
            self.cancel_reservation,
        ]

    def _create_function(
        self, id: str, handler: str, service_name: str
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": self._table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **self._price_overrides,
            },
        )
