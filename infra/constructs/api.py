from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    すべてのエンドポイントは Lambda プロキシ統合。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        search_flights: _lambda.Function,
        get_seat_availability: _lambda.Function,
        create_reservation: _lambda.Function,
        list_reservations: _lambda.Function,
        get_reservation: _lambda.Function,
        update_package: _lambda.Function,
        remove_package: _lambda.Function,
        confirm_reservation: _lambda.Function,
        cancel_reservation: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "FlightBookingRestApi",
            rest_api_name="Flight Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        # GET /flights
        flights_resource = self.rest_api.root.add_resource("flights")
        flights_resource.add_method("GET", apigw.LambdaIntegration(search_flights))

        # GET /flights/{flight_id}/seats
        seats_resource = flights_resource.add_resource("{flight_id}").add_resource(
            "seats"
        )
        seats_resource.add_method(
            "GET", apigw.LambdaIntegration(get_seat_availability)
        )

        # POST /reservations, GET /reservations
        reservations_resource = self.rest_api.root.add_resource("reservations")
        reservations_resource.add_method(
            "POST", apigw.LambdaIntegration(create_reservation)
        )
        reservations_resource.add_method(
            "GET", apigw.LambdaIntegration(list_reservations)
        )

        # GET /reservations/{reservation_id}
        reservation_resource = reservations_resource.add_resource("{reservation_id}")
        reservation_resource.add_method("GET", apigw.LambdaIntegration(get_reservation))

        # POST /reservations/{reservation_id}/confirm, /cancel
        reservation_resource.add_resource("confirm").add_method(
            "POST", apigw.LambdaIntegration(confirm_reservation)
        )
        reservation_resource.add_resource("cancel").add_method(
            "POST", apigw.LambdaIntegration(cancel_reservation)
        )

        # PUT / DELETE /reservations/{reservation_id}/passengers/{passenger_id}/package
        package_resource = (
            reservation_resource.add_resource("passengers")
            .add_resource("{passenger_id}")
            .add_resource("package")
        )
        package_resource.add_method("PUT", apigw.LambdaIntegration(update_package))
        package_resource.add_method("DELETE", apigw.LambdaIntegration(remove_package))
