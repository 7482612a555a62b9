from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions


class FlightBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        price_overrides: dict[str, str] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            price_overrides=price_overrides,
        )

        api = Api(
            self,
            "Api",
            search_flights=fns.search_flights,
            get_seat_availability=fns.get_seat_availability,
            create_reservation=fns.create_reservation,
            list_reservations=fns.list_reservations,
            get_reservation=fns.get_reservation,
            update_package=fns.update_package,
            remove_package=fns.remove_package,
            confirm_reservation=fns.confirm_reservation,
            cancel_reservation=fns.cancel_reservation,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
