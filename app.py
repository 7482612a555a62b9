#!/usr/bin/env python3
import json

import aws_cdk as cdk

from flight_booking_stack import FlightBookingStack

app = cdk.App()

# cdk deploy -c price_overrides='{"MEAL_PRICE_STANDARD": "55"}' で料金を上書きできる
price_overrides = app.node.try_get_context("price_overrides")
if isinstance(price_overrides, str):
    price_overrides = json.loads(price_overrides)

FlightBookingStack(
    app,
    "FlightBookingStack",
    price_overrides=price_overrides,
)

app.synth()
