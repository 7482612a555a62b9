import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.enum import FlightStatus
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId, FlightNumber
from flight_booking.shared.domain import Currency, IsoDateTime, Money
from flight_booking.shared.domain.exception import (
    DuplicateResourceException,
    StoreFailureException,
)


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    - フライト本体: PK=FLIGHT#<id>, SK=META
    - 一覧用 GSI1: GSI1PK=FLIGHTS, GSI1SK=<出発時刻 ISO 8601>
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, flight: Flight) -> None:
        """フライトをDBに保存する"""
        item = {
            "PK": f"FLIGHT#{flight.id}",
            "SK": "META",
            "entity_type": "FLIGHT",
            "flight_id": str(flight.id),
            "flight_number": str(flight.flight_number),
            "origin": flight.origin,
            "destination": flight.destination,
            "departure_time": str(flight.departure_time),
            "arrival_time": str(flight.arrival_time),
            "seat_capacity": flight.seat_capacity,
            "base_fare_amount": str(flight.base_fare.amount),
            "base_fare_currency": str(flight.base_fare.currency),
            "is_available": flight.is_available,
            "status": flight.status.value,
            "GSI1PK": "FLIGHTS",
            "GSI1SK": str(flight.departure_time),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Flight already exists: {flight.id}"
                ) from e
            raise StoreFailureException(f"Failed to save flight: {flight.id}") from e

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"FLIGHT#{flight_id}", "SK": "META"},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise StoreFailureException(f"Failed to load flight: {flight_id}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def list_all(self) -> list[Flight]:
        """全フライトを出発時刻の昇順で返す"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("FLIGHTS"),
        }
        items: list[dict] = []
        try:
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                if "LastEvaluatedKey" not in response:
                    break
                kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
        except ClientError as e:
            raise StoreFailureException("Failed to list flights") from e
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight(
            id=FlightId(value=item["flight_id"]),
            flight_number=FlightNumber(value=item["flight_number"]),
            origin=item["origin"],
            destination=item["destination"],
            departure_time=IsoDateTime.from_string(item["departure_time"]),
            arrival_time=IsoDateTime.from_string(item["arrival_time"]),
            seat_capacity=int(item["seat_capacity"]),
            base_fare=Money(
                amount=Decimal(item["base_fare_amount"]),
                currency=Currency(item["base_fare_currency"]),
            ),
            is_available=bool(item.get("is_available", True)),
            status=FlightStatus(item.get("status", FlightStatus.SCHEDULED.value)),
        )
