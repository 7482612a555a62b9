import os
from decimal import Decimal

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity import Passenger, Reservation
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.exception import DuplicateSeatException
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import (
    BaggageItem,
    OptionalPackage,
    PassengerId,
    ReservationId,
    ReservationTotals,
    SeatLabel,
)
from flight_booking.shared.domain import Currency, IsoDateTime, Money
from flight_booking.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    StoreFailureException,
)

logger = Logger(child=True)

_RESERVATION = "RESERVATION"
_SEAT_LOCK = "SEAT_LOCK"
_BATCH_GET_LIMIT = 100


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装

    - 予約本体: PK=RESERVATION#<id>, SK=META（乗客はリストとして埋め込む）
    - 便ごとの一覧用 GSI1: GSI1PK=FLIGHT#<flight_id>, GSI1SK=RESERVATION#<作成日時>#<id>
    - 全件一覧用 GSI2: GSI2PK=RESERVATIONS, GSI2SK=<作成日時>
    - 座席ロック: PK=FLIGHT#<flight_id>, SK=SEAT#<座席番号>

    座席ロックは予約本体と同じトランザクションで attribute_not_exists 条件付きで
    書き込む。これにより (フライト, 座席) の一意性をストレージ側で保証する。
    キャンセル・座席変更時はロックを削除して座席を解放する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.dynamodb.meta.client

    def save(self, reservation: Reservation) -> None:
        """予約と座席ロックを 1 トランザクションで保存する"""
        operations = [
            (
                _RESERVATION,
                None,
                {
                    "Put": {
                        "TableName": self.table_name,
                        "Item": self._to_item(reservation, reservation.version),
                        "ConditionExpression": "attribute_not_exists(PK)",
                    }
                },
            )
        ]
        for seat in sorted(reservation.seat_labels()):
            passenger = next(p for p in reservation.passengers if p.seat == seat)
            operations.append(self._put_seat_lock(reservation, passenger.id, seat))

        try:
            self._transact(operations, reservation)
        except _ReservationConditionFailed as e:
            raise DuplicateResourceException(
                f"Reservation already exists: {reservation.id}"
            ) from e.__cause__

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"RESERVATION#{reservation_id}", "SK": "META"},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise StoreFailureException(
                f"Failed to load reservation: {reservation_id}"
            ) from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_active_by_flight_id(self, flight_id: FlightId) -> list[Reservation]:
        """フライトの有効な予約を返す

        GSI1 は結果整合のため、キーだけを取得して本体を強い整合性で読み直す。
        キャンセルや座席変更の直後に古い射影を読み、空いた座席を占有と判定しないようにする。
        """
        keys = self._query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"FLIGHT#{flight_id}")
            & Key("GSI1SK").begins_with("RESERVATION#"),
            ProjectionExpression="PK, SK",
        )
        items = self._batch_get([{"PK": key["PK"], "SK": key["SK"]} for key in keys])
        reservations = [self._to_entity(item) for item in items]
        return sorted(
            (r for r in reservations if r.is_active),
            key=lambda r: (str(r.created_at), str(r.id)),
        )

    def list_all(self, flight_id: FlightId | None = None) -> list[Reservation]:
        """予約を作成日時の新しい順に返す"""
        if flight_id is not None:
            items = self._query(
                IndexName="GSI1",
                KeyConditionExpression=Key("GSI1PK").eq(f"FLIGHT#{flight_id}")
                & Key("GSI1SK").begins_with("RESERVATION#"),
                ScanIndexForward=False,
            )
        else:
            items = self._query(
                IndexName="GSI2",
                KeyConditionExpression=Key("GSI2PK").eq("RESERVATIONS"),
                ScanIndexForward=False,
            )
        return [self._to_entity(item) for item in items]

    def update_passenger_package(
        self,
        reservation: Reservation,
        passenger_id: PassengerId,
        previous_seat: SeatLabel | None,
    ) -> None:
        """予約本体の更新と座席ロックの付け替えを 1 トランザクションで行う"""
        current_seat = reservation.passenger(passenger_id).seat

        operations = [self._put_reservation_with_version(reservation)]
        if current_seat != previous_seat:
            if current_seat is not None:
                operations.append(
                    self._put_seat_lock(reservation, passenger_id, current_seat)
                )
            if previous_seat is not None:
                operations.append(self._delete_seat_lock(reservation, previous_seat))

        try:
            self._transact(operations, reservation)
        except _ReservationConditionFailed as e:
            raise OptimisticLockException(
                f"Reservation was modified concurrently: {reservation.id}"
            ) from e.__cause__

    def update_status(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> None:
        """予約のステータスを更新する（CANCELLED の場合は座席ロックも削除する）"""
        update: dict = {
            "TableName": self.table_name,
            "Key": {"PK": f"RESERVATION#{reservation.id}", "SK": "META"},
            "UpdateExpression": (
                "SET #status = :status, updated_at = :updated_at, "
                "version = version + :one"
            ),
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {
                ":status": reservation.status.value,
                ":updated_at": str(reservation.updated_at),
                ":one": 1,
            },
            "ConditionExpression": "attribute_exists(PK)",
        }
        if expected_status is not None:
            update["ConditionExpression"] += " AND #status = :expected_status"
            update["ExpressionAttributeValues"][":expected_status"] = (
                expected_status.value
            )

        operations = [(_RESERVATION, None, {"Update": update})]
        if reservation.status == ReservationStatus.CANCELLED:
            for seat in sorted(reservation.seat_labels()):
                operations.append(self._delete_seat_lock(reservation, seat))

        try:
            self._transact(operations, reservation)
        except _ReservationConditionFailed as e:
            raise OptimisticLockException(
                f"Reservation status conflict: "
                f"expected {expected_status}, "
                f"reservation_id={reservation.id}"
            ) from e.__cause__

    def _transact(self, operations: list[tuple], reservation: Reservation) -> None:
        """トランザクション書き込み

        失敗した操作を CancellationReasons の位置から特定して例外を振り分ける。
        """
        try:
            self.client.transact_write_items(
                TransactItems=[operation for _, _, operation in operations]
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            if error.get("Code") != "TransactionCanceledException":
                raise StoreFailureException(
                    f"Failed to write reservation: {reservation.id}"
                ) from e

            reasons = e.response.get("CancellationReasons") or []
            logger.warning(
                "Reservation transaction cancelled",
                extra={
                    "reservation_id": str(reservation.id),
                    "reasons": [reason.get("Code") for reason in reasons],
                },
            )
            for (kind, seat, _), reason in zip(operations, reasons):
                if reason.get("Code") != "ConditionalCheckFailed":
                    continue
                if kind == _SEAT_LOCK and seat is not None:
                    raise DuplicateSeatException(reservation.flight_id, seat) from e
                if kind == _RESERVATION:
                    raise _ReservationConditionFailed() from e
            raise StoreFailureException(
                f"Failed to write reservation: {reservation.id}"
            ) from e

    def _put_reservation_with_version(self, reservation: Reservation) -> tuple:
        return (
            _RESERVATION,
            None,
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": self._to_item(reservation, reservation.version + 1),
                    "ConditionExpression": "version = :expected_version",
                    "ExpressionAttributeValues": {
                        ":expected_version": reservation.version
                    },
                }
            },
        )

    def _put_seat_lock(
        self, reservation: Reservation, passenger_id: PassengerId, seat: SeatLabel
    ) -> tuple:
        return (
            _SEAT_LOCK,
            seat,
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": {
                        "PK": f"FLIGHT#{reservation.flight_id}",
                        "SK": f"SEAT#{seat}",
                        "entity_type": _SEAT_LOCK,
                        "flight_id": str(reservation.flight_id),
                        "seat": str(seat),
                        "reservation_id": str(reservation.id),
                        "passenger_id": str(passenger_id),
                    },
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            },
        )

    def _delete_seat_lock(self, reservation: Reservation, seat: SeatLabel) -> tuple:
        """自分の予約が保持しているロックのみ削除する"""
        return (
            _SEAT_LOCK,
            None,
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": {
                        "PK": f"FLIGHT#{reservation.flight_id}",
                        "SK": f"SEAT#{seat}",
                    },
                    "ConditionExpression": (
                        "attribute_not_exists(PK) OR reservation_id = :reservation_id"
                    ),
                    "ExpressionAttributeValues": {
                        ":reservation_id": str(reservation.id)
                    },
                }
            },
        )

    def _query(self, **kwargs) -> list[dict]:
        items: list[dict] = []
        try:
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                if "LastEvaluatedKey" not in response:
                    break
                kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
        except ClientError as e:
            raise StoreFailureException("Failed to query reservations") from e
        return items

    def _batch_get(self, keys: list[dict]) -> list[dict]:
        """強い整合性でまとめて取得する（未処理キーは続けて要求する）"""
        items: list[dict] = []
        try:
            for start in range(0, len(keys), _BATCH_GET_LIMIT):
                request = {
                    self.table_name: {
                        "Keys": keys[start : start + _BATCH_GET_LIMIT],
                        "ConsistentRead": True,
                    }
                }
                while request:
                    response = self.dynamodb.batch_get_item(RequestItems=request)
                    items.extend(response.get("Responses", {}).get(self.table_name, []))
                    request = response.get("UnprocessedKeys") or {}
        except ClientError as e:
            raise StoreFailureException("Failed to load reservations") from e
        return items

    def _to_item(self, reservation: Reservation, version: int) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        totals = reservation.totals
        created_at = str(reservation.created_at)
        return {
            "PK": f"RESERVATION#{reservation.id}",
            "SK": "META",
            "entity_type": _RESERVATION,
            "reservation_id": str(reservation.id),
            "flight_id": str(reservation.flight_id),
            "status": reservation.status.value,
            "passengers": [self._passenger_to_item(p) for p in reservation.passengers],
            "currency": str(totals.currency),
            "base_fare_amount": str(reservation.base_fare.amount),
            "base_fare_total": str(totals.base_fare_total.amount),
            "optional_package_total": str(totals.optional_package_total.amount),
            "grand_total": str(totals.grand_total.amount),
            "notes": reservation.notes,
            "created_at": created_at,
            "updated_at": str(reservation.updated_at),
            "version": version,
            "GSI1PK": f"FLIGHT#{reservation.flight_id}",
            "GSI1SK": f"RESERVATION#{created_at}#{reservation.id}",
            "GSI2PK": "RESERVATIONS",
            "GSI2SK": created_at,
        }

    @staticmethod
    def _passenger_to_item(passenger: Passenger) -> dict:
        package = passenger.optional_package
        return {
            "passenger_id": str(passenger.id),
            "full_name": passenger.full_name,
            "email": passenger.email,
            "document_number": passenger.document_number,
            "package": {
                "meal": package.meal.value,
                "seat": str(package.seat) if package.seat is not None else None,
                "seat_class": package.seat_class.value,
                "baggage_count": package.baggage_count,
                "baggage_items": [
                    {"weight": str(item.weight)} for item in package.baggage_items
                ],
                "notes": package.notes,
            },
        }

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            flight_id=FlightId(value=item["flight_id"]),
            passengers=[self._passenger_to_entity(p) for p in item["passengers"]],
            base_fare=Money(amount=Decimal(item["base_fare_amount"]), currency=currency),
            status=ReservationStatus(item["status"]),
            totals=ReservationTotals(
                base_fare_total=Money(Decimal(item["base_fare_total"]), currency),
                optional_package_total=Money(
                    Decimal(item["optional_package_total"]), currency
                ),
                grand_total=Money(Decimal(item["grand_total"]), currency),
            ),
            notes=item.get("notes", ""),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
            version=int(item.get("version", 0)),
        )

    @staticmethod
    def _passenger_to_entity(item: dict) -> Passenger:
        package = item.get("package") or {}
        return Passenger(
            id=PassengerId(value=item["passenger_id"]),
            full_name=item["full_name"],
            email=item["email"],
            document_number=item["document_number"],
            optional_package=OptionalPackage(
                meal=package.get("meal"),
                seat=package.get("seat"),
                seat_class=package.get("seat_class"),
                baggage_count=package.get("baggage_count", 0),
                baggage_items=tuple(
                    BaggageItem(weight=baggage["weight"])
                    for baggage in package.get("baggage_items", [])
                ),
                notes=package.get("notes", ""),
            ),
        )


class _ReservationConditionFailed(Exception):
    """予約本体の条件付き書き込みが失敗した（呼び出し元で意味のある例外に変換する）"""
