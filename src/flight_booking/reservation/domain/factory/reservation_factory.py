from collections.abc import Sequence
from typing import NotRequired, TypedDict

from flight_booking.flight.domain.entity import Flight
from flight_booking.reservation.domain.entity import Passenger, Reservation
from flight_booking.reservation.domain.value_object import OptionalPackage, PassengerId


class PackageDetails(TypedDict):
    """オプションの入力データ構造（リクエスト由来のプリミティブ値）"""

    meal: NotRequired[str | None]
    seat: NotRequired[str | None]
    seat_class: NotRequired[str | None]
    baggage_count: NotRequired[object]
    baggage_weights: NotRequired[Sequence[object]]
    notes: NotRequired[str | None]


class PassengerDetails(TypedDict):
    """乗客の入力データ構造"""

    full_name: str
    email: str
    document_number: str
    optional_package: NotRequired[PackageDetails]


class ReservationFactory:
    """予約エンティティのファクトリ

    - プリミティブ型から Value Object への変換（正規化を含む）
    - 乗客IDの採番
    - 初期状態 (PENDING) と運賃スナップショットの設定
    """

    def create(
        self,
        flight: Flight,
        passengers: Sequence[PassengerDetails],
        notes: str = "",
    ) -> Reservation:
        """新規予約エンティティを生成する

        Args:
            flight: 予約対象のフライト（運賃のスナップショットを取る）
            passengers: 乗客情報（1 人以上）
            notes: 予約全体のメモ

        Returns:
            Reservation: 生成された予約エンティティ（PENDING状態、合計金額は未計算）
        """
        return Reservation.create(
            flight_id=flight.id,
            passengers=[self.build_passenger(details) for details in passengers],
            base_fare=flight.base_fare,
            notes=notes,
        )

    def build_passenger(self, details: PassengerDetails) -> Passenger:
        return Passenger(
            id=PassengerId.generate(),
            full_name=details.get("full_name", ""),
            email=details.get("email", ""),
            document_number=details.get("document_number", ""),
            optional_package=self.build_package(details.get("optional_package") or {}),
        )

    def build_package(self, details: PackageDetails) -> OptionalPackage:
        """入力値からオプションを生成する（不正な値は安全なデフォルトに丸める）"""
        return OptionalPackage(
            meal=details.get("meal"),
            seat=details.get("seat"),
            seat_class=details.get("seat_class"),
            baggage_count=details.get("baggage_count"),
            baggage_items=tuple(details.get("baggage_weights") or ()),
            notes=details.get("notes") or "",
        )
