from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity.passenger import Passenger
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.event import (
    PassengerPackageChanged,
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
)
from flight_booking.reservation.domain.exception import (
    PassengerNotFoundException,
    SeatConflictException,
)
from flight_booking.reservation.domain.value_object import (
    OptionalPackage,
    PassengerId,
    ReservationId,
    ReservationTotals,
    SeatLabel,
)
from flight_booking.shared.domain import AggregateRoot, IsoDateTime, Money
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ValidationException,
)

if TYPE_CHECKING:
    from flight_booking.reservation.domain.service.reservation_pricer import (
        ReservationPricer,
    )


class Reservation(AggregateRoot[ReservationId]):
    """フライト予約（集約ルート）

    - 1 件の予約は 1 便に対して 1 人以上の乗客を順序付きで持つ
    - 同じ予約内の乗客同士で同じ座席は持てない
    - base_fare は予約時点の 1 人あたり運賃のスナップショット
    - 合計金額は乗客・運賃が変わるたびに reprice() で全体を再計算する
    - CANCELLED は終端。キャンセル後も合計金額は履歴として残る
    """

    def __init__(
        self,
        id: ReservationId,
        flight_id: FlightId,
        passengers: Sequence[Passenger],
        base_fare: Money,
        status: ReservationStatus = ReservationStatus.PENDING,
        totals: ReservationTotals | None = None,
        notes: str = "",
        created_at: IsoDateTime | None = None,
        updated_at: IsoDateTime | None = None,
        version: int = 0,
    ) -> None:
        super().__init__(id)

        self._flight_id = flight_id
        self._passengers = list(passengers)
        self._base_fare = base_fare
        self._status = status
        self._totals = totals or ReservationTotals.zero(base_fare.currency)
        self._notes = (notes or "").strip()
        self._created_at = created_at or IsoDateTime.now()
        self._updated_at = updated_at or self._created_at
        self._version = version

        self._validate_passengers()

    @classmethod
    def create(
        cls,
        flight_id: FlightId,
        passengers: Sequence[Passenger],
        base_fare: Money,
        notes: str = "",
    ) -> Reservation:
        """新規予約を PENDING 状態で生成する"""
        reservation = cls(
            id=ReservationId.generate(),
            flight_id=flight_id,
            passengers=passengers,
            base_fare=base_fare,
            notes=notes,
        )
        reservation.add_domain_event(
            ReservationCreated(
                reservation_id=reservation.id,
                flight_id=flight_id,
                seats=tuple(sorted(reservation.seat_labels())),
            )
        )
        return reservation

    def _validate_passengers(self) -> None:
        if not self._passengers:
            raise ValidationException("passengers", "At least one passenger is required")

        seen: set[SeatLabel] = set()
        for passenger in self._passengers:
            if passenger.seat is None:
                continue
            if passenger.seat in seen:
                raise SeatConflictException(passenger.seat, seen)
            seen.add(passenger.seat)

    @property
    def flight_id(self) -> FlightId:
        return self._flight_id

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._passengers)

    @property
    def base_fare(self) -> Money:
        return self._base_fare

    @property
    def status(self) -> ReservationStatus:
        return self._status

    @property
    def totals(self) -> ReservationTotals:
        return self._totals

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    @property
    def version(self) -> int:
        return self._version

    @property
    def is_active(self) -> bool:
        """座席を占有しているか（CANCELLED 以外）"""
        return self._status.is_active

    def seat_labels(self) -> frozenset[SeatLabel]:
        """この予約の乗客が指定している座席"""
        return frozenset(p.seat for p in self._passengers if p.seat is not None)

    def passenger(self, passenger_id: PassengerId) -> Passenger:
        """予約内の乗客を取得する"""
        for passenger in self._passengers:
            if passenger.id == passenger_id:
                return passenger
        raise PassengerNotFoundException(self.id, passenger_id)

    def change_package(
        self, passenger_id: PassengerId, optional_package: OptionalPackage
    ) -> None:
        """乗客のオプションを差し替える

        他の予約との座席競合は SeatLedger が判定する。ここでは同じ予約内の
        他の乗客との重複のみを検査する。合計金額の再計算は reprice() で行う。
        """
        self._ensure_modifiable()
        passenger = self.passenger(passenger_id)

        seat = optional_package.seat
        if seat is not None:
            others = {
                p.seat for p in self._passengers if p != passenger and p.seat is not None
            }
            if seat in others:
                raise SeatConflictException(seat, others)

        previous_seat = passenger.seat
        passenger.change_package(optional_package)
        self._touch()
        self.add_domain_event(
            PassengerPackageChanged(
                reservation_id=self.id,
                passenger_id=passenger_id,
                previous_seat=previous_seat,
                current_seat=seat,
            )
        )

    def remove_package(self, passenger_id: PassengerId) -> None:
        """乗客のオプションを初期状態に戻す（座席指定も解除）"""
        self.change_package(passenger_id, OptionalPackage.empty())

    def reprice(self, pricer: ReservationPricer) -> ReservationTotals:
        """合計金額を全乗客分から再計算する"""
        self._totals = pricer.compute_totals(
            self._base_fare, [p.optional_package for p in self._passengers]
        )
        return self._totals

    def confirm(self) -> None:
        """予約を確定する"""
        if self._status == ReservationStatus.CANCELLED:
            raise BusinessRuleViolationException("Cannot confirm a cancelled reservation")
        if self._status == ReservationStatus.CONFIRMED:
            return
        self._status = ReservationStatus.CONFIRMED
        self._touch()
        self.add_domain_event(ReservationConfirmed(reservation_id=self.id))

    def cancel(self) -> None:
        """予約をキャンセルする（冪等）

        合計金額は再計算せず履歴として残す。座席は有効な予約から外れることで解放される。
        """
        if self._status == ReservationStatus.CANCELLED:
            return
        self._status = ReservationStatus.CANCELLED
        self._touch()
        self.add_domain_event(
            ReservationCancelled(
                reservation_id=self.id,
                flight_id=self._flight_id,
                released_seats=tuple(sorted(self.seat_labels())),
            )
        )

    def _ensure_modifiable(self) -> None:
        if self._status == ReservationStatus.CANCELLED:
            raise BusinessRuleViolationException("Cannot modify a cancelled reservation")

    def _touch(self) -> None:
        self._updated_at = IsoDateTime.now()
