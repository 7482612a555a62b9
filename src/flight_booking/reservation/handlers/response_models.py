from __future__ import annotations

from pydantic import BaseModel

from flight_booking.reservation.domain.entity import Passenger, Reservation
from flight_booking.reservation.domain.service import ReservationPricer
from flight_booking.reservation.domain.value_object import SeatAvailability
from flight_booking.shared.domain import Currency


class PackageData(BaseModel):
    """乗客オプションのレスポンスモデル（料金内訳付き）"""

    meal: str
    seat: str | None
    seat_class: str
    baggage_count: int
    baggage_weights: list[str]
    notes: str
    meal_price: str
    baggage_price: str
    seat_price: str
    total: str


class PassengerData(BaseModel):
    passenger_id: str
    full_name: str
    email: str
    document_number: str
    optional_package: PackageData


class TotalsData(BaseModel):
    currency: str
    base_fare_total: str
    optional_package_total: str
    grand_total: str


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_id: str
    flight_id: str
    status: str
    base_fare_amount: str
    passengers: list[PassengerData]
    totals: TotalsData
    notes: str
    created_at: str
    updated_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ReservationListResponse(BaseModel):
    """予約一覧レスポンスモデル"""

    status: str = "success"
    data: list[ReservationData]
    count: int


class SeatAvailabilityData(BaseModel):
    flight_id: str
    seat_capacity: int
    occupied_seats: list[str]
    available_count: int


class SeatAvailabilityResponse(BaseModel):
    """座席状況レスポンスモデル"""

    status: str = "success"
    data: SeatAvailabilityData


def _to_passenger_data(
    passenger: Passenger, pricer: ReservationPricer, currency: Currency
) -> PassengerData:
    package = passenger.optional_package
    price = pricer.price_package(package, currency)
    return PassengerData(
        passenger_id=str(passenger.id),
        full_name=passenger.full_name,
        email=passenger.email,
        document_number=passenger.document_number,
        optional_package=PackageData(
            meal=package.meal.value,
            seat=str(package.seat) if package.seat is not None else None,
            seat_class=package.seat_class.value,
            baggage_count=package.baggage_count,
            baggage_weights=[str(item.weight) for item in package.baggage_items],
            notes=package.notes,
            meal_price=str(price.meal_price.amount),
            baggage_price=str(price.baggage_price.amount),
            seat_price=str(price.seat_price.amount),
            total=str(price.total.amount),
        ),
    )


def to_reservation_data(
    reservation: Reservation, pricer: ReservationPricer
) -> ReservationData:
    """Reservation エンティティをレスポンスモデルに変換する

    乗客ごとの料金内訳は表示用に pricer で算出する。合計は保存済みの値を返す。
    """
    totals = reservation.totals
    currency = reservation.base_fare.currency
    return ReservationData(
        reservation_id=str(reservation.id),
        flight_id=str(reservation.flight_id),
        status=reservation.status.value,
        base_fare_amount=str(reservation.base_fare.amount),
        passengers=[
            _to_passenger_data(p, pricer, currency) for p in reservation.passengers
        ],
        totals=TotalsData(
            currency=str(totals.currency),
            base_fare_total=str(totals.base_fare_total.amount),
            optional_package_total=str(totals.optional_package_total.amount),
            grand_total=str(totals.grand_total.amount),
        ),
        notes=reservation.notes,
        created_at=str(reservation.created_at),
        updated_at=str(reservation.updated_at),
    )


def to_response(reservation: Reservation, pricer: ReservationPricer) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_reservation_data(reservation, pricer)).model_dump()


def to_list_response(reservations: list[Reservation], pricer: ReservationPricer) -> dict:
    return ReservationListResponse(
        data=[to_reservation_data(r, pricer) for r in reservations],
        count=len(reservations),
    ).model_dump()


def to_seat_availability_response(availability: SeatAvailability) -> dict:
    return SeatAvailabilityResponse(
        data=SeatAvailabilityData(
            flight_id=str(availability.flight_id),
            seat_capacity=availability.seat_capacity,
            occupied_seats=[str(seat) for seat in availability.occupied_seats],
            available_count=availability.available_count,
        )
    ).model_dump()
