from __future__ import annotations

from pydantic import BaseModel

from flight_booking.flight.domain.entity import Flight


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    flight_id: str
    flight_number: str
    origin: str
    destination: str
    route: str
    departure_time: str
    arrival_time: str
    seat_capacity: int
    base_fare_amount: str
    base_fare_currency: str
    is_available: bool
    status: str


class FlightListResponse(BaseModel):
    """フライト一覧レスポンスモデル"""

    status: str = "success"
    data: list[FlightData]
    count: int


def to_flight_data(flight: Flight) -> FlightData:
    """Flight エンティティをレスポンスモデルに変換する"""
    return FlightData(
        flight_id=str(flight.id),
        flight_number=str(flight.flight_number),
        origin=flight.origin,
        destination=flight.destination,
        route=flight.route,
        departure_time=str(flight.departure_time),
        arrival_time=str(flight.arrival_time),
        seat_capacity=flight.seat_capacity,
        base_fare_amount=str(flight.base_fare.amount),
        base_fare_currency=str(flight.base_fare.currency),
        is_available=flight.is_available,
        status=flight.status.value,
    )


def to_list_response(flights: list[Flight]) -> dict:
    """Flight のリストをレスポンス辞書に変換する"""
    return FlightListResponse(
        data=[to_flight_data(flight) for flight in flights],
        count=len(flights),
    ).model_dump()
