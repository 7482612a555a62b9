import copy
import os
from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# ハンドラモジュールは import 時に boto3 リソースを生成するため先に設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "flight-booking-test")

from flight_booking.flight.domain.entity import Flight  # noqa: E402
from flight_booking.flight.domain.enum import FlightStatus  # noqa: E402
from flight_booking.flight.domain.repository import FlightRepository  # noqa: E402
from flight_booking.flight.domain.value_object import (  # noqa: E402
    FlightId,
    FlightNumber,
)
from flight_booking.reservation.domain.entity import Reservation  # noqa: E402
from flight_booking.reservation.domain.enum import ReservationStatus  # noqa: E402
from flight_booking.reservation.domain.exception import (  # noqa: E402
    DuplicateSeatException,
)
from flight_booking.reservation.domain.factory import ReservationFactory  # noqa: E402
from flight_booking.reservation.domain.repository import (  # noqa: E402
    ReservationRepository,
)
from flight_booking.reservation.domain.service import (  # noqa: E402
    ReservationPricer,
    SeatLedger,
)
from flight_booking.shared.domain import Currency, IsoDateTime, Money  # noqa: E402
from flight_booking.shared.domain.exception import (  # noqa: E402
    DuplicateResourceException,
    OptimisticLockException,
)


class InMemoryFlightRepository(FlightRepository):
    """テスト用のフライトレポジトリ"""

    def __init__(self, flights=()) -> None:
        self._flights = {flight.id: flight for flight in flights}

    def save(self, flight):
        if flight.id in self._flights:
            raise DuplicateResourceException(f"Flight already exists: {flight.id}")
        self._flights[flight.id] = flight

    def find_by_id(self, flight_id):
        return self._flights.get(flight_id)

    def list_all(self):
        return sorted(self._flights.values(), key=lambda f: f.departure_time.value)


class InMemoryReservationRepository(ReservationRepository):
    """テスト用の予約レポジトリ

    DynamoDB の座席ロックと同じく、有効な予約の範囲で (フライト, 座席) の一意性を保証する。
    保存・取得時はコピーを渡し、永続化を経由しない変更が漏れないようにする。
    """

    def __init__(self) -> None:
        self._reservations: dict = {}

    def _ensure_seats_free(self, reservation):
        if not reservation.is_active:
            return
        for other in self._reservations.values():
            if other.id == reservation.id or not other.is_active:
                continue
            if other.flight_id != reservation.flight_id:
                continue
            held = reservation.seat_labels() & other.seat_labels()
            if held:
                raise DuplicateSeatException(reservation.flight_id, sorted(held)[0])

    def save(self, reservation):
        if reservation.id in self._reservations:
            raise DuplicateResourceException(
                f"Reservation already exists: {reservation.id}"
            )
        self._ensure_seats_free(reservation)
        self._reservations[reservation.id] = copy.deepcopy(reservation)

    def find_by_id(self, reservation_id):
        reservation = self._reservations.get(reservation_id)
        return copy.deepcopy(reservation) if reservation is not None else None

    def find_active_by_flight_id(self, flight_id):
        return [
            copy.deepcopy(r)
            for r in self._reservations.values()
            if r.flight_id == flight_id and r.is_active
        ]

    def list_all(self, flight_id=None):
        reservations = [
            copy.deepcopy(r)
            for r in self._reservations.values()
            if flight_id is None or r.flight_id == flight_id
        ]
        return sorted(reservations, key=lambda r: r.created_at.value, reverse=True)

    def update_passenger_package(self, reservation, passenger_id, previous_seat):
        self._ensure_seats_free(reservation)
        self._reservations[reservation.id] = copy.deepcopy(reservation)

    def update_status(self, reservation, expected_status=None):
        stored = self._reservations[reservation.id]
        if expected_status is not None and stored.status != expected_status:
            raise OptimisticLockException("Reservation status conflict")
        self._reservations[reservation.id] = copy.deepcopy(reservation)

    def put(self, reservation):
        """事前チェックを経由せずに直接書き込む（競合状態の再現用）"""
        self._reservations[reservation.id] = copy.deepcopy(reservation)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "test-request-id"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: str = "f-001",
        flight_number: str = "PR102",
        origin: str = "Manila",
        destination: str = "Tokyo",
        departure_time: str = "2025-01-01T10:00:00+00:00",
        arrival_time: str = "2025-01-01T14:00:00+00:00",
        seat_capacity: int = 10,
        base_fare: Decimal = Decimal("10000"),
        currency: str = "PHP",
        is_available: bool = True,
        status: FlightStatus = FlightStatus.SCHEDULED,
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            flight_number=FlightNumber(value=flight_number),
            origin=origin,
            destination=destination,
            departure_time=IsoDateTime.from_string(departure_time),
            arrival_time=IsoDateTime.from_string(arrival_time),
            seat_capacity=seat_capacity,
            base_fare=Money(amount=base_fare, currency=Currency(currency)),
            is_available=is_available,
            status=status,
        )

    return _factory


@pytest.fixture
def passenger_details():
    """PassengerDetails を生成する Factory fixture"""

    def _factory(
        full_name: str = "Juan Dela Cruz",
        email: str = "juan@example.com",
        document_number: str = "P1234567",
        **package,
    ) -> dict:
        details = {
            "full_name": full_name,
            "email": email,
            "document_number": document_number,
        }
        if package:
            details["optional_package"] = package
        return details

    return _factory


@pytest.fixture
def create_reservation(create_flight, passenger_details):
    """Reservation を生成する Factory fixture（合計金額計算済み）"""

    def _factory(
        flight: Flight | None = None,
        passengers: list[dict] | None = None,
        status: ReservationStatus = ReservationStatus.PENDING,
    ) -> Reservation:
        flight = flight or create_flight()
        reservation = ReservationFactory().create(
            flight, passengers or [passenger_details()]
        )
        reservation.reprice(ReservationPricer())
        reservation.flush_domain_events()
        if status == ReservationStatus.CONFIRMED:
            reservation.confirm()
        elif status == ReservationStatus.CANCELLED:
            reservation.cancel()
        reservation.flush_domain_events()
        return reservation

    return _factory


@pytest.fixture
def flight_repository(create_flight):
    return InMemoryFlightRepository([create_flight()])


@pytest.fixture
def reservation_repository():
    return InMemoryReservationRepository()


@pytest.fixture
def ledger(reservation_repository):
    return SeatLedger(reservation_repository)


@pytest.fixture
def pricer():
    return ReservationPricer()
