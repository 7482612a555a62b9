import json
from unittest.mock import MagicMock

import pytest

from flight_booking.flight.domain.exception import FlightNotFoundException
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.exception import (
    ReservationNotFoundException,
    SeatConflictException,
)
from flight_booking.reservation.domain.value_object import SeatAvailability, SeatLabel
from flight_booking.reservation.handlers import (
    cancel,
    confirm,
    create,
    get,
    list_reservations,
    remove_package,
    seats,
    update_package,
)
from flight_booking.shared.domain.exception import StoreFailureException


def _event(body: dict | None = None, path_parameters=None, query=None) -> dict:
    event = {
        "version": "2.0",
        "rawPath": "/",
        "isBase64Encoded": False,
        "pathParameters": path_parameters,
        "queryStringParameters": query,
    }
    if body is not None:
        event["body"] = json.dumps(body)
    return event


@pytest.fixture
def mock_service(monkeypatch):
    """ハンドラモジュールの service を差し替える"""

    def _patch(module):
        service = MagicMock()
        monkeypatch.setattr(module, "service", service)
        return service

    return _patch


class TestCreateHandler:
    """予約作成 Lambda Handler のテスト"""

    def test_created(self, mock_service, create_reservation, passenger_details, lambda_context):
        service = mock_service(create)
        service.reserve.return_value = create_reservation(
            passengers=[passenger_details(seat="1A", meal="standard", baggage_count=2)]
        )
        body = {
            "flight_id": "f-001",
            "passengers": [
                {
                    "full_name": "Juan Dela Cruz",
                    "email": "juan@example.com",
                    "document_number": "P1234567",
                    "optional_package": {
                        "meal": "standard",
                        "seat": "1A",
                        "baggage_count": "2",
                    },
                }
            ],
        }

        response = create.lambda_handler(_event(body), lambda_context)

        assert response["statusCode"] == 201
        data = json.loads(response["body"])["data"]
        assert data["status"] == "PENDING"
        assert data["totals"] == {
            "currency": "PHP",
            "base_fare_total": "10000",
            "optional_package_total": "110",
            "grand_total": "10110",
        }
        package = data["passengers"][0]["optional_package"]
        assert package["seat"] == "1A"
        assert package["meal_price"] == "50"
        assert package["baggage_price"] == "60"

        flight_id, passengers = service.reserve.call_args.args
        assert str(flight_id) == "f-001"
        assert passengers[0]["optional_package"]["baggage_count"] == "2"

    def test_garbage_package_values_are_accepted(self, mock_service, create_reservation, lambda_context):
        """数値項目の不正値はリクエスト検証で弾かずドメインに渡す"""
        service = mock_service(create)
        service.reserve.return_value = create_reservation()
        body = {
            "flight_id": "f-001",
            "passengers": [
                {
                    "full_name": "Juan",
                    "email": "juan@example.com",
                    "document_number": "P1",
                    "optional_package": {
                        "baggage_count": "many",
                        "baggage_weights": ["-3", None, 4.5],
                    },
                }
            ],
        }

        response = create.lambda_handler(_event(body), lambda_context)

        assert response["statusCode"] == 201

    def test_non_scalar_package_numbers_are_accepted(
        self, mock_service, create_reservation, lambda_context
    ):
        """オブジェクトや配列の個数・重量も 422 にせずドメインに渡す"""
        service = mock_service(create)
        service.reserve.return_value = create_reservation()
        body = {
            "flight_id": "f-001",
            "passengers": [
                {
                    "full_name": "Juan",
                    "email": "juan@example.com",
                    "document_number": "P1",
                    "optional_package": {
                        "baggage_count": {"count": 2},
                        "baggage_weights": [[12], {"kg": 3}],
                    },
                }
            ],
        }

        response = create.lambda_handler(_event(body), lambda_context)

        assert response["statusCode"] == 201
        _, passengers = service.reserve.call_args.args
        assert passengers[0]["optional_package"]["baggage_count"] == {"count": 2}

    def test_no_passengers_returns_422(self, mock_service, lambda_context):
        mock_service(create)

        response = create.lambda_handler(
            _event({"flight_id": "f-001", "passengers": []}), lambda_context
        )

        assert response["statusCode"] == 422
        assert json.loads(response["body"])["error_code"] == "VALIDATION_ERROR"

    def test_invalid_json_returns_422(self, mock_service, lambda_context):
        mock_service(create)
        event = _event()
        event["body"] = "{not json"

        response = create.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 422

    def test_seat_conflict_returns_409(self, mock_service, passenger_details, lambda_context):
        service = mock_service(create)
        service.reserve.side_effect = SeatConflictException("1A", ["1A"])
        body = {"flight_id": "f-001", "passengers": [passenger_details(seat="1A")]}

        response = create.lambda_handler(_event(body), lambda_context)

        assert response["statusCode"] == 409
        assert json.loads(response["body"])["details"]["seat"] == "1A"

    def test_unknown_flight_returns_404(self, mock_service, passenger_details, lambda_context):
        service = mock_service(create)
        service.reserve.side_effect = FlightNotFoundException("f-404")
        body = {"flight_id": "f-404", "passengers": [passenger_details()]}

        response = create.lambda_handler(_event(body), lambda_context)

        assert response["statusCode"] == 404

    def test_store_failure_returns_503(self, mock_service, passenger_details, lambda_context):
        service = mock_service(create)
        service.reserve.side_effect = StoreFailureException("unavailable")
        body = {"flight_id": "f-001", "passengers": [passenger_details()]}

        response = create.lambda_handler(_event(body), lambda_context)

        assert response["statusCode"] == 503


class TestReservationHandlers:
    """予約参照・編集・キャンセル系 Lambda Handler のテスト"""

    def test_get(self, mock_service, create_reservation, lambda_context):
        reservation = create_reservation()
        service = mock_service(get)
        service.get.return_value = reservation

        response = get.lambda_handler(
            _event(path_parameters={"reservation_id": str(reservation.id)}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["reservation_id"] == str(
            reservation.id
        )

    def test_get_not_found(self, mock_service, lambda_context):
        service = mock_service(get)
        service.get.side_effect = ReservationNotFoundException("missing")

        response = get.lambda_handler(
            _event(path_parameters={"reservation_id": "missing"}), lambda_context
        )

        assert response["statusCode"] == 404

    def test_get_without_path_parameter_returns_422(self, mock_service, lambda_context):
        mock_service(get)

        response = get.lambda_handler(_event(), lambda_context)

        assert response["statusCode"] == 422

    def test_list_by_flight(self, mock_service, create_reservation, lambda_context):
        service = mock_service(list_reservations)
        service.list.return_value = [create_reservation(), create_reservation()]

        response = list_reservations.lambda_handler(
            _event(query={"flight_id": "f-001"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["count"] == 2
        assert str(service.list.call_args.args[0]) == "f-001"

    def test_list_all(self, mock_service, lambda_context):
        service = mock_service(list_reservations)
        service.list.return_value = []

        response = list_reservations.lambda_handler(_event(), lambda_context)

        assert response["statusCode"] == 200
        service.list.assert_called_once_with(None)

    def test_update_package(self, mock_service, create_reservation, lambda_context):
        reservation = create_reservation()
        passenger_id = reservation.passengers[0].id
        service = mock_service(update_package)
        service.update.return_value = reservation

        response = update_package.lambda_handler(
            _event(
                {"seat": "2B", "meal": "kosher"},
                path_parameters={
                    "reservation_id": str(reservation.id),
                    "passenger_id": str(passenger_id),
                },
            ),
            lambda_context,
        )

        assert response["statusCode"] == 200
        _, called_passenger_id, details = service.update.call_args.args
        assert called_passenger_id == passenger_id
        assert details["seat"] == "2B"

    def test_update_package_without_passenger_returns_422(
        self, mock_service, lambda_context
    ):
        mock_service(update_package)

        response = update_package.lambda_handler(
            _event({"seat": "2B"}, path_parameters={"reservation_id": "r-1"}),
            lambda_context,
        )

        assert response["statusCode"] == 422

    def test_remove_package(self, mock_service, create_reservation, lambda_context):
        reservation = create_reservation()
        service = mock_service(remove_package)
        service.remove.return_value = reservation

        response = remove_package.lambda_handler(
            _event(
                path_parameters={
                    "reservation_id": str(reservation.id),
                    "passenger_id": str(reservation.passengers[0].id),
                }
            ),
            lambda_context,
        )

        assert response["statusCode"] == 200

    def test_confirm(self, mock_service, create_reservation, lambda_context):
        reservation = create_reservation(status=ReservationStatus.CONFIRMED)
        service = mock_service(confirm)
        service.confirm.return_value = reservation

        response = confirm.lambda_handler(
            _event(path_parameters={"reservation_id": str(reservation.id)}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["status"] == "CONFIRMED"

    def test_cancel(self, mock_service, create_reservation, lambda_context):
        reservation = create_reservation(status=ReservationStatus.CANCELLED)
        service = mock_service(cancel)
        service.cancel.return_value = reservation

        response = cancel.lambda_handler(
            _event(path_parameters={"reservation_id": str(reservation.id)}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["status"] == "CANCELLED"
        assert data["totals"]["grand_total"] == "10000"


class TestSeatsHandler:
    """座席状況 Lambda Handler のテスト"""

    def test_seats(self, mock_service, create_flight, lambda_context):
        flight = create_flight(seat_capacity=3)
        service = mock_service(seats)
        service.get.return_value = SeatAvailability(
            flight_id=flight.id,
            seat_capacity=3,
            occupied_seats=(SeatLabel("1A"),),
        )

        response = seats.lambda_handler(
            _event(path_parameters={"flight_id": "f-001"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"] == {
            "flight_id": "f-001",
            "seat_capacity": 3,
            "occupied_seats": ["1A"],
            "available_count": 2,
        }
