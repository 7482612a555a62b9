import json
from unittest.mock import MagicMock

import pytest

from flight_booking.flight.handlers import search


class TestSearchHandler:
    """フライト検索 Lambda Handler のテスト"""

    @pytest.fixture
    def mock_service(self, monkeypatch):
        service = MagicMock()
        monkeypatch.setattr(search, "service", service)
        return service

    def test_returns_flights(self, mock_service, create_flight, lambda_context):
        mock_service.search.return_value = [create_flight()]
        event = {
            "rawPath": "/flights",
            "queryStringParameters": {"origin": "Manila", "departure": "2025-01-01"},
        }

        response = search.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["count"] == 1
        assert body["data"][0]["flight_number"] == "PR102"
        assert body["data"][0]["route"] == "Manila → Tokyo"
        criteria = mock_service.search.call_args[0][0]
        assert criteria.origin == "Manila"

    def test_no_query_returns_empty_list(self, mock_service, lambda_context):
        mock_service.search.return_value = []

        response = search.lambda_handler({"rawPath": "/flights"}, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"] == []
