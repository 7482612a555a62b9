from flight_booking.shared.domain.exception import (
    ResourceNotFoundException,
    ResourceUnavailableException,
)


class FlightNotFoundException(ResourceNotFoundException):
    """指定されたフライトが存在しない"""

    error_code = "FLIGHT_NOT_FOUND"

    def __init__(self, flight_id: object) -> None:
        super().__init__(f"Flight not found: {flight_id}")
        self.flight_id = str(flight_id)


class FlightUnavailableException(ResourceUnavailableException):
    """フライトが予約を受け付けていない（販売停止・欠航・満席）"""

    error_code = "FLIGHT_UNAVAILABLE"

    def __init__(self, flight_id: object, reason: str) -> None:
        super().__init__(f"Flight {flight_id} is not bookable: {reason}")
        self.flight_id = str(flight_id)
        self.reason = reason

    def details(self) -> dict | None:
        return {"flight_id": self.flight_id, "reason": self.reason}
