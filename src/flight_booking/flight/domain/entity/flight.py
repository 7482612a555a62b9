from flight_booking.flight.domain.enum import FlightStatus
from flight_booking.flight.domain.exception import FlightUnavailableException
from flight_booking.flight.domain.value_object import FlightId, FlightNumber
from flight_booking.shared.domain import AggregateRoot, IsoDateTime, Money
from flight_booking.shared.domain.exception import BusinessRuleViolationException


class Flight(AggregateRoot[FlightId]):
    """フライト

    フライト自体の登録・編集は管理画面の責務であり、予約処理の中では読み取り専用。
    座席の占有状況はフライトには持たせず、有効な予約から導出する。
    """

    def __init__(
        self,
        id: FlightId,
        flight_number: FlightNumber,
        origin: str,
        destination: str,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        seat_capacity: int,
        base_fare: Money,
        is_available: bool = True,
        status: FlightStatus = FlightStatus.SCHEDULED,
    ) -> None:
        super().__init__(id)

        self._flight_number = flight_number
        self._origin = origin.strip()
        self._destination = destination.strip()
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._seat_capacity = seat_capacity
        self._base_fare = base_fare
        self._is_available = is_available
        self._status = status

        self._validate_schedule()
        self._validate_capacity()

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if not self._departure_time.is_before(self._arrival_time):
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

    def _validate_capacity(self) -> None:
        """座席数は 1 以上"""
        if isinstance(self._seat_capacity, bool) or self._seat_capacity < 1:
            raise BusinessRuleViolationException("Seat capacity must be positive")

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def route(self) -> str:
        return f"{self._origin} → {self._destination}"

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def seat_capacity(self) -> int:
        return self._seat_capacity

    @property
    def base_fare(self) -> Money:
        return self._base_fare

    @property
    def is_available(self) -> bool:
        return self._is_available

    @property
    def status(self) -> FlightStatus:
        return self._status

    def is_bookable(self) -> bool:
        """予約を受け付けられる状態か"""
        return self._is_available and self._status == FlightStatus.SCHEDULED

    def ensure_bookable(self) -> None:
        """予約を受け付けられない場合は FlightUnavailableException"""
        if not self._is_available:
            raise FlightUnavailableException(self.id, "flight is not open for booking")
        if self._status != FlightStatus.SCHEDULED:
            raise FlightUnavailableException(
                self.id, f"flight is {self._status.value.lower()}"
            )
