from collections.abc import Iterable

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.exception import FlightUnavailableException
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.exception import SeatConflictException
from flight_booking.reservation.domain.repository import ReservationRepository
from flight_booking.reservation.domain.value_object import (
    PassengerId,
    ReservationId,
    SeatAvailability,
    SeatLabel,
)

SeatHolder = tuple[ReservationId, PassengerId]


class SeatLedger:
    """座席台帳（ドメインサービス）

    フライトごとの占有座席は、有効な予約の乗客が指定している座席の和集合として
    毎回導出する。台帳自身は状態を持たないため、予約との食い違いが起こらない。

    「座席を確保する」とは、競合なしと判定された座席を参照する予約を
    永続化することを指す。解放はキャンセルまたは座席指定の解除で暗黙に行われる。
    同時実行時の二重予約は、レポジトリのストレージ制約が最終的に防ぐ。
    """

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def _seat_holders(self, flight_id: FlightId) -> dict[SeatLabel, SeatHolder]:
        holders: dict[SeatLabel, SeatHolder] = {}
        for reservation in self._repository.find_active_by_flight_id(flight_id):
            if not reservation.is_active:
                continue
            for passenger in reservation.passengers:
                if passenger.seat is not None:
                    holders[passenger.seat] = (reservation.id, passenger.id)
        return holders

    def occupied_seats(
        self,
        flight_id: FlightId,
        exclude_reservation_id: ReservationId | None = None,
    ) -> frozenset[SeatLabel]:
        """有効な予約が保持している座席（副作用なし）"""
        return frozenset(
            seat
            for seat, (reservation_id, _) in self._seat_holders(flight_id).items()
            if exclude_reservation_id is None or reservation_id != exclude_reservation_id
        )

    def availability(self, flight: Flight) -> SeatAvailability:
        """フライトの座席占有状況"""
        return SeatAvailability(
            flight_id=flight.id,
            seat_capacity=flight.seat_capacity,
            occupied_seats=tuple(sorted(self.occupied_seats(flight.id))),
        )

    def try_reserve(
        self,
        flight: Flight,
        seat: SeatLabel | str,
        exclude_reservation_id: ReservationId | None = None,
        exclude_passenger_id: PassengerId | None = None,
    ) -> SeatLabel:
        """座席が空いていることを確認する

        exclude_reservation_id の予約が保持している座席は空きとして扱う
        （予約の編集で自分の現在の座席を選び直せるようにするため）。
        座席数の上限の判定では、exclude_passenger_id の乗客の現在の座席だけを除き、
        同じ予約の他の乗客の座席は占有として数える。

        Returns:
            SeatLabel: 正規化済みの座席番号

        Raises:
            SeatConflictException: 座席が他の有効な予約に保持されている
            FlightUnavailableException: 座席数の上限を超える
        """
        return self.try_reserve_all(
            flight, [seat], exclude_reservation_id, exclude_passenger_id
        )[0]

    def try_reserve_all(
        self,
        flight: Flight,
        seats: Iterable[SeatLabel | str],
        exclude_reservation_id: ReservationId | None = None,
        exclude_passenger_id: PassengerId | None = None,
    ) -> tuple[SeatLabel, ...]:
        """複数の座席をまとめて確認する（同じリクエスト内の重複も競合とみなす）"""
        requested: list[SeatLabel] = []
        for seat in seats:
            label = seat if isinstance(seat, SeatLabel) else SeatLabel(seat)
            if label in requested:
                raise SeatConflictException(label, requested)
            requested.append(label)

        if not requested:
            return ()

        holders = self._seat_holders(flight.id)
        occupied = frozenset(
            seat
            for seat, (reservation_id, _) in holders.items()
            if exclude_reservation_id is None or reservation_id != exclude_reservation_id
        )
        for label in requested:
            if label in occupied:
                raise SeatConflictException(label, occupied)

        held = {
            seat
            for seat, holder in holders.items()
            if not _is_excluded(holder, exclude_reservation_id, exclude_passenger_id)
        }
        if len(held | set(requested)) > flight.seat_capacity:
            raise FlightUnavailableException(
                flight.id,
                f"only {max(flight.seat_capacity - len(held), 0)} seat(s) left",
            )

        return tuple(requested)


def _is_excluded(
    holder: SeatHolder,
    exclude_reservation_id: ReservationId | None,
    exclude_passenger_id: PassengerId | None,
) -> bool:
    reservation_id, passenger_id = holder
    if exclude_reservation_id is None or reservation_id != exclude_reservation_id:
        return False
    return exclude_passenger_id is None or passenger_id == exclude_passenger_id
