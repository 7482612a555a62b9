from abc import abstractmethod

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.reservation.domain.entity import Reservation
from flight_booking.reservation.domain.enum import ReservationStatus
from flight_booking.reservation.domain.value_object import (
    PassengerId,
    ReservationId,
    SeatLabel,
)
from flight_booking.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """フライト予約レポジトリ

    実装は (フライト, 座席) の組を有効な予約の範囲で一意に保つ制約を
    ストレージ側で保証しなければならない。アプリケーション側の事前チェックは
    分かりやすいエラーを返すための近道にすぎない。
    """

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """新規予約を永続化する

        Raises:
            DuplicateSeatException: 座席が既に他の有効な予約に保持されている
            DuplicateResourceException: 同じ予約IDが既に存在する
            StoreFailureException: その他の永続化エラー
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_active_by_flight_id(self, flight_id: FlightId) -> list[Reservation]:
        """フライトの有効な（CANCELLED 以外の）予約を返す

        座席の占有判定に使うため、確定した書き込みを反映した結果でなければならない。
        """
        raise NotImplementedError

    @abstractmethod
    def list_all(self, flight_id: FlightId | None = None) -> list[Reservation]:
        """予約を作成日時の新しい順に返す（flight_id 指定時はその便のみ）"""
        raise NotImplementedError

    @abstractmethod
    def update_passenger_package(
        self,
        reservation: Reservation,
        passenger_id: PassengerId,
        previous_seat: SeatLabel | None,
    ) -> None:
        """乗客のオプションと合計金額を更新し、座席の確保・解放を反映する

        Raises:
            DuplicateSeatException: 新しい座席が既に他の有効な予約に保持されている
            OptimisticLockException: 読み込み後に予約が他で更新された
        """
        raise NotImplementedError

    @abstractmethod
    def update_status(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
    ) -> None:
        """予約のステータスを更新する（CANCELLED の場合は座席も解放する）

        Raises:
            OptimisticLockException: ステータスが期待値と異なる
        """
        raise NotImplementedError
