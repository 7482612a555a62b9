from flight_booking.reservation.domain.value_object import (
    OptionalPackage,
    PassengerId,
    SeatLabel,
)
from flight_booking.shared.domain import Entity
from flight_booking.shared.domain.exception import ValidationException


class Passenger(Entity[PassengerId]):
    """乗客（Reservation 集約の内部エンティティ）

    変更は必ず Reservation を経由する。
    """

    def __init__(
        self,
        id: PassengerId,
        full_name: str,
        email: str,
        document_number: str,
        optional_package: OptionalPackage | None = None,
    ) -> None:
        super().__init__(id)

        self._full_name = self._require("full_name", full_name)
        self._email = self._require("email", email).lower()
        self._document_number = self._require("document_number", document_number)
        self._optional_package = optional_package or OptionalPackage.empty()

    @staticmethod
    def _require(field: str, value: str | None) -> str:
        """必須の本人情報。空の場合は ValidationException"""
        normalized = (value or "").strip()
        if not normalized:
            raise ValidationException(field)
        return normalized

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def document_number(self) -> str:
        return self._document_number

    @property
    def optional_package(self) -> OptionalPackage:
        return self._optional_package

    @property
    def seat(self) -> SeatLabel | None:
        return self._optional_package.seat

    def change_package(self, optional_package: OptionalPackage) -> None:
        self._optional_package = optional_package
