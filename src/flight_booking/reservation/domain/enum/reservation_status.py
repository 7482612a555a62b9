from enum import Enum


class ReservationStatus(str, Enum):
    """予約ステータス

    PENDING / CONFIRMED -> CANCELLED（終端）
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"

    @property
    def is_active(self) -> bool:
        """座席を占有する状態か"""
        return self != ReservationStatus.CANCELLED
