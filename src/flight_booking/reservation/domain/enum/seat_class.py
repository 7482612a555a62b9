from __future__ import annotations

from enum import Enum


class SeatClass(str, Enum):
    """座席クラス

    記録のみ行い、現時点では料金に影響しない（座席料金は常に 0）。
    """

    ECONOMY = "economy"
    PREMIUM = "premium"
    BUSINESS = "business"
    FIRST = "first"

    @classmethod
    def parse(cls, value: object) -> SeatClass:
        """入力値を SeatClass に変換する（未知の値は ECONOMY）"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.ECONOMY
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.ECONOMY
