from __future__ import annotations

from dataclasses import dataclass

from flight_booking.shared.domain import Currency, Money


@dataclass(frozen=True)
class ReservationTotals:
    """予約の合計金額

    grand_total == base_fare_total + optional_package_total を常に満たす。
    """

    base_fare_total: Money
    optional_package_total: Money
    grand_total: Money

    def __post_init__(self) -> None:
        expected = self.base_fare_total.add(self.optional_package_total)
        if self.grand_total != expected:
            raise ValueError(
                f"Grand total {self.grand_total} does not match "
                f"base fare total + optional package total ({expected})"
            )

    @classmethod
    def of(cls, base_fare_total: Money, optional_package_total: Money) -> ReservationTotals:
        """運賃合計とオプション合計から生成する"""
        return cls(
            base_fare_total=base_fare_total,
            optional_package_total=optional_package_total,
            grand_total=base_fare_total.add(optional_package_total),
        )

    @classmethod
    def zero(cls, currency: Currency) -> ReservationTotals:
        return cls.of(Money.zero(currency), Money.zero(currency))

    @property
    def currency(self) -> Currency:
        return self.grand_total.currency
