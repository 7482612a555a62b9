from collections.abc import Iterable

from flight_booking.reservation.domain.value_object import (
    OptionalPackage,
    PackagePrice,
    PriceTable,
    ReservationTotals,
)
from flight_booking.shared.domain import Currency, Money


class ReservationPricer:
    """予約金額の計算（ドメインサービス）

    - 入力（運賃・オプション）から毎回すべてを計算し直す。差分更新はしない
    - 同じ入力に対しては常に同じ結果を返し、乗客の並び順にも依存しない
    - 座席料金は座席クラスに関わらず 0
    """

    def __init__(self, price_table: PriceTable | None = None) -> None:
        self._price_table = price_table or PriceTable.default()

    @property
    def price_table(self) -> PriceTable:
        return self._price_table

    def price_package(self, package: OptionalPackage, currency: Currency) -> PackagePrice:
        """乗客 1 人分のオプション料金を計算する"""
        table = self._price_table

        meal_price = Money(table.meal_price(package.meal), currency)
        baggage_price = Money(
            table.baggage_unit_price * package.baggage_count
            + table.baggage_price_per_kg * package.total_baggage_weight,
            currency,
        )
        seat_price = Money.zero(currency)

        return PackagePrice(
            meal_price=meal_price,
            baggage_price=baggage_price,
            seat_price=seat_price,
        )

    def compute_totals(
        self, base_fare: Money, packages: Iterable[OptionalPackage]
    ) -> ReservationTotals:
        """予約全体の合計を計算する

        Args:
            base_fare: 1 人あたりの運賃
            packages: 乗客ごとのオプション（乗客の数だけ）

        Returns:
            ReservationTotals: 運賃合計 = 運賃 x 乗客数、オプション合計 = 各乗客の料金の和
        """
        currency = base_fare.currency
        packages = list(packages)

        optional_package_total = Money.zero(currency)
        for package in packages:
            optional_package_total = optional_package_total.add(
                self.price_package(package, currency).total
            )

        return ReservationTotals.of(
            base_fare_total=base_fare.multiply(len(packages)),
            optional_package_total=optional_package_total,
        )
