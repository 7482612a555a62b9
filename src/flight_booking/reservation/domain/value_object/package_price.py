from dataclasses import dataclass

from flight_booking.shared.domain import Money


@dataclass(frozen=True)
class PackagePrice:
    """乗客 1 人分のオプション料金内訳"""

    meal_price: Money
    baggage_price: Money
    seat_price: Money

    @property
    def total(self) -> Money:
        return self.meal_price.add(self.baggage_price).add(self.seat_price)
