from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from flight_booking.reservation.domain.enum import Meal
from flight_booking.shared.utils.validators import to_decimal

DEFAULT_MEAL_PRICES: Mapping[Meal, Decimal] = MappingProxyType(
    {
        Meal.NONE: Decimal("0"),
        Meal.STANDARD: Decimal("50"),
        Meal.VEGETARIAN: Decimal("60"),
        Meal.KOSHER: Decimal("70"),
    }
)
DEFAULT_BAGGAGE_UNIT_PRICE = Decimal("30")
DEFAULT_BAGGAGE_PRICE_PER_KG = Decimal("5")


@dataclass(frozen=True)
class PriceTable:
    """オプション料金表

    金額は通貨を持たない。通貨は運賃（Flight.base_fare）の通貨に従う。

    - meal_prices: 機内食ごとの単価（未登録の機内食は 0）
    - baggage_unit_price: 受託手荷物 1 個あたりの料金
    - baggage_price_per_kg: 重量課金の手荷物 1 kg あたりの料金
    """

    meal_prices: Mapping[Meal, Decimal] = field(
        default_factory=lambda: dict(DEFAULT_MEAL_PRICES)
    )
    baggage_unit_price: Decimal = DEFAULT_BAGGAGE_UNIT_PRICE
    baggage_price_per_kg: Decimal = DEFAULT_BAGGAGE_PRICE_PER_KG

    def __post_init__(self) -> None:
        meal_prices = {
            Meal(meal): self._validate_amount(f"meal price ({Meal(meal).value})", price)
            for meal, price in self.meal_prices.items()
        }
        object.__setattr__(self, "meal_prices", MappingProxyType(meal_prices))
        object.__setattr__(
            self,
            "baggage_unit_price",
            self._validate_amount("baggage unit price", self.baggage_unit_price),
        )
        object.__setattr__(
            self,
            "baggage_price_per_kg",
            self._validate_amount("baggage price per kg", self.baggage_price_per_kg),
        )

    @staticmethod
    def _validate_amount(name: str, value: object) -> Decimal:
        try:
            amount = to_decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Invalid {name}: {value}") from e
        if not amount.is_finite() or amount < 0:
            raise ValueError(f"Invalid {name}: {value}")
        return amount

    @classmethod
    def default(cls) -> PriceTable:
        """標準の料金表"""
        return cls()

    def meal_price(self, meal: Meal) -> Decimal:
        """機内食の単価"""
        return self.meal_prices.get(meal, Decimal("0"))
