from decimal import Decimal

import pytest

from flight_booking.reservation.domain.enum import Meal
from flight_booking.reservation.infrastructure.price_table_loader import (
    load_price_table,
)


class TestLoadPriceTable:
    """load_price_table のテスト"""

    def test_defaults_when_not_configured(self):
        table = load_price_table({})
        assert table.meal_price(Meal.STANDARD) == Decimal("50")
        assert table.baggage_unit_price == Decimal("30")
        assert table.baggage_price_per_kg == Decimal("5")

    def test_overrides(self):
        table = load_price_table(
            {
                "MEAL_PRICE_STANDARD": "55",
                "BAGGAGE_UNIT_PRICE": "40",
                "BAGGAGE_PRICE_PER_KG": "2.5",
            }
        )
        assert table.meal_price(Meal.STANDARD) == Decimal("55")
        assert table.meal_price(Meal.KOSHER) == Decimal("70")
        assert table.baggage_unit_price == Decimal("40")
        assert table.baggage_price_per_kg == Decimal("2.5")

    def test_invalid_override_raises_error(self):
        """不正な設定値はコールドスタートで失敗させる"""
        with pytest.raises(ValueError):
            load_price_table({"MEAL_PRICE_KOSHER": "free"})
