from decimal import Decimal

from flight_booking.reservation.domain.enum import Meal, SeatClass
from flight_booking.reservation.domain.value_object import (
    BaggageItem,
    OptionalPackage,
    SeatLabel,
)


class TestOptionalPackage:
    """OptionalPackage のテスト"""

    def test_defaults(self):
        package = OptionalPackage.empty()
        assert package.meal == Meal.NONE
        assert package.seat is None
        assert package.seat_class == SeatClass.ECONOMY
        assert package.baggage_count == 0
        assert package.baggage_items == ()

    def test_raw_values_are_normalized(self):
        """生の入力値は生成時に正規化される"""
        package = OptionalPackage(
            meal=" Vegetarian ",
            seat=" 12c ",
            seat_class="BUSINESS",
            baggage_count="2",
            baggage_items=("10.5", 4),
            notes="  window please ",
        )
        assert package.meal == Meal.VEGETARIAN
        assert package.seat == SeatLabel("12C")
        assert package.seat_class == SeatClass.BUSINESS
        assert package.baggage_count == 2
        assert package.baggage_items == (
            BaggageItem(Decimal("10.5")),
            BaggageItem(Decimal("4")),
        )
        assert package.notes == "window please"

    def test_unknown_meal_becomes_none(self):
        assert OptionalPackage(meal="halal").meal == Meal.NONE

    def test_garbage_counts_become_zero(self):
        """不正な個数・重量は 0 として扱う"""
        package = OptionalPackage(baggage_count="lots", baggage_items=("-3", "abc"))
        assert package.baggage_count == 0
        assert package.total_baggage_weight == Decimal("0")

    def test_non_scalar_values_become_zero(self):
        package = OptionalPackage(baggage_count={"count": 2}, baggage_items=([12], {"kg": 3}))
        assert package.baggage_count == 0
        assert package.total_baggage_weight == Decimal("0")

    def test_empty_seat_is_none(self):
        assert OptionalPackage(seat="").seat is None

    def test_total_baggage_weight(self):
        package = OptionalPackage(baggage_items=(12, "3.5"))
        assert package.total_baggage_weight == Decimal("15.5")
