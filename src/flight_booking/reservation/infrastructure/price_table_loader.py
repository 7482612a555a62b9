import os
from collections.abc import Mapping

from flight_booking.reservation.domain.value_object import PriceTable
from flight_booking.reservation.domain.value_object.price_table import (
    DEFAULT_BAGGAGE_PRICE_PER_KG,
    DEFAULT_BAGGAGE_UNIT_PRICE,
    DEFAULT_MEAL_PRICES,
)


def load_price_table(environ: Mapping[str, str] | None = None) -> PriceTable:
    """環境変数から料金表を読み込む

    未設定の項目は標準料金を使う。不正な値は ValueError（コールドスタートで失敗させる）。

    - MEAL_PRICE_<機内食> (例: MEAL_PRICE_STANDARD)
    - BAGGAGE_UNIT_PRICE
    - BAGGAGE_PRICE_PER_KG
    """
    environ = os.environ if environ is None else environ

    meal_prices = {
        meal: environ.get(f"MEAL_PRICE_{meal.name}") or default
        for meal, default in DEFAULT_MEAL_PRICES.items()
    }
    return PriceTable(
        meal_prices=meal_prices,
        baggage_unit_price=environ.get("BAGGAGE_UNIT_PRICE") or DEFAULT_BAGGAGE_UNIT_PRICE,
        baggage_price_per_kg=(
            environ.get("BAGGAGE_PRICE_PER_KG") or DEFAULT_BAGGAGE_PRICE_PER_KG
        ),
    )
