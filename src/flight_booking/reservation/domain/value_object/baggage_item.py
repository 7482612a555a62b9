from dataclasses import dataclass
from decimal import Decimal

from flight_booking.shared.utils.validators import to_non_negative_decimal


@dataclass(frozen=True)
class BaggageItem:
    """受託手荷物 1 個（重量 kg）

    重量は 0 以上の Decimal に正規化する。不正な値は 0 kg。
    """

    weight: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", to_non_negative_decimal(self.weight))
