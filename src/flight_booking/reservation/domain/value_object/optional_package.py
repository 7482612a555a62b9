from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from flight_booking.reservation.domain.enum import Meal, SeatClass
from flight_booking.shared.utils.validators import to_non_negative_int

from .baggage_item import BaggageItem
from .seat_label import SeatLabel


@dataclass(frozen=True)
class OptionalPackage:
    """乗客ごとのオプション（機内食・座席・受託手荷物）

    価格は持たない。価格は常に選択内容から ReservationPricer が再計算する。
    生の入力値を受け取っても、生成時にすべて正規化される。
    - meal: 未知の値は Meal.NONE
    - seat: 空文字は None、それ以外は SeatLabel
    - baggage_count: 不正値・負数は 0
    - baggage_items: 重量のリスト（数値）または BaggageItem のタプル
    """

    meal: Meal = Meal.NONE
    seat: SeatLabel | None = None
    seat_class: SeatClass = SeatClass.ECONOMY
    baggage_count: int = 0
    baggage_items: tuple[BaggageItem, ...] = field(default_factory=tuple)
    notes: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "meal", Meal.parse(self.meal))
        object.__setattr__(self, "seat", SeatLabel.parse(self.seat))
        object.__setattr__(self, "seat_class", SeatClass.parse(self.seat_class))
        object.__setattr__(self, "baggage_count", to_non_negative_int(self.baggage_count))
        object.__setattr__(
            self,
            "baggage_items",
            tuple(
                item if isinstance(item, BaggageItem) else BaggageItem(weight=item)
                for item in (self.baggage_items or ())
            ),
        )
        object.__setattr__(self, "notes", (self.notes or "").strip())

    @classmethod
    def empty(cls) -> OptionalPackage:
        """オプションなし（座席指定も解除される）"""
        return cls()

    @property
    def total_baggage_weight(self) -> Decimal:
        """受託手荷物の総重量"""
        return sum((item.weight for item in self.baggage_items), Decimal("0"))
