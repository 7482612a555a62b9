from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FlightSearchCriteria:
    """フライト検索条件

    - origin / destination: 前後の空白を除去し、大文字小文字を区別しない部分一致
    - departure_date: 出発日（暦日）が一致するもの。解釈できない日付は条件なし扱い
    """

    origin: str = ""
    destination: str = ""
    departure_date: date | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "origin", (self.origin or "").strip())
        object.__setattr__(self, "destination", (self.destination or "").strip())

    @classmethod
    def from_strings(
        cls,
        origin: str | None = None,
        destination: str | None = None,
        departure: str | None = None,
    ) -> FlightSearchCriteria:
        """クエリ文字列から検索条件を生成する"""
        departure_date = None
        if departure:
            try:
                departure_date = date.fromisoformat(departure.strip()[:10])
            except ValueError:
                departure_date = None
        return cls(
            origin=origin or "",
            destination=destination or "",
            departure_date=departure_date,
        )

    def is_empty(self) -> bool:
        """条件が一つも指定されていないか"""
        return not self.origin and not self.destination and self.departure_date is None

    def matches(self, origin: str, destination: str, departure_date: date) -> bool:
        """フライトが条件に一致するか"""
        if self.origin and self.origin.casefold() not in origin.casefold():
            return False
        if self.destination and self.destination.casefold() not in destination.casefold():
            return False
        if self.departure_date is not None and self.departure_date != departure_date:
            return False
        return True
