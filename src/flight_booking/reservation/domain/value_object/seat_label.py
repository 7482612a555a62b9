from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class SeatLabel:
    """座席番号

    前後の空白を除去し、大文字に正規化する。例: " 1a " -> "1A"
    """

    MAX_LENGTH: ClassVar[int] = 8

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("Seat label cannot be empty")
        if len(normalized) > self.MAX_LENGTH:
            raise ValueError(f"Seat label is too long: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: object) -> SeatLabel | None:
        """任意の入力から SeatLabel を生成する（未指定・空文字は None）"""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        if not text:
            return None
        return cls(text)
