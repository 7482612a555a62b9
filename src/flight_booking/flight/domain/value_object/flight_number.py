import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号

    航空会社コード（2-3文字）+ 任意のハイフン + 便名番号（1-4桁）の形式。
    例: NH001, PR102, CCS-101
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^([A-Z0-9]{2}|[A-Z]{3})-?(\d{1,4})$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid flight number format: {self.value}. "
                "Expected format: AA123 or CCS-101"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def airline_code(self) -> str:
        """航空会社コード"""
        return self.PATTERN.match(self.value).group(1)

    @property
    def flight_num(self) -> str:
        """便名番号"""
        return self.PATTERN.match(self.value).group(2)
