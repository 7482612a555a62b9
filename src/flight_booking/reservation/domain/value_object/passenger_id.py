from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerId:
    """乗客ID（予約内で一意）"""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if not normalized:
            raise ValueError("PassengerId cannot be empty")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PassengerId:
        return cls(value=uuid.uuid4().hex)
