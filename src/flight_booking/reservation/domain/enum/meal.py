from __future__ import annotations

from enum import Enum


class Meal(str, Enum):
    """機内食の選択肢"""

    NONE = "none"
    STANDARD = "standard"
    VEGETARIAN = "vegetarian"
    KOSHER = "kosher"

    @classmethod
    def parse(cls, value: object) -> Meal:
        """入力値を Meal に変換する

        大文字小文字と前後の空白は無視する。未知の値・空値は NONE として扱う。
        価格は NONE でも決定的に求まるため、エラーにはしない。
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.NONE
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.NONE
