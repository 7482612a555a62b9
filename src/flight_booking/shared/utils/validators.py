from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def to_non_negative_decimal(v: object) -> Decimal:
    """数値入力を 0 以上の有限な Decimal に丸める

    変換できない値（None, 空文字, "abc", NaN, Infinity）は 0 として扱い、
    負の値は 0 に切り上げる。例外は送出しない。
    """
    if v is None or isinstance(v, bool):
        return Decimal("0")
    try:
        value = to_decimal(v.strip() if isinstance(v, str) else v)
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not value.is_finite() or value < 0:
        return Decimal("0")
    return value


def to_non_negative_int(v: object) -> int:
    """個数入力を 0 以上の int に丸める（小数部は切り捨て）"""
    return int(to_non_negative_decimal(v))
