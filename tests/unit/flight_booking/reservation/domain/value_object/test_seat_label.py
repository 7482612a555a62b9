import pytest

from flight_booking.reservation.domain.value_object import SeatLabel


class TestSeatLabel:
    """SeatLabel のテスト"""

    def test_label_is_normalized(self):
        """前後の空白は除去され、大文字に正規化される"""
        assert SeatLabel(" 1a ").value == "1A"
        assert SeatLabel("1a") == SeatLabel("1A")

    def test_empty_label_raises_error(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            SeatLabel("   ")

    def test_too_long_label_raises_error(self):
        with pytest.raises(ValueError, match="too long"):
            SeatLabel("123456789")

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_parse_empty_returns_none(self, value):
        """未指定・空文字は座席指定なし"""
        assert SeatLabel.parse(value) is None

    def test_parse(self):
        assert SeatLabel.parse("2b") == SeatLabel("2B")
