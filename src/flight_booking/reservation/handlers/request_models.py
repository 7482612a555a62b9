from typing import Any

from pydantic import BaseModel, Field

from flight_booking.reservation.domain.factory import PackageDetails, PassengerDetails

# 数値項目は型を問わずそのまま受け取り、ドメイン側で 0 以上の値に丸める（不正な値は 0）
LenientNumber = Any


class PackageRequest(BaseModel):
    """乗客ごとのオプションの入力スキーマ"""

    meal: str | None = Field(
        default=None,
        description="機内食（none / standard / vegetarian / kosher）",
        examples=["standard"],
    )
    seat: str | None = Field(
        default=None, max_length=8, description="座席番号", examples=["1A"]
    )
    seat_class: str | None = Field(
        default=None,
        description="座席クラス（economy / premium / business / first）",
        examples=["economy"],
    )
    baggage_count: LenientNumber = Field(
        default=None, description="受託手荷物の個数", examples=[2]
    )
    baggage_weights: list[LenientNumber] = Field(
        default_factory=list,
        description="重量課金の手荷物の重量（kg）",
        examples=[[12.5]],
    )
    notes: str | None = Field(default=None, max_length=500)

    def to_details(self) -> PackageDetails:
        return {
            "meal": self.meal,
            "seat": self.seat,
            "seat_class": self.seat_class,
            "baggage_count": self.baggage_count,
            "baggage_weights": self.baggage_weights,
            "notes": self.notes,
        }


class PassengerRequest(BaseModel):
    """乗客の入力スキーマ"""

    full_name: str = Field(..., max_length=200, examples=["Juan Dela Cruz"])
    email: str = Field(..., max_length=254, examples=["juan@example.com"])
    document_number: str = Field(..., max_length=50, examples=["P1234567"])
    optional_package: PackageRequest | None = None

    def to_details(self) -> PassengerDetails:
        details: PassengerDetails = {
            "full_name": self.full_name,
            "email": self.email,
            "document_number": self.document_number,
        }
        if self.optional_package is not None:
            details["optional_package"] = self.optional_package.to_details()
        return details


class CreateReservationRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    flight_id: str = Field(..., min_length=1, description="フライトID")
    passengers: list[PassengerRequest] = Field(..., min_length=1)
    notes: str | None = Field(default=None, max_length=1000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flight_id": "f-001",
                    "passengers": [
                        {
                            "full_name": "Juan Dela Cruz",
                            "email": "juan@example.com",
                            "document_number": "P1234567",
                            "optional_package": {
                                "meal": "standard",
                                "seat": "1A",
                                "baggage_count": 2,
                            },
                        }
                    ],
                }
            ]
        }
    }


class ReservationPathParameters(BaseModel):
    """予約系エンドポイントのパスパラメータ"""

    reservation_id: str = Field(..., min_length=1)
    passenger_id: str | None = Field(default=None, min_length=1)


class FlightPathParameters(BaseModel):
    """座席状況エンドポイントのパスパラメータ"""

    flight_id: str = Field(..., min_length=1)


class ListReservationsRequest(BaseModel):
    """予約一覧リクエストモデル（クエリ文字列）"""

    flight_id: str | None = Field(default=None, min_length=1)
