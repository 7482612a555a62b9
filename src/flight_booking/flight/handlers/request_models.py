from pydantic import BaseModel, Field


class SearchFlightsRequest(BaseModel):
    """フライト検索リクエストモデル（クエリ文字列）"""

    origin: str | None = Field(
        default=None, max_length=100, description="出発地（部分一致）", examples=["Manila"]
    )
    destination: str | None = Field(
        default=None, max_length=100, description="到着地（部分一致）", examples=["Tokyo"]
    )
    departure: str | None = Field(
        default=None,
        description="出発日（YYYY-MM-DD）",
        examples=["2025-01-01"],
    )
