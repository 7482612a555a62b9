from enum import Enum


class FlightStatus(str, Enum):
    """運航ステータス"""

    SCHEDULED = "SCHEDULED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
