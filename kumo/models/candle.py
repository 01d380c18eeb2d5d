"""Candle (OHLC) data model."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TimeFrame(str, Enum):
    """Interval covered by a single candle."""

    ONE_MINUTE = "1min"
    FIVE_MINUTES = "5min"
    ONE_HOUR = "1hour"
    ONE_DAY = "1day"
    ONE_MONTH = "1month"

    @property
    def seconds(self) -> int:
        """Length of the interval in seconds (a month counts as 30 days)."""
        return _TIMEFRAME_SECONDS[self]


_TIMEFRAME_SECONDS = {
    TimeFrame.ONE_MINUTE: 60,
    TimeFrame.FIVE_MINUTES: 300,
    TimeFrame.ONE_HOUR: 3600,
    TimeFrame.ONE_DAY: 86400,
    TimeFrame.ONE_MONTH: 30 * 86400,
}


class CandleState(str, Enum):
    """Lifecycle of a candle: still forming or final."""

    OPEN = "open"
    CLOSED = "closed"


class Candle(BaseModel):
    """Represents a single OHLC candle.

    Prices are not cross-checked against each other; a candle whose high is
    below its low is accepted as-is.
    """

    open: float = Field(..., description="Opening price")
    close: float = Field(..., description="Closing (or last) price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    time_frame: TimeFrame = Field(
        default=TimeFrame.ONE_MINUTE, description="Candle interval"
    )
    timestamp: Optional[int] = Field(
        default=None, description="Candle start time (epoch seconds)"
    )
    number_of_trades: int = Field(default=0, ge=0, description="Trade count")
    state: CandleState = Field(
        default=CandleState.CLOSED, description="Open while forming, closed when final"
    )

    model_config = {"frozen": True}

    @property
    def is_closed(self) -> bool:
        return self.state is CandleState.CLOSED
