"""Ichimoku Cloud parameter and result models."""

from pydantic import BaseModel, Field, model_validator


class IchimokuParameters(BaseModel):
    """Look-back window lengths for the three Ichimoku periods."""

    short_period: int = Field(default=9, gt=0, description="Tenkan-sen window")
    medium_period: int = Field(default=26, gt=0, description="Kijun-sen window")
    long_period: int = Field(
        default=52, gt=0, description="Senkou Span B window and warm-up length"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_ordering(self) -> "IchimokuParameters":
        if not self.short_period <= self.medium_period <= self.long_period:
            raise ValueError(
                "invalid parameters: expected short_period <= medium_period <= long_period, "
                f"got {self.short_period}/{self.medium_period}/{self.long_period}"
            )
        return self


class IchimokuResult(BaseModel):
    """Indicator values for one candle, each rounded to 8 decimal places."""

    tenkan_sen: float = Field(..., description="Conversion line")
    kijun_sen: float = Field(..., description="Base line")
    senkou_span_a: float = Field(..., description="Leading span A")
    senkou_span_b: float = Field(..., description="Leading span B")
    chikou_span: float = Field(..., description="Lagging span (current close)")

    model_config = {"frozen": True}


class EngineSnapshot(BaseModel):
    """Read-only copy of an engine's running extrema and counter."""

    short_min: float
    short_max: float
    medium_min: float
    medium_max: float
    long_min: float
    long_max: float
    processed: int = Field(..., ge=0)

    model_config = {"frozen": True}
