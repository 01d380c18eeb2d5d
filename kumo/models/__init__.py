"""Data models for Kumo."""

from kumo.models.candle import Candle, CandleState, TimeFrame
from kumo.models.ichimoku import EngineSnapshot, IchimokuParameters, IchimokuResult

__all__ = [
    "Candle",
    "CandleState",
    "TimeFrame",
    "EngineSnapshot",
    "IchimokuParameters",
    "IchimokuResult",
]
