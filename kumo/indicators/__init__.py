"""Technical indicators module."""

from kumo.indicators.ichimoku import IchimokuCloud, round_to_8_decimals

__all__ = [
    "IchimokuCloud",
    "round_to_8_decimals",
]
