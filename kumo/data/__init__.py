"""Candle data sources."""

from kumo.data.generator import generate_candles, revise_candle

__all__ = ["generate_candles", "revise_candle"]
