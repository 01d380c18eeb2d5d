"""Tests for the candle and Ichimoku data models.

**Feature: ichimoku-engine**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from kumo.models import Candle, CandleState, IchimokuParameters, IchimokuResult, TimeFrame


class TestIchimokuParameters:
    """
    *For any* window lengths, construction succeeds exactly when all are
    positive and short <= medium <= long.
    """

    @given(
        short=st.integers(min_value=-5, max_value=60),
        medium=st.integers(min_value=-5, max_value=60),
        long=st.integers(min_value=-5, max_value=60),
    )
    @settings(max_examples=200)
    def test_accepts_only_positive_ordered_windows(self, short: int, medium: int, long: int):
        valid = 0 < short <= medium <= long

        if valid:
            params = IchimokuParameters(
                short_period=short, medium_period=medium, long_period=long
            )
            assert (params.short_period, params.medium_period, params.long_period) == (
                short, medium, long
            )
        else:
            with pytest.raises(ValidationError):
                IchimokuParameters(short_period=short, medium_period=medium, long_period=long)

    def test_defaults(self):
        params = IchimokuParameters()

        assert params.short_period == 9
        assert params.medium_period == 26
        assert params.long_period == 52

    def test_ordering_error_names_invalid_parameters(self):
        with pytest.raises(ValidationError, match="invalid parameters"):
            IchimokuParameters(short_period=52, medium_period=26, long_period=9)

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            IchimokuParameters(short_period=10, medium_period=5, long_period=20)

    def test_is_frozen(self):
        params = IchimokuParameters()

        with pytest.raises(ValidationError):
            params.long_period = 100


class TestCandle:

    def test_defaults(self):
        candle = Candle(open=1.0, close=2.0, high=3.0, low=0.5)

        assert candle.time_frame is TimeFrame.ONE_MINUTE
        assert candle.timestamp is None
        assert candle.number_of_trades == 0
        assert candle.state is CandleState.CLOSED
        assert candle.is_closed

    def test_degenerate_prices_are_accepted(self):
        candle = Candle(open=10.0, close=10.0, high=5.0, low=15.0)

        assert candle.high < candle.low

    def test_negative_trade_count_rejected(self):
        with pytest.raises(ValidationError):
            Candle(open=1.0, close=1.0, high=1.0, low=1.0, number_of_trades=-1)

    def test_is_frozen(self):
        candle = Candle(open=1.0, close=2.0, high=3.0, low=0.5)

        with pytest.raises(ValidationError):
            candle.close = 4.0

    def test_open_state(self):
        candle = Candle(open=1.0, close=2.0, high=3.0, low=0.5, state="open")

        assert candle.state is CandleState.OPEN
        assert not candle.is_closed

    @pytest.mark.parametrize(
        "time_frame, seconds",
        [
            (TimeFrame.ONE_MINUTE, 60),
            (TimeFrame.FIVE_MINUTES, 300),
            (TimeFrame.ONE_HOUR, 3600),
            (TimeFrame.ONE_DAY, 86400),
            (TimeFrame.ONE_MONTH, 2592000),
        ],
    )
    def test_timeframe_seconds(self, time_frame: TimeFrame, seconds: int):
        assert time_frame.seconds == seconds
        assert TimeFrame(time_frame.value) is time_frame


class TestIchimokuResult:

    def test_is_frozen(self):
        result = IchimokuResult(
            tenkan_sen=1.0, kijun_sen=2.0, senkou_span_a=1.5, senkou_span_b=3.0, chikou_span=4.0
        )

        with pytest.raises(ValidationError):
            result.tenkan_sen = 0.0
