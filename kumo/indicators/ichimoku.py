"""Incremental Ichimoku Cloud calculation.

The engine keeps running extrema for the short, medium and long periods and
derives the five Ichimoku lines from them. It can be primed with a batch of
historical candles (``initialize``) and then fed one candle at a time
(``update``). Both entry points advance the same state.

Extrema are never evicted: once more candles than a period's length have
been processed, that period's extrema are the extrema of every candle seen.
The period lengths otherwise only gate when results start being emitted.
"""

import logging
import math
from typing import Iterable, Optional

from kumo.models import Candle, EngineSnapshot, IchimokuParameters, IchimokuResult

logger = logging.getLogger(__name__)


def round_to_8_decimals(value: float) -> float:
    """Round a value to 8 decimal places via fixed-point formatting.

    Args:
        value: Value to round.

    Returns:
        The rounded value, or ``value`` unchanged if the formatted text
        cannot be parsed back.
    """
    try:
        return float(f"{value:.8f}")
    except (TypeError, ValueError):
        return value


class IchimokuCloud:
    """Stateful Ichimoku Cloud calculator for a single candle stream.

    An instance is not safe to share between threads; callers feeding one
    stream from several threads must serialize access per instance.
    """

    def __init__(self, parameters: Optional[IchimokuParameters] = None):
        """Initialize the engine.

        Args:
            parameters: Window lengths. Defaults to 9/26/52.
        """
        self.parameters = parameters or IchimokuParameters()

        self._short_min = math.inf
        self._short_max = -math.inf
        self._medium_min = math.inf
        self._medium_max = -math.inf
        self._long_min = math.inf
        self._long_max = -math.inf
        self._processed = 0

    @property
    def processed(self) -> int:
        """Number of candles committed to the running state."""
        return self._processed

    def snapshot(self) -> EngineSnapshot:
        """Return a read-only copy of the running extrema and counter."""
        return EngineSnapshot(
            short_min=self._short_min,
            short_max=self._short_max,
            medium_min=self._medium_min,
            medium_max=self._medium_max,
            long_min=self._long_min,
            long_max=self._long_max,
            processed=self._processed,
        )

    def initialize(
        self, candles: Iterable[Candle]
    ) -> list[tuple[Candle, Optional[IchimokuResult]]]:
        """Process a batch of historical candles in order.

        Every candle is committed regardless of its state.

        Args:
            candles: Candles in chronological order.

        Returns:
            One ``(candle, result)`` pair per input candle, in input order.
            ``result`` is None until ``long_period`` candles have been
            processed.
        """
        results: list[tuple[Candle, Optional[IchimokuResult]]] = []

        for candle in candles:
            self._processed += 1
            self._short_min = min(self._short_min, candle.low)
            self._short_max = max(self._short_max, candle.high)
            self._medium_min = min(self._medium_min, candle.low)
            self._medium_max = max(self._medium_max, candle.high)
            self._long_min = min(self._long_min, candle.low)
            self._long_max = max(self._long_max, candle.high)

            result = self._emit(
                self._short_min,
                self._short_max,
                self._medium_min,
                self._medium_max,
                self._long_min,
                self._long_max,
                candle.close,
            )
            results.append((candle, result))

        logger.debug(
            "Initialized with %d candles, %d processed in total",
            len(results),
            self._processed,
        )
        return results

    def update(self, candle: Candle) -> Optional[IchimokuResult]:
        """Calculate the indicator for one candle.

        An open candle only previews the values: its high and low are folded
        into the calculation but not into the running state. A closed candle
        is committed and counted.

        Args:
            candle: The latest candle, open or closed.

        Returns:
            The indicator values, or None while fewer than ``long_period``
            candles have been committed.
        """
        short_min = min(self._short_min, candle.low)
        short_max = max(self._short_max, candle.high)
        medium_min = min(self._medium_min, candle.low)
        medium_max = max(self._medium_max, candle.high)
        long_min = min(self._long_min, candle.low)
        long_max = max(self._long_max, candle.high)

        if candle.is_closed:
            self._short_min, self._short_max = short_min, short_max
            self._medium_min, self._medium_max = medium_min, medium_max
            self._long_min, self._long_max = long_min, long_max
            self._processed += 1
            logger.debug("Committed closed candle #%d", self._processed)
            if self._processed == self.parameters.long_period:
                logger.debug("Warm-up complete after %d candles", self._processed)

        return self._emit(
            short_min, short_max, medium_min, medium_max, long_min, long_max, candle.close
        )

    def _emit(
        self,
        short_min: float,
        short_max: float,
        medium_min: float,
        medium_max: float,
        long_min: float,
        long_max: float,
        close: float,
    ) -> Optional[IchimokuResult]:
        if self._processed < self.parameters.long_period:
            return None

        tenkan_sen = (short_max + short_min) / 2
        kijun_sen = (medium_max + medium_min) / 2
        # Span A uses the unrounded lines; rounding happens only on output.
        senkou_span_a = (tenkan_sen + kijun_sen) / 2
        senkou_span_b = (long_max + long_min) / 2

        return IchimokuResult(
            tenkan_sen=round_to_8_decimals(tenkan_sen),
            kijun_sen=round_to_8_decimals(kijun_sen),
            senkou_span_a=round_to_8_decimals(senkou_span_a),
            senkou_span_b=round_to_8_decimals(senkou_span_b),
            chikou_span=round_to_8_decimals(close),
        )
