"""Synthetic candle generation.

Produces reproducible random candles for demos and tests. Prices are drawn
independently per candle rather than as a walk, so the series oscillates in
a fixed band around 90-130.
"""

import random
from typing import Optional

from kumo.models import Candle, CandleState, TimeFrame

# Epoch seconds of the first generated candle (2021-09-23 14:00 UTC)
DEFAULT_START_TIMESTAMP = 1632405600

PRICE_RANGE = (90.0, 130.0)
WICK_RANGE = (1.0, 5.0)
TRADES_RANGE = (80, 120)


def generate_candles(
    count: int,
    *,
    seed: Optional[int] = None,
    time_frame: TimeFrame = TimeFrame.ONE_MINUTE,
    start_timestamp: int = DEFAULT_START_TIMESTAMP,
    state: CandleState = CandleState.CLOSED,
) -> list[Candle]:
    """Generate random candles with consecutive timestamps.

    Args:
        count: Number of candles to generate.
        seed: Seed for the random generator. The same seed always yields
            the same candles.
        time_frame: Interval of each candle; also spaces the timestamps.
        start_timestamp: Timestamp of the first candle (epoch seconds).
        state: Lifecycle state given to every candle.

    Returns:
        List of candles in chronological order.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    rng = random.Random(seed)
    candles = []

    for i in range(count):
        open_price = rng.uniform(*PRICE_RANGE)
        close_price = rng.uniform(*PRICE_RANGE)
        high = max(open_price, close_price) + rng.uniform(*WICK_RANGE)
        low = min(open_price, close_price) - rng.uniform(*WICK_RANGE)

        candles.append(Candle(
            open=open_price,
            close=close_price,
            high=high,
            low=low,
            time_frame=time_frame,
            timestamp=start_timestamp + i * time_frame.seconds,
            number_of_trades=rng.randrange(*TRADES_RANGE),
            state=state,
        ))

    return candles


def revise_candle(candle: Candle, rng: random.Random) -> Candle:
    """Produce a still-forming revision of a candle.

    The open and timestamp are kept; a new last price is drawn and the
    high/low are widened to include it, as a live feed would do while the
    interval is still running.

    Args:
        candle: Candle to revise.
        rng: Random generator to draw the new price from.

    Returns:
        A new candle in the OPEN state.
    """
    close_price = rng.uniform(*PRICE_RANGE)

    return candle.model_copy(update={
        "close": close_price,
        "high": max(candle.high, close_price),
        "low": min(candle.low, close_price),
        "number_of_trades": candle.number_of_trades + rng.randrange(1, 10),
        "state": CandleState.OPEN,
    })
