"""Trade cadence analytics.

How long does an order book go between trades? Gaps between consecutive
trades give a cheap proxy for downtime.
"""

import logging

from pydantic import BaseModel, Field

from pairscope.ingestion.models import Trade

logger = logging.getLogger(__name__)


class TradeGapStats(BaseModel):
    """Average, minimum and maximum seconds between consecutive trades."""

    average: float = Field(description="Mean gap, floored to whole seconds")
    minimum: float = Field(description="Shortest gap")
    maximum: float = Field(description="Longest gap")

    model_config = {"frozen": True}


def trade_gap_stats(
    trades: list[Trade],
    start: int | None = None,
    end: int | None = None,
) -> TradeGapStats:
    """Gap statistics over trades with ``start <= timestamp <= end``.

    Trades are sorted by timestamp first. Fewer than two trades in range
    yields all zeros.
    """
    timestamps = sorted(
        t.timestamp
        for t in trades
        if (start is None or t.timestamp >= start) and (end is None or t.timestamp <= end)
    )
    gaps = [curr - prev for prev, curr in zip(timestamps, timestamps[1:])]

    if not gaps:
        return TradeGapStats(average=0.0, minimum=0.0, maximum=0.0)

    logger.debug("Computed %d gaps over %d trades", len(gaps), len(timestamps))
    return TradeGapStats(
        average=float(sum(gaps) // len(gaps)),
        minimum=float(min(gaps)),
        maximum=float(max(gaps)),
    )
