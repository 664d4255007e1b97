"""Pair chart pipeline: window filter, direction classification, aggregation.

Trades are filtered to the requested window and pair, each surviving trade
is classified as a buy or sell of the base token, and the classified trades
feed two independent aggregations:

  - price: one volume-weighted point per exact timestamp
  - volume: base volume summed per fixed-width bucket, per direction

Records whose amounts do not parse to finite numbers, or whose base amount
is zero, are skipped and logged, never raised.
"""

from __future__ import annotations

import logging
import math
import time as time_mod

from pydantic import BaseModel

from pairscope.charts.base import (
    PairTradesChartData,
    PriceAccumulator,
    VolumeBuckets,
)
from pairscope.charts.buckets import (
    ChartColors,
    bucket_start,
    get_bucket_seconds_for_time_delta,
)
from pairscope.ingestion.models import Trade

logger = logging.getLogger(__name__)


class ClassifiedTrade(BaseModel):
    """A trade expressed in terms of a chosen base token."""

    timestamp: int
    base_amount: float
    quote_amount: float
    is_buy: bool

    model_config = {"frozen": True}


def parse_amount(value: str | float) -> float | None:
    """Absolute value of a formatted amount, or None if it is not finite."""
    try:
        amount = abs(float(value))
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def trade_matches_pair(trade: Trade, base_address: str, quote_address: str) -> bool:
    """True if the trade's two tokens are exactly {base, quote}, in either order."""
    in_addr = trade.input_change.token.address.lower()
    out_addr = trade.output_change.token.address.lower()
    base = base_address.lower()
    quote = quote_address.lower()
    return (in_addr == base and out_addr == quote) or (in_addr == quote and out_addr == base)


def filter_trades(
    trades: list[Trade],
    base_address: str,
    quote_address: str,
    time_delta_seconds: int,
    now: int,
) -> list[Trade]:
    """Trades of the pair with ``now - time_delta_seconds <= timestamp <= now``."""
    cutoff = now - time_delta_seconds
    return [
        t
        for t in trades
        if cutoff <= t.timestamp <= now and trade_matches_pair(t, base_address, quote_address)
    ]


def classify_trade(trade: Trade, base_address: str) -> ClassifiedTrade | None:
    """Orient a trade against the base token.

    If the input side holds the base token the trade is a buy of base:
    base = |input|, quote = |output|. Otherwise it is a sell: base = |output|,
    quote = |input|. Returns None when either amount is not finite.
    """
    in_amt = parse_amount(trade.input_change.formatted_amount)
    out_amt = parse_amount(trade.output_change.formatted_amount)
    if in_amt is None or out_amt is None:
        return None

    is_buy = trade.input_change.token.address.lower() == base_address.lower()
    return ClassifiedTrade(
        timestamp=trade.timestamp,
        base_amount=in_amt if is_buy else out_amt,
        quote_amount=out_amt if is_buy else in_amt,
        is_buy=is_buy,
    )


def transform_pair_trades(
    trades: list[Trade],
    base_token_address: str,
    quote_token_address: str,
    time_delta_seconds: int,
    now: int | None = None,
    colors: ChartColors | None = None,
) -> PairTradesChartData:
    """Build the price and buy/sell volume series for one pair.

    Args:
        trades: Trade snapshot, in any order.
        base_token_address: Base token; price is quote per base, volume is in base.
        quote_token_address: Quote token.
        time_delta_seconds: Lookback window. Also selects the bucket width.
        now: Window end in UNIX seconds. Defaults to the current time.
        colors: Palette for the volume points.

    Returns:
        PairTradesChartData with each series sorted ascending by time.
        Empty series when nothing matches.
    """
    if now is None:
        now = int(time_mod.time())
    colors = colors or ChartColors()
    bucket_seconds = get_bucket_seconds_for_time_delta(time_delta_seconds)

    matching = filter_trades(trades, base_token_address, quote_token_address, time_delta_seconds, now)

    prices: dict[int, PriceAccumulator] = {}
    buys = VolumeBuckets()
    sells = VolumeBuckets()
    skipped = 0

    for trade in matching:
        classified = classify_trade(trade, base_token_address)
        if classified is None:
            logger.debug("Skipping trade %s: non-numeric amount", trade.id or trade.timestamp)
            skipped += 1
            continue
        if classified.base_amount == 0:
            logger.debug("Skipping trade %s: zero base amount", trade.id or trade.timestamp)
            skipped += 1
            continue

        prices.setdefault(classified.timestamp, PriceAccumulator()).add(
            classified.base_amount, classified.quote_amount
        )
        bucket = bucket_start(classified.timestamp, bucket_seconds)
        (buys if classified.is_buy else sells).add(bucket, classified.base_amount)

    price_points = []
    for ts in sorted(prices):
        point = prices[ts].to_point(ts)
        if point is not None:
            price_points.append(point)

    logger.debug(
        "Pair %s/%s: %d of %d trades in window, %d skipped, %d trades merged into "
        "%d price points, %d buy buckets, %d sell buckets",
        base_token_address,
        quote_token_address,
        len(matching),
        len(trades),
        skipped,
        sum(acc.trade_count for acc in prices.values()),
        len(price_points),
        len(buys),
        len(sells),
    )

    return PairTradesChartData(
        price_points=price_points,
        buy_volume_points=buys.to_points(color=colors.buy_volume),
        sell_volume_points=sells.to_points(color=colors.sell_volume, negate=True),
    )
