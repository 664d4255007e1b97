"""Input/output ratio history for a single order.

Every trade of one order moves the same two tokens, so no pair selection is
needed. Each trade contributes ``|input / output|``; trades sharing a
timestamp are merged into one point weighted by their output amounts.
"""

import logging
import math

from pairscope.charts.base import HistoricalPoint
from pairscope.charts.buckets import historical_color
from pairscope.charts.pair_trades import parse_amount
from pairscope.ingestion.models import Trade

logger = logging.getLogger(__name__)


def prepare_historical_order_chart_data(
    trades: list[Trade],
    color_theme: str,
) -> list[HistoricalPoint]:
    """Merge an order's trades into one ratio point per distinct timestamp.

    A lone trade at a timestamp keeps its ratio unchanged. Several trades at
    the same timestamp merge to sum(ratio_i * |output_i|) / sum(|output_i|).
    Trades with unparseable or zero output amounts are skipped.

    Args:
        trades: Trades of a single order.
        color_theme: 'dark' or 'light'; picks the series colour.

    Returns:
        Points sorted ascending by time. Empty if no trade is usable.
    """
    color = historical_color(color_theme)
    groups: dict[int, list[tuple[float, float]]] = {}

    for trade in trades:
        in_amt = parse_amount(trade.input_change.formatted_amount)
        out_amt = parse_amount(trade.output_change.formatted_amount)
        if in_amt is None or out_amt is None or out_amt == 0:
            logger.debug("Skipping trade %s: unusable amounts", trade.id or trade.timestamp)
            continue
        ratio = in_amt / out_amt
        if not math.isfinite(ratio):
            logger.debug("Skipping trade %s: non-finite ratio", trade.id or trade.timestamp)
            continue
        groups.setdefault(int(trade.timestamp), []).append((ratio, out_amt))

    points: list[HistoricalPoint] = []
    for time, entries in sorted(groups.items()):
        if len(entries) == 1:
            value = entries[0][0]
        else:
            weight_total = sum(weight for _, weight in entries)
            value = sum(ratio * weight for ratio, weight in entries) / weight_total
        if not math.isfinite(value):
            logger.debug("Dropping merged point at %d: non-finite value", time)
            continue
        points.append(HistoricalPoint(time=time, value=value, color=color))
    return points
