"""Chart series construction: transforms trade snapshots into plottable points."""

from pairscope.charts.base import (
    HistoricalPoint,
    PairTradesChartData,
    PriceAccumulator,
    PricePoint,
    VolumeBuckets,
    VolumePoint,
)
from pairscope.charts.buckets import (
    BUCKET_SECONDS_1_YEAR,
    BUCKET_SECONDS_7_DAYS,
    BUCKET_SECONDS_24_HOURS,
    BUCKET_SECONDS_30_DAYS,
    TIME_DELTA_1_YEAR,
    TIME_DELTA_7_DAYS,
    TIME_DELTA_24_HOURS,
    TIME_DELTA_30_DAYS,
    ChartColors,
    format_chart_timestamp,
    get_bucket_seconds_for_time_delta,
    historical_color,
    parse_time_delta,
)
from pairscope.charts.historical import prepare_historical_order_chart_data
from pairscope.charts.pair_trades import (
    ClassifiedTrade,
    classify_trade,
    filter_trades,
    transform_pair_trades,
)

__all__ = [
    # Points
    "HistoricalPoint",
    "PairTradesChartData",
    "PricePoint",
    "VolumePoint",
    # Accumulation
    "PriceAccumulator",
    "VolumeBuckets",
    # Windows, buckets, labels
    "BUCKET_SECONDS_1_YEAR",
    "BUCKET_SECONDS_7_DAYS",
    "BUCKET_SECONDS_24_HOURS",
    "BUCKET_SECONDS_30_DAYS",
    "TIME_DELTA_1_YEAR",
    "TIME_DELTA_7_DAYS",
    "TIME_DELTA_24_HOURS",
    "TIME_DELTA_30_DAYS",
    "ChartColors",
    "format_chart_timestamp",
    "get_bucket_seconds_for_time_delta",
    "historical_color",
    "parse_time_delta",
    # Pipelines
    "ClassifiedTrade",
    "classify_trade",
    "filter_trades",
    "prepare_historical_order_chart_data",
    "transform_pair_trades",
]
