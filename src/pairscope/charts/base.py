"""Chart point models and the running sums that produce them.

Every series shares the same shape, a UNIX-seconds ``time`` and a float
``value``, and all are returned sorted ascending by time.
"""

import math

from pydantic import BaseModel, Field


class PricePoint(BaseModel):
    """Volume-weighted price (quote per base) at one exact timestamp."""

    time: int = Field(description="UNIX seconds of the merged trades")
    value: float = Field(description="Sum of quote / sum of base")

    model_config = {"frozen": True}


class VolumePoint(BaseModel):
    """Base-asset volume in one bucket for one direction.

    Buy volume is >= 0; sell volume is negated so it renders below zero.
    """

    time: int = Field(description="Bucket start, a multiple of the bucket width")
    value: float = Field(description="Signed base volume")
    color: str | None = Field(default=None, description="Bar colour")

    model_config = {"frozen": True}


class PairTradesChartData(BaseModel):
    """Price and buy/sell volume series for one pair over one window."""

    price_points: list[PricePoint] = Field(default_factory=list)
    buy_volume_points: list[VolumePoint] = Field(default_factory=list)
    sell_volume_points: list[VolumePoint] = Field(default_factory=list)

    model_config = {"frozen": True}


class HistoricalPoint(BaseModel):
    """One point of a single order's input/output ratio history."""

    time: int = Field(description="UNIX seconds")
    value: float = Field(description="Input amount / output amount")
    color: str | None = Field(default=None, description="Series colour")

    model_config = {"frozen": True}


class PriceAccumulator:
    """Running base/quote sums for trades sharing a timestamp.

    The resulting price is sum(quote) / sum(base), i.e. each trade's price
    weighted by its base amount rather than a plain mean of prices.
    """

    __slots__ = ("sum_base", "sum_quote", "trade_count")

    def __init__(self) -> None:
        self.sum_base: float = 0.0
        self.sum_quote: float = 0.0
        self.trade_count: int = 0

    def add(self, base_amount: float, quote_amount: float) -> None:
        self.sum_base += base_amount
        self.sum_quote += quote_amount
        self.trade_count += 1

    def to_point(self, time: int) -> PricePoint | None:
        """Emit the merged price, or None if it would not be finite."""
        if self.sum_base <= 0:
            return None
        price = self.sum_quote / self.sum_base
        if not math.isfinite(price):
            return None
        return PricePoint(time=time, value=price)


class VolumeBuckets:
    """Base volume summed per bucket start for a single direction."""

    __slots__ = ("_sums",)

    def __init__(self) -> None:
        self._sums: dict[int, float] = {}

    def __len__(self) -> int:
        return len(self._sums)

    def add(self, bucket_time: int, base_amount: float) -> None:
        self._sums[bucket_time] = self._sums.get(bucket_time, 0.0) + base_amount

    def to_points(self, color: str | None = None, negate: bool = False) -> list[VolumePoint]:
        """Emit one point per non-empty bucket, sorted by time."""
        return [
            VolumePoint(time=t, value=-total if negate else total, color=color)
            for t, total in sorted(self._sums.items())
        ]
