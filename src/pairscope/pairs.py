"""Trading pair canonicalization.

A pair of tokens seen in a trade is unordered; charts need an orientation.
By default the token with the lexicographically smaller lower-cased address
is the base. Callers may flip a pair explicitly for display. The flipped
pair is still a valid TradingPair, canonicalization only governs the default.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pairscope.ingestion.models import Token, Trade
from pairscope.tokens import address_key, get_token_label


class TradingPair(BaseModel):
    """An ordered (base, quote) pair. Price is quote per base."""

    base_token: Token = Field(description="Base asset, volume is measured in it")
    quote_token: Token = Field(description="Quote asset, price is expressed in it")

    model_config = {"frozen": True}

    @property
    def label(self) -> str:
        """Display label, e.g. 'WETH/USDC'."""
        return f"{get_token_label(self.base_token)}/{get_token_label(self.quote_token)}"


def _canonical_pair(a: Token, b: Token) -> TradingPair:
    if address_key(a) < address_key(b):
        return TradingPair(base_token=a, quote_token=b)
    return TradingPair(base_token=b, quote_token=a)


def pair_key(a: Token, b: Token) -> str:
    """Orientation-independent key: ``min(addr)-max(addr)``."""
    first, second = sorted((address_key(a), address_key(b)))
    return f"{first}-{second}"


def extract_pairs(trades: list[Trade]) -> list[TradingPair]:
    """Distinct pairs traded, each in canonical orientation.

    Pairs are returned in order of first appearance. The first-seen token
    objects are kept as the pair's representatives.
    """
    pairs: dict[str, TradingPair] = {}
    for trade in trades:
        in_token, out_token = trade.tokens
        key = pair_key(in_token, out_token)
        if key not in pairs:
            pairs[key] = _canonical_pair(in_token, out_token)
    return list(pairs.values())


def get_default_pair(trades: list[Trade]) -> TradingPair | None:
    """Canonical pair of the oldest trade, or None when there are no trades.

    Ties on timestamp go to the earliest trade in input order.
    """
    if not trades:
        return None
    oldest = min(trades, key=lambda t: t.timestamp)
    return _canonical_pair(*oldest.tokens)


def pairs_are_equal(a: TradingPair, b: TradingPair) -> bool:
    """Same base and same quote, case-insensitively. Orientation matters."""
    return (
        address_key(a.base_token) == address_key(b.base_token)
        and address_key(a.quote_token) == address_key(b.quote_token)
    )


def find_pair_index(pairs: list[TradingPair], target: TradingPair) -> int:
    """Index of the first pair equal to target, or -1."""
    for i, pair in enumerate(pairs):
        if pairs_are_equal(pair, target):
            return i
    return -1


def flip_trading_pair(pair: TradingPair) -> TradingPair:
    """Swap base and quote. The input pair is left untouched."""
    return TradingPair(base_token=pair.quote_token, quote_token=pair.base_token)
