"""Pairscope: time-bucketed price and volume analytics for on-chain trades."""
