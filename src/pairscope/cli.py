"""Pairscope CLI: chart series from trade snapshot files."""

from __future__ import annotations

import json
import logging
import sys

import click
import yaml

from pairscope.analytics import trade_gap_stats
from pairscope.charts import (
    format_chart_timestamp,
    get_bucket_seconds_for_time_delta,
    parse_time_delta,
    prepare_historical_order_chart_data,
    transform_pair_trades,
)
from pairscope.config import PairscopeConfig
from pairscope.ingestion.models import Trade
from pairscope.ingestion.snapshot import JsonSnapshotSource, SnapshotError
from pairscope.pairs import (
    TradingPair,
    extract_pairs,
    find_pair_index,
    flip_trading_pair,
    get_default_pair,
)
from pairscope.tokens import get_token_label

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_FORMATS = ("json", "yaml")


def _setup_logging(log_level: str) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _config(ctx: click.Context) -> PairscopeConfig:
    cfg = ctx.obj.get("config") if ctx.obj else None
    return cfg or PairscopeConfig()


def _load_trades(snapshot: str) -> list[Trade]:
    try:
        return JsonSnapshotSource(snapshot).load_trades()
    except SnapshotError as exc:
        click.echo(f"Failed to load snapshot: {exc}", err=True)
        raise SystemExit(1)


def _emit(data: object, fmt: str) -> None:
    if fmt == "yaml":
        click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)
    else:
        click.echo(json.dumps(data, indent=2))


def _pair_dict(pair: TradingPair) -> dict:
    return {
        "label": pair.label,
        "base": {"address": pair.base_token.address, "label": get_token_label(pair.base_token)},
        "quote": {"address": pair.quote_token.address, "label": get_token_label(pair.quote_token)},
    }


def _parse_window(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return parse_time_delta(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc))


format_option = click.option(
    "--format",
    "fmt",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="json",
    help="Output format.",
)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Set logging verbosity.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to pairscope.toml config file.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, config_path: str | None) -> None:
    """Pairscope - price and volume series from on-chain trades.

    \b
    Every command reads a JSON trade snapshot (a list of trades, or an
    object with a "trades" list) exported by the data layer.

    \b
    Quick start:
      pairscope pairs trades.json          List traded pairs
      pairscope chart trades.json          Chart the default pair (24h)
      pairscope history order.json         Ratio history of one order
      pairscope gaps trades.json           Time between trades
    """
    _setup_logging(log_level)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = PairscopeConfig.find_and_load(config_path)
    except ValueError as exc:
        raise click.UsageError(f"Invalid config: {exc}")


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@format_option
def pairs(snapshot: str, fmt: str) -> None:
    """List the pairs traded in a snapshot, in canonical orientation.

    \b
    Examples:
      pairscope pairs trades.json
      pairscope pairs trades.json --format yaml
    """
    trades = _load_trades(snapshot)
    found = extract_pairs(trades)
    default = get_default_pair(trades)
    _emit(
        {
            "pairs": [_pair_dict(p) for p in found],
            "default_index": find_pair_index(found, default) if default else -1,
        },
        fmt,
    )


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--base", "base_address", default=None, help="Base token address.")
@click.option("--quote", "quote_address", default=None, help="Quote token address.")
@click.option(
    "--window",
    default=None,
    callback=_parse_window,
    help="Lookback window, e.g. 24h, 7d, 30d, 1y (default from config: 24h).",
)
@click.option("--now", type=int, default=None, help="Window end in UNIX seconds (default: now).")
@click.option("--flip", is_flag=True, default=False, help="Swap base and quote.")
@format_option
@click.pass_context
def chart(
    ctx: click.Context,
    snapshot: str,
    base_address: str | None,
    quote_address: str | None,
    window: int | None,
    now: int | None,
    flip: bool,
    fmt: str,
) -> None:
    """Price and buy/sell volume series for one pair.

    Without --base/--quote the pair of the oldest trade is charted.

    \b
    Examples:
      pairscope chart trades.json --window 7d
      pairscope chart trades.json --base 0xaaa... --quote 0xbbb... --flip
    """
    cfg = _config(ctx)
    time_delta = window or cfg.chart.time_delta_seconds
    tz = cfg.chart.tzinfo

    trades = _load_trades(snapshot)

    if base_address is not None and quote_address is not None:
        base, quote = (quote_address, base_address) if flip else (base_address, quote_address)
    elif base_address is None and quote_address is None:
        pair = get_default_pair(trades)
        if pair is None:
            click.echo("Snapshot contains no trades.", err=True)
            raise SystemExit(1)
        if flip:
            pair = flip_trading_pair(pair)
        base, quote = pair.base_token.address, pair.quote_token.address
    else:
        raise click.UsageError("--base and --quote must be given together.")

    data = transform_pair_trades(
        trades,
        base_token_address=base,
        quote_token_address=quote,
        time_delta_seconds=time_delta,
        now=now,
        colors=cfg.colors,
    )

    def _labelled(points: list) -> list[dict]:
        return [
            {**p.model_dump(mode="json"), "label": format_chart_timestamp(p.time, time_delta, tz)}
            for p in points
        ]

    _emit(
        {
            "base": base,
            "quote": quote,
            "time_delta_seconds": time_delta,
            "bucket_seconds": get_bucket_seconds_for_time_delta(time_delta),
            "price_points": _labelled(data.price_points),
            "buy_volume_points": _labelled(data.buy_volume_points),
            "sell_volume_points": _labelled(data.sell_volume_points),
        },
        fmt,
    )


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--theme",
    type=click.Choice(("dark", "light")),
    default=None,
    help="Colour theme (default from config: dark).",
)
@format_option
@click.pass_context
def history(ctx: click.Context, snapshot: str, theme: str | None, fmt: str) -> None:
    """Input/output ratio history of a single order.

    \b
    Examples:
      pairscope history order-trades.json --theme light
    """
    cfg = _config(ctx)
    trades = _load_trades(snapshot)
    points = prepare_historical_order_chart_data(trades, theme or cfg.chart.color_theme)
    _emit([p.model_dump(mode="json") for p in points], fmt)


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--start", type=int, default=None, help="Only trades at or after (UNIX seconds).")
@click.option("--end", type=int, default=None, help="Only trades at or before (UNIX seconds).")
@format_option
def gaps(snapshot: str, start: int | None, end: int | None, fmt: str) -> None:
    """Average, min and max seconds between consecutive trades.

    \b
    Examples:
      pairscope gaps trades.json
      pairscope gaps trades.json --start 1700000000 --end 1700086400
    """
    trades = _load_trades(snapshot)
    stats = trade_gap_stats(trades, start=start, end=end)
    _emit(stats.model_dump(mode="json"), fmt)
