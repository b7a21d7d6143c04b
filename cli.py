"""
Momentum Screener CLI.

Usage:
    python cli.py screen [--universe core|extended] [--mode standard|risk-adjusted]
                         [--weights W3 W6 W12] [--remove-latest-month]
                         [--format table|json] [--config PATH] [--verbose]
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from domain import (
    InstrumentRecord,
    ScoringMode,
    Universe,
    NO_DATA,
    clean_symbol,
    format_percent,
    format_sharpe,
    select_instruments,
)
from adapters import YahooHistoryAdapter, FredAdapter
from config import ConfigError, ScoringConfig, ScreenerConfig, load_config
from orchestration import (
    RefreshContext,
    RefreshResult,
    resolve_risk_free_rate,
    run_refresh,
)
from ports import RefreshError

logger = logging.getLogger(__name__)

CAVEAT_MARK = "*"


def apply_overrides(config: ScreenerConfig, args: argparse.Namespace) -> ScreenerConfig:
    """Layer command-line options over the loaded configuration."""
    scoring = config.scoring.model_dump()
    if args.mode:
        scoring["mode"] = args.mode
    if args.weights:
        scoring["weight_3m"], scoring["weight_6m"], scoring["weight_12m"] = args.weights
    if args.remove_latest_month:
        scoring["remove_latest_month"] = True

    update = {"scoring": ScoringConfig(**scoring)}
    if args.universe:
        update["universe"] = Universe(args.universe)
    return config.model_copy(update=update)


# ============================================================================
# Rendering
# ============================================================================

def _row(rank: str, record: InstrumentRecord) -> str:
    symbol = clean_symbol(record.symbol)
    if record.currency_normalized:
        symbol += CAVEAT_MARK
    score = f"{record.score:.2f}" if record.score is not None else NO_DATA
    label = record.label.value if record.label else "-"
    rsi = str(record.rsi) if record.rsi is not None else NO_DATA
    ma = {True: "above", False: "below", None: NO_DATA}[record.above_long_ma]
    name = record.metadata.short_name
    if record.metadata.currency_note:
        name = f"{name[:12]} ({record.metadata.currency_note})"
    returns = record.returns
    return (
        f"{rank:>4} {symbol:<9} {name[:18]:<18} {score:>6} "
        f"{label:<10} {format_percent(returns.one_month):>8} "
        f"{format_percent(returns.three_month):>8} {format_percent(returns.six_month):>8} "
        f"{format_percent(returns.twelve_month):>8} {rsi:>4} {record.liquidity:>7} "
        f"{ma:>6} {format_sharpe(record.sharpe_ratios.twelve_month):>7}"
    )


def render_table(result: RefreshResult) -> str:
    """Ranked table followed by the data-quality summary."""
    header = (
        f"{'#':>4} {'Symbol':<9} {'Name':<18} {'Score':>6} {'Trend':<10} "
        f"{'1M':>8} {'3M':>8} {'6M':>8} {'12M':>8} {'RSI':>4} {'Volume':>7} "
        f"{'MA200':>6} {'Sh12M':>7}"
    )
    lines = [header, "-" * len(header)]
    for rank, record in enumerate(result.ranked, start=1):
        lines.append(_row(str(rank), record))
    for record in result.placeholders:
        lines.append(_row("-", record))

    lines.append("")
    batch = result.batch
    lines.append(
        f"Fetched {batch.succeeded}/{batch.attempted} instruments "
        f"({batch.failed} failed)"
    )
    if batch.failed_symbols:
        lines.append(f"Failed: {', '.join(clean_symbol(s) for s in batch.failed_symbols)}")
    if result.adjusted_symbols:
        adjusted = ", ".join(clean_symbol(s) for s in result.adjusted_symbols)
        lines.append(f"{CAVEAT_MARK} Price units corrected (pence/pounds) for: {adjusted}")
    if result.risk_free_rate is not None:
        lines.append(f"Risk-free rate: {result.risk_free_rate:.2f}% ({result.risk_free_source})")
    return "\n".join(lines)


def _record_json(record: InstrumentRecord) -> dict:
    data = record.model_dump(mode="json")
    if record.score is not None:
        data["score"] = round(record.score, 2)
    return data


def render_json(result: RefreshResult) -> dict:
    """JSON-serializable view of a refresh."""
    batch = result.batch
    return {
        "generated_at": result.generated_at.isoformat(),
        "risk_free_rate": result.risk_free_rate,
        "risk_free_source": result.risk_free_source,
        "records": {
            key: _record_json(record) for key, record in result.records.items()
        },
        "absent": [meta.symbol for meta in result.absent],
        "summary": {
            "attempted": batch.attempted,
            "succeeded": batch.succeeded,
            "failed": batch.failed,
            "failed_symbols": batch.failed_symbols,
            "errors": {
                symbol: batch.results[symbol].error_code or "unknown"
                for symbol in batch.failed_symbols
            },
            "adjusted_symbols": list(result.adjusted_symbols),
        },
    }


# ============================================================================
# Commands
# ============================================================================

def cmd_screen(args: argparse.Namespace) -> int:
    """Refresh the universe and print the ranking."""
    try:
        config = apply_overrides(load_config(args.config), args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except PydanticValidationError as e:
        print(f"Invalid option: {e.errors()[0].get('msg', e)}", file=sys.stderr)
        return 2

    instruments = select_instruments(config.instruments, config.universe)
    source = YahooHistoryAdapter(config.fetch)
    rate, rate_source = resolve_risk_free_rate(FredAdapter(config.fetch), source, config.risk_free)
    context = RefreshContext(config=config, risk_free_rate=rate, risk_free_source=rate_source)

    logger.info(f"Screening {len(instruments)} instruments ({config.universe.value} universe)")
    try:
        result = run_refresh(instruments, source, context)
    except RefreshError as e:
        print(f"Refresh failed: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(render_json(result), indent=2, default=str))
    else:
        print(render_table(result))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="screener",
        description="Cross-sectional momentum screener",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    screen_parser = subparsers.add_parser("screen", help="Fetch, score and rank the universe")
    screen_parser.add_argument(
        "-u", "--universe",
        choices=[u.value for u in Universe],
        help="Instrument universe (default from config)",
    )
    screen_parser.add_argument(
        "-m", "--mode",
        choices=[m.value for m in ScoringMode],
        help="Rank raw returns or return / volatility",
    )
    screen_parser.add_argument(
        "-w", "--weights",
        nargs=3,
        type=float,
        metavar=("W3", "W6", "W12"),
        help="3M/6M/12M weights in percent, summing to 100",
    )
    screen_parser.add_argument(
        "--remove-latest-month",
        action="store_true",
        help="Score on returns that exclude the most recent month",
    )
    screen_parser.add_argument(
        "-f", "--format",
        choices=["table", "json"],
        default="table",
        help="Output format",
    )
    screen_parser.add_argument("-c", "--config", help="Path to TOML config file")
    screen_parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    screen_parser.set_defaults(func=cmd_screen)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
