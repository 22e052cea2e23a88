import argparse
import asyncio
import logging
import os
import sys

from rich.console import Console

from coeff_risk.config import EngineConfig
from coeff_risk.data.market_data import SOURCE_NAMES, MarketDataProvider, create_source
from coeff_risk.models.portfolio import AssetHolding, Portfolio
from coeff_risk.models.result import AnalysisResult

logger = logging.getLogger(__name__)
console = Console()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="coeff",
        description="Portfolio correlation, beta and fragility analysis",
    )
    sub = p.add_subparsers(dest="command")

    analyze = sub.add_parser("analyze", help="Analyze a portfolio")
    analyze.add_argument(
        "holdings",
        nargs="+",
        help="Holdings as TICKER:WEIGHT, e.g. BTCUSD:40 ETHUSD:30 AMD:30",
    )
    analyze.add_argument(
        "--benchmark",
        default="SPY",
        help="Benchmark ticker for beta",
    )
    analyze.add_argument(
        "--source",
        choices=SOURCE_NAMES,
        default=None,
        help="Price source (default: proxy if configured, else FMP)",
    )
    analyze.add_argument(
        "--proxy-url",
        default=None,
        help="Price proxy endpoint (env COEFF_PROXY_URL)",
    )
    analyze.add_argument(
        "--api-key",
        default=None,
        help="Financial Modeling Prep API key (env FMP_API_KEY)",
    )
    analyze.add_argument(
        "--lookback",
        type=int,
        default=100,
        help="Maximum number of common trading days",
    )
    analyze.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    analyze.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return p


def build_config(args: argparse.Namespace) -> EngineConfig:
    from dotenv import load_dotenv

    load_dotenv()

    overrides: dict[str, object] = {
        "benchmark": args.benchmark.upper(),
        "lookback_days": args.lookback,
        "fmp_api_key": args.api_key or os.environ.get("FMP_API_KEY"),
    }
    proxy_url = args.proxy_url or os.environ.get("COEFF_PROXY_URL")
    if proxy_url:
        overrides["proxy_url"] = proxy_url
    return EngineConfig(**overrides)


async def run_portfolio(
    portfolio: Portfolio, config: EngineConfig, source_name: str | None = None
) -> AnalysisResult:
    from coeff_risk.analysis.engine import run_analysis

    provider = MarketDataProvider(config, create_source(config, source_name))
    try:
        with console.status(
            f"[cyan]Fetching {len(portfolio) + 1} price histories..."
        ):
            return await run_analysis(portfolio, provider, config)
    finally:
        await provider.close()


def _run_analyze(args: argparse.Namespace) -> None:
    """Execute the analyze subcommand."""
    config = build_config(args)
    portfolio = Portfolio(
        holdings=tuple(AssetHolding.parse(h) for h in args.holdings)
    )

    result = asyncio.run(run_portfolio(portfolio, config, args.source))

    if args.json:
        console.print_json(result.model_dump_json())
        return

    from coeff_risk.output.renderer import ResultRenderer

    ResultRenderer(console).render(result)


def main() -> None:
    parser = build_parser()

    # A bare holdings list is treated as the analyze subcommand
    if len(sys.argv) > 1 and sys.argv[1] not in ("analyze", "-h", "--help"):
        sys.argv.insert(1, "analyze")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        _run_analyze(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Analysis error: {e}[/red]")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
