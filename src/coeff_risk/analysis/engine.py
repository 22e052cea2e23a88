import logging
from collections.abc import Mapping
from typing import Any

from coeff_risk.analysis.alignment import align_prices
from coeff_risk.analysis.beta import estimate_beta
from coeff_risk.analysis.fragility import score_portfolio
from coeff_risk.analysis.matrix import correlation_matrix
from coeff_risk.analysis.normalizer import normalize_payload
from coeff_risk.analysis.portfolio import portfolio_returns
from coeff_risk.analysis.returns import returns_frame
from coeff_risk.config import SYNTHETIC_DATA_ADVISORY, EngineConfig
from coeff_risk.data.market_data import MarketDataProvider
from coeff_risk.exceptions import EmptyPortfolio, PortfolioTooLarge, WeightOverflow
from coeff_risk.models.portfolio import Portfolio
from coeff_risk.models.prices import PriceSeries
from coeff_risk.models.result import AnalysisResult

logger = logging.getLogger(__name__)


def validate_portfolio(portfolio: Portfolio, config: EngineConfig) -> None:
    if not portfolio.holdings:
        raise EmptyPortfolio()
    if len(portfolio) > config.max_assets:
        raise PortfolioTooLarge(len(portfolio), config.max_assets)
    total = portfolio.total_weight
    if total > 100:
        raise WeightOverflow(total)


def requested_tickers(portfolio: Portfolio, config: EngineConfig) -> list[str]:
    """Distinct portfolio tickers in order, followed by the benchmark."""
    tickers = list(dict.fromkeys(portfolio.tickers))
    benchmark = config.benchmark.upper()
    if benchmark not in tickers:
        tickers.append(benchmark)
    return tickers


def analyze_payloads(
    portfolio: Portfolio,
    payloads: Mapping[str, Any],
    config: EngineConfig | None = None,
) -> AnalysisResult:
    """Run the full computation over already-fetched price payloads."""
    config = config or EngineConfig()
    validate_portfolio(portfolio, config)
    benchmark = config.benchmark.upper()

    series: dict[str, PriceSeries] = {}
    for ticker in requested_tickers(portfolio, config):
        series[ticker] = normalize_payload(
            ticker, payloads.get(ticker), config.base_currency
        )

    synthetic = [t for t, s in series.items() if s.is_synthetic]
    if synthetic:
        logger.warning("Synthetic data in use for %s", ", ".join(synthetic))

    prices = align_prices(
        series.values(),
        lookback_days=config.lookback_days,
        min_overlap_days=config.min_overlap_days,
    )
    returns = returns_frame(prices)

    asset_returns = [returns[t].tolist() for t in portfolio.tickers]
    matrix = correlation_matrix(portfolio.tickers, asset_returns)
    blended = portfolio_returns(asset_returns, portfolio.weights)
    beta = estimate_beta(blended, returns[benchmark].tolist())
    avg_corr, score = score_portfolio(matrix, portfolio.weights)

    logger.info(
        "Fragility %d/100, beta %.2f, avg correlation %.2f over %d days",
        score,
        beta,
        avg_corr,
        len(returns),
    )

    return AnalysisResult(
        matrix=matrix,
        beta=beta,
        fragility_score=score,
        avg_correlation=avg_corr,
        benchmark=benchmark,
        holdings=portfolio.holdings,
        latest_quotes={t: s.latest_quote for t, s in series.items()},
        data_quality=SYNTHETIC_DATA_ADVISORY if synthetic else None,
        observations=len(returns),
        window_start=prices.index[-1],
        window_end=prices.index[0],
    )


async def run_analysis(
    portfolio: Portfolio,
    provider: MarketDataProvider,
    config: EngineConfig | None = None,
) -> AnalysisResult:
    """Validate, fetch every ticker concurrently, then compute.

    Nothing is fetched for a portfolio that fails validation.
    """
    config = config or provider.config
    validate_portfolio(portfolio, config)
    payloads = await provider.fetch_all(requested_tickers(portfolio, config))
    return analyze_payloads(portfolio, payloads, config)
