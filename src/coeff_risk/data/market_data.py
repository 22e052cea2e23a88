import asyncio
import logging
from typing import Any

from coeff_risk.config import EngineConfig
from coeff_risk.data.base import PriceSource
from coeff_risk.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SOURCE_NAMES = ("proxy", "fmp", "yfinance")


def create_source(config: EngineConfig, name: str | None = None) -> PriceSource:
    """Pick a price source by name, or by what the config provides."""
    if name is None:
        if config.proxy_url:
            name = "proxy"
        elif config.fmp_api_key:
            name = "fmp"
        else:
            raise ConfigurationError("Missing API key: set a proxy URL or FMP key.")

    if name == "proxy":
        from coeff_risk.data.http_client import ProxyPriceSource

        if not config.proxy_url:
            raise ConfigurationError("No proxy URL configured.")
        return ProxyPriceSource(config.proxy_url, timeout=config.request_timeout)
    if name == "fmp":
        from coeff_risk.data.http_client import FMPPriceSource

        if not config.fmp_api_key:
            raise ConfigurationError("Missing API key for Financial Modeling Prep.")
        return FMPPriceSource(config.fmp_api_key, timeout=config.request_timeout)
    if name == "yfinance":
        from coeff_risk.data.yfinance_client import YFinancePriceSource

        return YFinancePriceSource()
    raise ConfigurationError(f"Unknown price source: {name}")


class MarketDataProvider:
    def __init__(self, config: EngineConfig, source: PriceSource | None = None) -> None:
        self.config = config
        self.source = source if source is not None else create_source(config)

    async def fetch_all(self, tickers: list[str]) -> dict[str, Any]:
        """Fetch every ticker concurrently; failed fetches map to None."""
        logger.info(
            "Fetching %d tickers from %s", len(tickers), self.source.source_name
        )
        results = await asyncio.gather(*[self.source.fetch(t) for t in tickers])
        return dict(zip(tickers, results))

    async def close(self) -> None:
        await self.source.aclose()
