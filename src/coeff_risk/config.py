from pydantic import BaseModel, Field

DEFAULT_PROXY_URL = "https://coeff-data-proxy.wrighttim.workers.dev"
FMP_HISTORY_URL = "https://financialmodelingprep.com/api/v3/historical-price-full"

SYNTHETIC_DATA_ADVISORY = "Demo mode: using simulated data (API limit)"


class EngineConfig(BaseModel):
    benchmark: str = "SPY"
    max_assets: int = Field(default=10, ge=1)
    lookback_days: int = Field(default=100, ge=2)
    min_overlap_days: int = Field(default=30, ge=2)
    base_currency: str = "USD"

    proxy_url: str | None = DEFAULT_PROXY_URL
    fmp_api_key: str | None = None
    request_timeout: float = 30.0
