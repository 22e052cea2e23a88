from coeff_risk.models.portfolio import AssetHolding, Portfolio
from coeff_risk.models.prices import (
    HistoricalPayload,
    PayloadMeta,
    PricePayload,
    PriceRecord,
    PriceSeries,
    Quote,
    RecordsPayload,
)
from coeff_risk.models.result import AnalysisResult, CorrelationMatrix

__all__ = [
    "AnalysisResult",
    "AssetHolding",
    "CorrelationMatrix",
    "HistoricalPayload",
    "PayloadMeta",
    "Portfolio",
    "PricePayload",
    "PriceRecord",
    "PriceSeries",
    "Quote",
    "RecordsPayload",
]
