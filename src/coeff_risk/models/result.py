from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from coeff_risk.models.portfolio import AssetHolding
from coeff_risk.models.prices import Quote


class CorrelationMatrix(BaseModel):
    model_config = ConfigDict(frozen=True)

    tickers: list[str] = []
    values: list[list[float]] = []

    @property
    def size(self) -> int:
        return len(self.values)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.values[i][j]


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matrix: CorrelationMatrix
    beta: float
    fragility_score: int = Field(ge=0, le=100)
    avg_correlation: float

    benchmark: str
    holdings: tuple[AssetHolding, ...] = ()
    latest_quotes: dict[str, Quote] = {}
    data_quality: str | None = None
    observations: int = 0
    window_start: date | None = None
    window_end: date | None = None

    @property
    def uses_synthetic_data(self) -> bool:
        return self.data_quality is not None
