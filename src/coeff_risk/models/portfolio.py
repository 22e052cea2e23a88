from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssetHolding(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str
    weight: float = Field(default=0.0, ge=0.0, le=100.0)

    @field_validator("ticker")
    @classmethod
    def _normalize_ticker(cls, v: str) -> str:
        ticker = v.strip().upper()
        if not ticker:
            raise ValueError("ticker must not be empty")
        return ticker

    @property
    def fraction(self) -> float:
        return self.weight / 100

    @classmethod
    def parse(cls, text: str) -> "AssetHolding":
        """Build a holding from ``TICKER`` or ``TICKER:WEIGHT`` text."""
        ticker, _, weight = text.partition(":")
        return cls(ticker=ticker, weight=float(weight) if weight else 0.0)


class Portfolio(BaseModel):
    """Immutable snapshot of an ordered list of holdings.

    Positions, not tickers, identify a holding: the same ticker may appear
    more than once. Every edit returns a new snapshot.
    """

    model_config = ConfigDict(frozen=True)

    holdings: tuple[AssetHolding, ...] = ()

    def __len__(self) -> int:
        return len(self.holdings)

    @property
    def tickers(self) -> list[str]:
        return [h.ticker for h in self.holdings]

    @property
    def weights(self) -> list[float]:
        return [h.weight for h in self.holdings]

    @property
    def total_weight(self) -> float:
        return sum(h.weight for h in self.holdings)

    def add(self, ticker: str, weight: float = 0.0) -> "Portfolio":
        holding = AssetHolding(ticker=ticker, weight=weight)
        return Portfolio(holdings=(*self.holdings, holding))

    def remove(self, index: int) -> "Portfolio":
        holdings = list(self.holdings)
        del holdings[index]
        return Portfolio(holdings=tuple(holdings))

    def with_weight(self, index: int, weight: float) -> "Portfolio":
        return self._replace(index, weight=weight)

    def with_ticker(self, index: int, ticker: str) -> "Portfolio":
        return self._replace(index, ticker=ticker)

    def _replace(self, index: int, **changes: object) -> "Portfolio":
        holdings = list(self.holdings)
        current = holdings[index]
        holdings[index] = AssetHolding(**{**current.model_dump(), **changes})
        return Portfolio(holdings=tuple(holdings))

    @classmethod
    def of(cls, *pairs: tuple[str, float]) -> "Portfolio":
        return cls(holdings=tuple(AssetHolding(ticker=t, weight=w) for t, w in pairs))

    @classmethod
    def from_market_values(
        cls,
        values: Iterable[tuple[str, float]],
        max_assets: int = 10,
        min_value: float = 100.0,
    ) -> "Portfolio":
        """Weight positions by market value.

        The largest ``max_assets`` positions are kept, positions worth
        ``min_value`` or less are dropped, and weights are rounded to one
        decimal place.
        """
        ranked = sorted(values, key=lambda tv: -tv[1])[:max_assets]
        meaningful = [(t, v) for t, v in ranked if v > min_value]
        total = sum(v for _, v in meaningful)
        if total <= 0:
            return cls()
        return cls.of(*[(t, round(v / total * 100, 1)) for t, v in meaningful])
