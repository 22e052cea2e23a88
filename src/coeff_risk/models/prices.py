import datetime as dt
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PriceRecord(BaseModel):
    date: dt.date
    close: float = Field(ge=0.0)

    @field_validator("date", mode="before")
    @classmethod
    def _drop_time(cls, v: Any) -> Any:
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str):
            return v.split("T")[0].split(" ")[0]
        return v


class Quote(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: float
    currency: str


class PayloadMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_price: float | None = Field(default=None, alias="currentPrice")
    currency: str | None = None
    is_synthetic: bool = Field(default=False, alias="isSynthetic")


class RecordsPayload(BaseModel):
    """A bare sequence of daily records."""

    kind: Literal["records"] = "records"
    records: list[Any] = []


class HistoricalPayload(BaseModel):
    """An object carrying a ``historical`` sequence and optional ``meta``."""

    kind: Literal["historical"] = "historical"
    historical: list[Any] = []
    meta: PayloadMeta | None = None


PricePayload = RecordsPayload | HistoricalPayload


class PriceSeries(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str
    prices: dict[dt.date, float]
    latest_quote: Quote
    is_synthetic: bool = False

    @property
    def dates(self) -> set[dt.date]:
        return set(self.prices)

    def __len__(self) -> int:
        return len(self.prices)
