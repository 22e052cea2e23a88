import datetime as dt
from collections.abc import Sequence

import pandas as pd

from coeff_risk.models.prices import PriceSeries


def returns_frame(prices: pd.DataFrame) -> pd.DataFrame:
    """Daily simple returns of newest-first closes.

    Row ``i`` is the move from row ``i + 1`` to row ``i``; a zero previous
    close gives a return of 0. The oldest row has no return and is dropped.
    """
    previous = prices.shift(-1)
    returns = ((prices - previous) / previous).where(previous != 0, 0.0)
    return returns.iloc[:-1]


def simple_returns(calendar: Sequence[dt.date], series: PriceSeries) -> list[float]:
    closes = pd.Series(series.prices, dtype=float).reindex(list(calendar))
    return returns_frame(closes.to_frame(series.ticker))[series.ticker].tolist()


def build_return_map(
    calendar: Sequence[dt.date], series: dict[str, PriceSeries]
) -> dict[str, list[float]]:
    return {ticker: simple_returns(calendar, s) for ticker, s in series.items()}
