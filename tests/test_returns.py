import datetime as dt

import pandas as pd
import pytest

from coeff_risk.analysis.returns import (
    build_return_map,
    returns_frame,
    simple_returns,
)
from coeff_risk.models.prices import PriceSeries, Quote

D1 = dt.date(2025, 1, 6)
D2 = dt.date(2025, 1, 7)
D3 = dt.date(2025, 1, 8)
CALENDAR = [D3, D2, D1]


def make_series(ticker: str, prices: dict[dt.date, float]) -> PriceSeries:
    return PriceSeries(
        ticker=ticker,
        prices=prices,
        latest_quote=Quote(price=0.0, currency="USD"),
    )


class TestSimpleReturns:
    def test_newest_first(self):
        s = make_series("A", {D1: 100.0, D2: 110.0, D3: 99.0})
        returns = simple_returns(CALENDAR, s)
        assert returns == pytest.approx([-0.1, 0.1])

    def test_length(self):
        s = make_series("A", {D1: 1.0, D2: 2.0, D3: 3.0})
        assert len(simple_returns(CALENDAR, s)) == len(CALENDAR) - 1

    def test_zero_previous_close(self):
        s = make_series("A", {D1: 0.0, D2: 5.0, D3: 10.0})
        assert simple_returns(CALENDAR, s) == [1.0, 0.0]

    def test_ignores_dates_outside_calendar(self):
        s = make_series(
            "A", {D1: 100.0, D2: 110.0, D3: 99.0, dt.date(2025, 1, 3): 1.0}
        )
        assert len(simple_returns(CALENDAR, s)) == 2


class TestBuildReturnMap:
    def test_aligned_by_index(self):
        series = {
            "A": make_series("A", {D1: 100.0, D2: 110.0, D3: 121.0}),
            "B": make_series("B", {D1: 50.0, D2: 50.0, D3: 25.0}),
        }
        returns = build_return_map(CALENDAR, series)
        assert set(returns) == {"A", "B"}
        assert returns["A"] == pytest.approx([0.1, 0.1])
        assert returns["B"] == pytest.approx([-0.5, 0.0])


class TestReturnsFrame:
    def test_columns_share_index(self):
        prices = pd.DataFrame(
            {"A": [121.0, 110.0, 100.0], "B": [25.0, 50.0, 0.0]},
            index=CALENDAR,
        )
        returns = returns_frame(prices)
        assert list(returns.index) == [D3, D2]
        assert returns["A"].tolist() == pytest.approx([0.1, 0.1])
        assert returns["B"].tolist() == [-0.5, 0.0]
