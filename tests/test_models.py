import datetime as dt

import pytest
from pydantic import ValidationError

from coeff_risk.models.portfolio import AssetHolding, Portfolio
from coeff_risk.models.prices import PriceRecord
from coeff_risk.models.result import AnalysisResult, CorrelationMatrix


class TestAssetHolding:
    def test_ticker_normalized(self):
        h = AssetHolding(ticker=" btcusd ", weight=40)
        assert h.ticker == "BTCUSD"
        assert h.fraction == 0.4

    def test_empty_ticker_rejected(self):
        with pytest.raises(ValidationError):
            AssetHolding(ticker="  ", weight=10)

    def test_weight_bounds(self):
        with pytest.raises(ValidationError):
            AssetHolding(ticker="AMD", weight=101)
        with pytest.raises(ValidationError):
            AssetHolding(ticker="AMD", weight=-1)

    def test_parse(self):
        h = AssetHolding.parse("ethusd:30")
        assert h.ticker == "ETHUSD"
        assert h.weight == 30.0

    def test_parse_without_weight(self):
        assert AssetHolding.parse("AMD").weight == 0.0

    def test_frozen(self):
        h = AssetHolding(ticker="AMD", weight=10)
        with pytest.raises(ValidationError):
            h.weight = 20


class TestPortfolio:
    def test_totals(self):
        p = Portfolio.of(("BTCUSD", 40), ("ETHUSD", 30), ("AMD", 30))
        assert len(p) == 3
        assert p.total_weight == 100
        assert p.tickers == ["BTCUSD", "ETHUSD", "AMD"]
        assert p.weights == [40, 30, 30]

    def test_add_returns_new_snapshot(self):
        p = Portfolio.of(("AMD", 50))
        q = p.add("nvda", 25)
        assert p.tickers == ["AMD"]
        assert q.tickers == ["AMD", "NVDA"]

    def test_remove(self):
        p = Portfolio.of(("A", 10), ("B", 20), ("C", 30))
        q = p.remove(1)
        assert q.tickers == ["A", "C"]
        assert len(p) == 3

    def test_remove_bad_index(self):
        with pytest.raises(IndexError):
            Portfolio.of(("A", 10)).remove(3)

    def test_with_weight(self):
        p = Portfolio.of(("A", 10), ("B", 20))
        q = p.with_weight(0, 80)
        assert q.weights == [80, 20]
        assert p.weights == [10, 20]

    def test_with_weight_validated(self):
        with pytest.raises(ValidationError):
            Portfolio.of(("A", 10)).with_weight(0, 150)

    def test_with_ticker(self):
        q = Portfolio.of(("A", 10)).with_ticker(0, "spy")
        assert q.tickers == ["SPY"]

    def test_duplicate_tickers_allowed(self):
        p = Portfolio.of(("AMD", 50), ("AMD", 50))
        assert p.tickers == ["AMD", "AMD"]

    def test_from_market_values(self):
        values = [
            ("ETHUSD", 30000),
            ("BTCUSD", 50000),
            ("SOLUSD", 15000),
            ("XRPUSD", 8000),
            ("ADAUSD", 5000),
            ("DOTUSD", 2000),
            ("LINKUSD", 1000),
            ("DOGEUSD", 500),
        ]
        p = Portfolio.from_market_values(values)
        assert p.tickers[0] == "BTCUSD"
        assert len(p) == 8
        assert p.holdings[0].weight == 44.8
        assert p.total_weight == pytest.approx(100, abs=0.5)

    def test_from_market_values_caps_and_filters(self):
        values = [("A", 1000), ("B", 900), ("C", 800), ("DUST", 50)]
        assert Portfolio.from_market_values(values, max_assets=2).tickers == ["A", "B"]
        assert Portfolio.from_market_values(values).tickers == ["A", "B", "C"]

    def test_from_market_values_nothing_meaningful(self):
        assert len(Portfolio.from_market_values([("DUST", 10)])) == 0


class TestPriceRecord:
    def test_negative_close_rejected(self):
        with pytest.raises(ValidationError):
            PriceRecord(date="2025-01-02", close=-1)

    def test_iso_timestamp(self):
        r = PriceRecord(date="2025-01-02T05:00:00Z", close=1)
        assert r.date == dt.date(2025, 1, 2)


class TestAnalysisResult:
    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            AnalysisResult(
                matrix=CorrelationMatrix(),
                beta=1.0,
                fragility_score=101,
                avg_correlation=1.0,
                benchmark="SPY",
            )

    def test_synthetic_advisory(self):
        r = AnalysisResult(
            matrix=CorrelationMatrix(),
            beta=1.0,
            fragility_score=50,
            avg_correlation=0.25,
            benchmark="SPY",
            data_quality="Demo mode",
        )
        assert r.uses_synthetic_data is True
