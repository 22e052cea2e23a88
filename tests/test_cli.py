import sys

import pytest

from coeff_risk.cli import build_config, build_parser, main


class TestParser:
    def test_analyze_holdings(self):
        args = build_parser().parse_args(["analyze", "BTCUSD:40", "AMD:60"])
        assert args.holdings == ["BTCUSD:40", "AMD:60"]
        assert args.benchmark == "SPY"
        assert args.lookback == 100
        assert args.source is None

    def test_source_choice(self):
        args = build_parser().parse_args(["analyze", "AMD:100", "--source", "yfinance"])
        assert args.source == "yfinance"


class TestBuildConfig:
    def test_env_key(self, monkeypatch):
        monkeypatch.setenv("FMP_API_KEY", "from-env")
        monkeypatch.delenv("COEFF_PROXY_URL", raising=False)
        args = build_parser().parse_args(["analyze", "AMD:100", "--benchmark", "qqq"])
        config = build_config(args)
        assert config.fmp_api_key == "from-env"
        assert config.benchmark == "QQQ"

    def test_proxy_override(self, monkeypatch):
        monkeypatch.delenv("COEFF_PROXY_URL", raising=False)
        args = build_parser().parse_args(
            ["analyze", "AMD:100", "--proxy-url", "https://p.example.com"]
        )
        assert build_config(args).proxy_url == "https://p.example.com"


class TestMain:
    def test_weight_overflow_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["coeff", "AAA:60", "BBB:50"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 1
        assert "100%" in capsys.readouterr().out

    def test_no_args_prints_help(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["coeff"])
        with pytest.raises(SystemExit):
            main()
