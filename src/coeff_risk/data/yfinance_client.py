import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor

import pandas as pd
import yfinance as yf

logger = logging.getLogger(__name__)


class YFinancePriceSource:
    source_name = "yfinance"

    def __init__(
        self,
        period: str = "6mo",
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.period = period
        self._executor = executor

    def get_history(self, ticker: str) -> pd.DataFrame:
        try:
            df = yf.Ticker(ticker).history(period=self.period, interval="1d")
            if df.empty:
                logger.warning("Empty history for %s", ticker)
            return df
        except Exception:
            logger.warning("Failed to fetch history for %s", ticker)
            return pd.DataFrame()

    @staticmethod
    def to_records(df: pd.DataFrame) -> list[dict]:
        """Daily closes as ``{date, close}`` records, newest first."""
        if df.empty or "Close" not in df:
            return []
        close = df["Close"].dropna().iloc[::-1]
        return [
            {"date": pd.Timestamp(ts).date().isoformat(), "close": float(value)}
            for ts, value in close.items()
        ]

    async def fetch(self, ticker: str) -> list[dict] | None:
        loop = asyncio.get_running_loop()
        df = await loop.run_in_executor(self._executor, self.get_history, ticker)
        records = self.to_records(df)
        return records or None

    async def aclose(self) -> None:
        return None
