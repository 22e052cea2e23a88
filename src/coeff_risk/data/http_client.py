import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from coeff_risk.config import DEFAULT_PROXY_URL, FMP_HISTORY_URL

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {"Accept": "application/json"}


class _HTTPPriceSource(ABC):
    source_name: str = "http"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=DEFAULT_HEADERS,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @abstractmethod
    def _request_args(self, ticker: str) -> tuple[str, dict[str, str]]:
        """URL and query parameters for one ticker's history."""
        ...

    async def fetch(self, ticker: str) -> Any | None:
        url, params = self._request_args(ticker)
        try:
            resp = await self.client.get(url, params=params)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "%s returned %d for %s",
                self.source_name,
                e.response.status_code,
                ticker,
            )
        except httpx.HTTPError:
            logger.warning(
                "Failed to fetch history for %s from %s", ticker, self.source_name
            )
        except ValueError:
            logger.warning("Invalid JSON for %s from %s", ticker, self.source_name)
        return None


class ProxyPriceSource(_HTTPPriceSource):
    """Price proxy that answers ``GET {url}?ticker=T``."""

    source_name = "proxy"

    def __init__(
        self,
        proxy_url: str = DEFAULT_PROXY_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport)
        self.proxy_url = proxy_url

    def _request_args(self, ticker: str) -> tuple[str, dict[str, str]]:
        return self.proxy_url, {"ticker": ticker}


class FMPPriceSource(_HTTPPriceSource):
    """Financial Modeling Prep daily history endpoint."""

    source_name = "fmp"

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport)
        self.api_key = api_key

    def _request_args(self, ticker: str) -> tuple[str, dict[str, str]]:
        return f"{FMP_HISTORY_URL}/{ticker}", {"apikey": self.api_key}
