from typing import Any, Protocol


class PriceSource(Protocol):
    """Protocol for daily price history providers."""

    source_name: str

    async def fetch(self, ticker: str) -> Any | None:
        """Return the raw history payload for ``ticker``, or None on failure."""
        ...

    async def aclose(self) -> None:
        ...
