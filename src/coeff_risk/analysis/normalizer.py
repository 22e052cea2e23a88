import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from coeff_risk.exceptions import DataUnavailable
from coeff_risk.models.prices import (
    HistoricalPayload,
    PayloadMeta,
    PricePayload,
    PriceRecord,
    PriceSeries,
    Quote,
    RecordsPayload,
)

logger = logging.getLogger(__name__)


def _parse_meta(meta: Mapping) -> PayloadMeta | None:
    """Validate a quote block, keeping only the synthetic flag if it is malformed."""
    try:
        return PayloadMeta.model_validate(dict(meta))
    except ValidationError:
        logger.debug("Ignoring malformed meta block: %s", dict(meta))
    if meta.get("isSynthetic"):
        return PayloadMeta(is_synthetic=True)
    return None


def parse_payload(raw: Any) -> PricePayload:
    """Resolve a raw data-layer response into one of the payload shapes.

    Anything that is neither a list nor an object becomes an empty
    payload, which normalization then reports as unavailable.
    """
    if isinstance(raw, RecordsPayload | HistoricalPayload):
        return raw
    if isinstance(raw, list | tuple):
        return RecordsPayload(records=list(raw))
    if isinstance(raw, Mapping):
        historical = raw.get("historical")
        meta = raw.get("meta")
        return HistoricalPayload(
            historical=list(historical) if isinstance(historical, list) else [],
            meta=_parse_meta(meta) if isinstance(meta, Mapping) else None,
        )
    return RecordsPayload()


def _parse_records(ticker: str, rows: list[Any]) -> list[PriceRecord]:
    records: list[PriceRecord] = []
    skipped = 0
    for row in rows:
        try:
            records.append(PriceRecord.model_validate(row))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d malformed records for %s", skipped, ticker)
    return records


def normalize_payload(
    ticker: str, raw: Any, base_currency: str = "USD"
) -> PriceSeries:
    """Turn one ticker's payload into a date-keyed price series.

    Later records for the same date overwrite earlier ones. Without a
    quote block the latest quote is the most recent close.
    """
    payload = parse_payload(raw)
    if isinstance(payload, RecordsPayload):
        rows, meta = payload.records, None
    else:
        rows, meta = payload.historical, payload.meta

    records = _parse_records(ticker, rows)
    if not records:
        raise DataUnavailable(ticker)

    prices = {r.date: r.close for r in records}

    if meta is not None and meta.current_price is not None:
        quote = Quote(
            price=meta.current_price,
            currency=meta.currency or base_currency,
        )
    else:
        quote = Quote(price=prices[max(prices)], currency=base_currency)

    is_synthetic = bool(meta and meta.is_synthetic)
    if is_synthetic:
        logger.info("%s is using synthetic price data", ticker)

    return PriceSeries(
        ticker=ticker,
        prices=prices,
        latest_quote=quote,
        is_synthetic=is_synthetic,
    )
