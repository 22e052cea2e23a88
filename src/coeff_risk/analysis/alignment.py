import datetime as dt
import logging
from collections.abc import Iterable

import pandas as pd

from coeff_risk.exceptions import InsufficientOverlap
from coeff_risk.models.prices import PriceSeries

logger = logging.getLogger(__name__)


def align_prices(
    series: Iterable[PriceSeries],
    lookback_days: int = 100,
    min_overlap_days: int = 30,
) -> pd.DataFrame:
    """Closes on the dates every series shares, one column per ticker.

    Rows are newest first and capped at ``lookback_days``.
    """
    closes = [pd.Series(s.prices, name=s.ticker, dtype=float) for s in series]
    if not closes:
        raise InsufficientOverlap(0, min_overlap_days)

    aligned = pd.concat(closes, axis=1, join="inner")
    aligned = aligned.sort_index(ascending=False).head(lookback_days)
    if len(aligned) < min_overlap_days:
        raise InsufficientOverlap(len(aligned), min_overlap_days)

    logger.debug(
        "Aligned %d common trading days (%s to %s)",
        len(aligned),
        aligned.index[-1],
        aligned.index[0],
    )
    return aligned


def align_calendar(
    series: Iterable[PriceSeries],
    lookback_days: int = 100,
    min_overlap_days: int = 30,
) -> list[dt.date]:
    """Dates present in every series, newest first, capped at ``lookback_days``."""
    return list(align_prices(series, lookback_days, min_overlap_days).index)
