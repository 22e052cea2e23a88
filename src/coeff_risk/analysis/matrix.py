from collections.abc import Sequence

from coeff_risk.analysis.stats import correlation
from coeff_risk.models.result import CorrelationMatrix


def correlation_matrix(
    tickers: Sequence[str], returns: Sequence[Sequence[float]]
) -> CorrelationMatrix:
    """Pairwise correlation of per-position return series.

    Every ordered pair is evaluated, so repeated tickers get their own
    row and column.
    """
    values = [[correlation(ri, rj) for rj in returns] for ri in returns]
    return CorrelationMatrix(tickers=list(tickers), values=values)
