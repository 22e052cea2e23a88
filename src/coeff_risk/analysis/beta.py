import logging
from collections.abc import Sequence

from coeff_risk.analysis.stats import correlation, is_flat, stddev
from coeff_risk.exceptions import DegenerateVolatility

logger = logging.getLogger(__name__)


def estimate_beta(
    portfolio: Sequence[float], benchmark: Sequence[float]
) -> float:
    """Correlation scaled by the portfolio-to-benchmark volatility ratio.

    A flat benchmark leaves beta undefined and raises
    :class:`DegenerateVolatility`. A flat portfolio has correlation 0 and
    therefore beta 0.
    """
    if is_flat(benchmark):
        raise DegenerateVolatility("Benchmark")
    sigma_m = stddev(benchmark)
    sigma_p = stddev(portfolio)
    rho = correlation(portfolio, benchmark)
    logger.debug("rho=%.4f sigma_p=%.6f sigma_m=%.6f", rho, sigma_p, sigma_m)
    return rho * (sigma_p / sigma_m)
