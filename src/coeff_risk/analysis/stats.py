"""Statistics primitives shared by the correlation, beta and fragility steps.

Standard deviation is the population form (divide by N). A series whose
spread is within floating-point noise of its magnitude counts as flat:
its standard deviation is 0 and its correlation with anything is 0.
"""

from collections.abc import Sequence

import numpy as np

FLAT_TOLERANCE = 1e-12


def is_flat(xs: Sequence[float]) -> bool:
    if len(xs) == 0:
        return True
    x = np.asarray(xs, dtype=float)
    return bool(np.ptp(x) <= FLAT_TOLERANCE * max(1.0, float(np.abs(x).max())))


def mean(xs: Sequence[float]) -> float:
    if len(xs) == 0:
        return 0.0
    return float(np.mean(np.asarray(xs, dtype=float)))


def stddev(xs: Sequence[float]) -> float:
    if is_flat(xs):
        return 0.0
    return float(np.std(np.asarray(xs, dtype=float), ddof=0))


def correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Pearson correlation of two equal-length samples."""
    if len(xs) != len(ys):
        raise ValueError(
            f"correlation needs equal-length samples, got {len(xs)} and {len(ys)}"
        )
    if is_flat(xs) or is_flat(ys):
        return 0.0
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    dx = x - x.mean()
    dy = y - y.mean()
    den = np.sqrt(np.sum(dx * dx) * np.sum(dy * dy))
    return float(np.sum(dx * dy) / den)
