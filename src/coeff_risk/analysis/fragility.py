"""Fragility score: how much a portfolio's holdings move together.

Pairwise correlations are averaged with weight ``w_i * w_j`` over pairs
where both weights are positive, then passed through a square root so
that moderate correlation already scores high (0.5 maps to about 71).
A portfolio with no qualifying pair is treated as fully concentrated.
"""

import math
from collections.abc import Sequence

from coeff_risk.models.result import CorrelationMatrix


def weighted_average_correlation(
    matrix: CorrelationMatrix, weights: Sequence[float]
) -> float:
    if matrix.size != len(weights):
        raise ValueError("one weight is required per matrix row")

    weighted_sum = 0.0
    weights_sum = 0.0
    pairs = 0
    k = len(weights)
    for i in range(k):
        for j in range(i + 1, k):
            w_i = weights[i] / 100
            w_j = weights[j] / 100
            if w_i > 0 and w_j > 0:
                weighted_sum += w_i * w_j * matrix[i, j]
                weights_sum += w_i * w_j
                pairs += 1

    if pairs == 0:
        return 1.0
    if weights_sum > 0:
        return weighted_sum / weights_sum
    return 0.0


def fragility_score(avg_correlation: float) -> int:
    risk_curve = math.sqrt(avg_correlation) if avg_correlation > 0 else 0.0
    # halves round up
    score = math.floor(risk_curve * 100 + 0.5)
    return min(max(score, 0), 100)


def score_portfolio(
    matrix: CorrelationMatrix, weights: Sequence[float]
) -> tuple[float, int]:
    avg = weighted_average_correlation(matrix, weights)
    return avg, fragility_score(avg)
