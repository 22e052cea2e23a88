from collections.abc import Sequence

import numpy as np


def portfolio_returns(
    asset_returns: Sequence[Sequence[float]], weights: Sequence[float]
) -> list[float]:
    """Blend per-asset returns using percentage weights.

    Zero-weight assets stay in the product and contribute nothing.
    """
    if len(asset_returns) != len(weights):
        raise ValueError("one weight is required per return series")
    if not asset_returns:
        return []

    length = len(asset_returns[0])
    if any(len(r) != length for r in asset_returns):
        raise ValueError("return series must be aligned to the same calendar")

    returns = np.asarray(asset_returns, dtype=float).T
    return (returns @ (np.asarray(weights, dtype=float) / 100)).tolist()
