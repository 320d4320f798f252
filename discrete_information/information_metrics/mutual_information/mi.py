r"""Mutual Information (MI) of a joint probability matrix.

Computes, in nats:
$$ I(X;Y) = \sum_{x,y} p(x,y) \log \left( \frac{p(x,y)}{p(x) p(y)} \right) $$
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..terms import align_marginal, marginal, safe_log_terms


def mutual_information(p_xy: npt.ArrayLike) -> float:
    """
    Mutual information I(X;Y) of a 2-D joint distribution indexed (x, y).

    Parameters
    ----------
    p_xy : ArrayLike
        Joint probabilities p(x,y). Not validated; a malformed tensor gives a
        meaningless (possibly NaN) result rather than an error.

    Returns
    -------
    float
        MI in nats, never below zero. Symmetric: ``mutual_information(p.T)``
        gives the same value.
    """
    joint = np.asarray(p_xy, dtype=float)

    # p(x) lines up with axis 0, p(y) with axis 1
    p_x = align_marginal(marginal(joint, (0,)), (0,), joint.ndim)
    p_y = align_marginal(marginal(joint, (1,)), (1,), joint.ndim)

    mi = np.sum(safe_log_terms(joint, (joint,), (p_x, p_y)))

    # Ensure non-negative (numerical precision); NaN from malformed input survives
    return float(np.maximum(mi, 0.0))


__all__ = ["mutual_information"]
