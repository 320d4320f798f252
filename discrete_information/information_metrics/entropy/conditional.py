"""Conditional entropy H(X|Y) from a joint probability matrix."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..terms import align_marginal, marginal, safe_log_terms


def conditional_entropy(p_xy: npt.ArrayLike) -> float:
    """
    Conditional entropy H(X|Y) of a 2-D joint distribution indexed (x, y).

    H(X|Y) = - sum_{x,y} p(x,y) * log( p(x,y) / p(y) )

    Cells where p(x,y) or p(y) is zero contribute nothing.

    Examples
    --------
    >>> conditional_entropy([[0.5, 0.0], [0.25, 0.25]])
    0.4773856262211097
    """
    joint = np.asarray(p_xy, dtype=float)
    p_y = align_marginal(marginal(joint, (1,)), (1,), joint.ndim)
    return float(-np.sum(safe_log_terms(joint, (joint,), (p_y,))))


__all__ = ["conditional_entropy"]
