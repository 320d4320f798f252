r"""Shannon entropy of discrete probability tensors, in nats.

$$ H(X_1, \ldots, X_n) = - \sum p(x_1, \ldots, x_n) \log p(x_1, \ldots, x_n) $$

Joint entropy does not depend on how cells are arranged, so a single
reduction over the flattened cells serves tensors of every rank.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..terms import safe_log_terms


def _cell_entropy(cells: np.ndarray) -> float:
    """Entropy of an ordered sequence of cell probabilities."""
    return float(-np.sum(safe_log_terms(cells, (cells,))))


def entropy(p: npt.ArrayLike) -> float:
    """
    Entropy H(X) of a probability vector.

    Parameters
    ----------
    p : ArrayLike
        Probabilities p(x), non-negative and summing to 1. Not validated.

    Returns
    -------
    float
        Entropy in nats. Zero cells contribute nothing.

    Examples
    --------
    >>> entropy([0.5, 0.5])
    0.6931471805599453
    """
    return _cell_entropy(np.asarray(p, dtype=float).reshape(-1))


def joint_entropy(p: npt.ArrayLike) -> float:
    """
    Joint entropy of a probability tensor of any rank.

    Parameters
    ----------
    p : ArrayLike
        Joint probabilities; a vector, matrix, or higher-rank tensor.

    Returns
    -------
    float
        Entropy of the flattened cells in nats.

    Examples
    --------
    >>> joint_entropy([[0.5, 0.0], [0.25, 0.25]])
    1.0397207708399179
    """
    return _cell_entropy(np.ravel(np.asarray(p, dtype=float)))


__all__ = ["entropy", "joint_entropy"]
