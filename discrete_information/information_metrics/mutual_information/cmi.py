r"""Conditional Mutual Information (CMI) of a 3-D joint probability tensor.

Computes, in nats:
$$ I(X;Y|Z) = \sum_{x,y,z} p(x,y,z) \log \left(
    \frac{p(z) \, p(x,y,z)}{p(x,z) \, p(y,z)} \right) $$

The three marginals have different ranks and axis correspondences; each one
is mapped back onto the joint's (x, y, z) axes before the cell-wise sum.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..terms import align_marginal, marginal, safe_log_terms

# Joint axes retained by each marginal of p(x, y, z)
_XZ_AXES = (0, 2)
_YZ_AXES = (1, 2)
_Z_AXES = (2,)


def conditional_mutual_information(p_xyz: npt.ArrayLike) -> float:
    """
    Conditional mutual information I(X;Y|Z) of a joint indexed (x, y, z).

    Uses the marginals
    - p(x,z): sum over y
    - p(y,z): sum over x
    - p(z):   sum over x and y

    and skips every cell where any of p(x,y,z), p(x,z), p(y,z), p(z) is zero.

    Parameters
    ----------
    p_xyz : ArrayLike
        Joint probabilities, shape (n_x, n_y, n_z). Not validated.

    Returns
    -------
    float
        CMI in nats, never below zero. Equals H(X,Z) + H(Y,Z) - H(X,Y,Z) - H(Z).
    """
    joint = np.asarray(p_xyz, dtype=float)
    ndim = joint.ndim

    p_xz = align_marginal(marginal(joint, _XZ_AXES), _XZ_AXES, ndim)
    p_yz = align_marginal(marginal(joint, _YZ_AXES), _YZ_AXES, ndim)
    p_z = align_marginal(marginal(joint, _Z_AXES), _Z_AXES, ndim)

    cmi = np.sum(safe_log_terms(joint, (p_z, joint), (p_xz, p_yz)))

    # Ensure non-negative (numerical precision); NaN from malformed input survives
    return float(np.maximum(cmi, 0.0))


__all__ = ["conditional_mutual_information"]
