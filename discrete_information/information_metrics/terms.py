r"""Shared building blocks for the information measures.

Every measure is a sum of terms of the form
$$ w \cdot \log \left( \frac{a_1 \cdots a_n}{b_1 \cdots b_m} \right) $$
evaluated cell by cell over a joint probability tensor, with marginals aligned
against that tensor.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import numpy.typing as npt


def safe_log_terms(
    weight: npt.ArrayLike,
    numerators: Sequence[npt.ArrayLike],
    denominators: Sequence[npt.ArrayLike] = (),
) -> np.ndarray:
    r"""
    Element-wise ``weight * log(prod(numerators) / prod(denominators))``.

    A cell contributes exactly 0.0 whenever any operand in that cell is 0,
    consistent with the limit $\lim_{p \to 0} p \log p = 0$. No other
    checks are made, so malformed inputs may still produce NaN or -inf.

    Parameters
    ----------
    weight : ArrayLike
        Per-cell weight, usually the joint probability.
    numerators : Sequence[ArrayLike]
        Factors of the ratio's numerator.
    denominators : Sequence[ArrayLike]
        Factors of the ratio's denominator.

    Returns
    -------
    np.ndarray
        Contributions with the broadcast shape of all operands.
    """
    operands = np.broadcast_arrays(
        np.asarray(weight, dtype=float),
        *(np.asarray(a, dtype=float) for a in numerators),
        *(np.asarray(b, dtype=float) for b in denominators),
    )
    w = operands[0]
    nums = operands[1 : 1 + len(numerators)]
    dens = operands[1 + len(numerators) :]

    valid_mask = np.ones(w.shape, dtype=bool)
    for operand in operands:
        valid_mask &= operand != 0.0

    contribution = np.zeros(w.shape, dtype=float)
    if np.any(valid_mask):
        numerator = np.ones(int(valid_mask.sum()), dtype=float)
        for factor in nums:
            numerator = numerator * factor[valid_mask]
        denominator = np.ones_like(numerator)
        for factor in dens:
            denominator = denominator * factor[valid_mask]
        contribution[valid_mask] = w[valid_mask] * np.log(numerator / denominator)

    return contribution


def _normalize_axes(keep_axes: Sequence[int], ndim: int) -> tuple[int, ...]:
    axes = tuple(int(ax) for ax in keep_axes)
    if any(ax < 0 or ax >= ndim for ax in axes):
        raise ValueError(f"Axes {axes} out of range for a rank-{ndim} tensor.")
    if list(axes) != sorted(set(axes)):
        raise ValueError(f"Kept axes must be unique and increasing, got {axes}.")
    return axes


def marginal(p: npt.ArrayLike, keep_axes: Sequence[int]) -> np.ndarray:
    """
    Marginalize a joint tensor onto ``keep_axes``.

    Sums over every axis not listed, so the result is indexed by the kept axes
    in their original order. For ``p[x, y, z]``, ``marginal(p, (0, 2))`` is
    ``p(x, z)``.
    """
    joint = np.asarray(p, dtype=float)
    kept = _normalize_axes(keep_axes, joint.ndim)
    summed = tuple(ax for ax in range(joint.ndim) if ax not in kept)
    return joint.sum(axis=summed)


def align_marginal(
    marginal_p: npt.ArrayLike, keep_axes: Sequence[int], ndim: int
) -> np.ndarray:
    """
    Reshape a marginal so it broadcasts against its rank-``ndim`` joint.

    The marginal's axis ``i`` is placed at joint axis ``keep_axes[i]`` and a
    singleton axis is inserted at every summed-out position, so cell
    ``(x, y, z)`` of the joint lines up with the marginal entry at the
    projection of ``(x, y, z)`` onto ``keep_axes``.
    """
    values = np.asarray(marginal_p, dtype=float)
    kept = _normalize_axes(keep_axes, ndim)
    if values.ndim != len(kept):
        raise ValueError(
            f"Marginal of rank {values.ndim} does not match kept axes {kept}."
        )

    shape = [1] * ndim
    for axis, size in zip(kept, values.shape):
        shape[axis] = size
    return values.reshape(shape)


__all__ = ["safe_log_terms", "marginal", "align_marginal"]
