"""Probability mass tensors from categorical samples.

The normalizers here are the only intended way to build the probability
tensors consumed by the information measures.
"""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from discrete_information import config
from discrete_information.binning.histogram import hist1d, hist2d, hist3d
from discrete_information.core_utils.errors import EmptyInputError

logger = logging.getLogger(__name__)

_EMPTY_INPUT_POLICIES = ("raise", "nan")


def _resolve_empty_policy(on_empty: str | None) -> str:
    policy = config.EMPTY_INPUT_POLICY if on_empty is None else on_empty
    if policy not in _EMPTY_INPUT_POLICIES:
        raise ValueError(
            f"on_empty must be one of {_EMPTY_INPUT_POLICIES}, got {policy!r}."
        )
    return policy


def normalize(histogram: npt.ArrayLike, on_empty: str | None = None) -> np.ndarray:
    """
    Divide a histogram by its total count.

    Parameters
    ----------
    histogram : ArrayLike
        Non-negative counts of any rank.
    on_empty : {"raise", "nan"} or None
        Behaviour when the total count is zero. ``None`` uses
        ``config.EMPTY_INPUT_POLICY``.

    Returns
    -------
    np.ndarray
        Float tensor of the same shape whose entries sum to 1. Under the
        ``"nan"`` policy an empty histogram yields a tensor of NaN.

    Raises
    ------
    EmptyInputError
        If the total count is zero and the policy is ``"raise"``.
    """
    policy = _resolve_empty_policy(on_empty)
    counts = np.asarray(histogram, dtype=config.PROBABILITY_DTYPE)
    total = counts.sum()

    if total == 0:
        if policy == "raise":
            raise EmptyInputError(
                f"Cannot normalize a histogram of shape {counts.shape} with zero "
                "total count; supply at least one sample."
            )
        logger.debug("Normalizing empty histogram of shape %s to NaN.", counts.shape)
        return np.full(counts.shape, np.nan, dtype=config.PROBABILITY_DTYPE)

    return counts / total


def prob1d(seq: npt.ArrayLike, nbins: int, on_empty: str | None = None) -> np.ndarray:
    """
    Probability of each category in a single code sequence.

    Examples
    --------
    >>> prob1d([0, 1, 2], 3)
    array([0.33333333, 0.33333333, 0.33333333])
    """
    return normalize(hist1d(seq, nbins), on_empty=on_empty)


def prob2d(
    seq_a: npt.ArrayLike,
    seq_b: npt.ArrayLike,
    nbins_a: int,
    nbins_b: int,
    on_empty: str | None = None,
) -> np.ndarray:
    """Joint probability of two equal-length code sequences, indexed (a, b)."""
    return normalize(hist2d(seq_a, seq_b, nbins_a, nbins_b), on_empty=on_empty)


def prob3d(
    seq_a: npt.ArrayLike,
    seq_b: npt.ArrayLike,
    seq_c: npt.ArrayLike,
    nbins_a: int,
    nbins_b: int,
    nbins_c: int,
    on_empty: str | None = None,
) -> np.ndarray:
    """Joint probability of three equal-length code sequences, indexed (a, b, c)."""
    return normalize(
        hist3d(seq_a, seq_b, seq_c, nbins_a, nbins_b, nbins_c), on_empty=on_empty
    )


__all__ = ["normalize", "prob1d", "prob2d", "prob3d"]
