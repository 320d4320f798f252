from __future__ import annotations

import operator
from typing import Sequence

import numpy as np
import numpy.typing as npt

from discrete_information import config
from discrete_information.core_utils.errors import (
    LengthMismatchError,
    OutOfRangeError,
)


def as_code_array(samples: npt.ArrayLike, dimension: int = 0) -> np.ndarray:
    """Convert a sample sequence to a one-dimensional integer code array.

    Parameters
    ----------
    samples
        Sequence of zero-based category codes.
    dimension
        Position of the sequence in the calling histogram, used in messages.

    Returns
    -------
    np.ndarray
        Codes as a fresh array of ``config.COUNT_DTYPE``.

    Raises
    ------
    TypeError
        If the samples are not integer (or boolean) valued.
    ValueError
        If the samples are not one-dimensional.
    """
    codes = np.asarray(samples)
    if codes.ndim != 1:
        raise ValueError(
            f"Samples for dimension {dimension} must be one-dimensional, "
            f"got shape {codes.shape}."
        )

    # An empty list comes through as float64; there is nothing to misread.
    if codes.size == 0:
        return np.zeros(0, dtype=config.COUNT_DTYPE)

    if codes.dtype.kind not in "iub":
        raise TypeError(
            f"Samples for dimension {dimension} must be integer category codes, "
            f"got dtype {codes.dtype}."
        )

    return codes.astype(config.COUNT_DTYPE, copy=True)


def as_bin_count(nbins: int, dimension: int = 0) -> int:
    """Validate a declared bin count and return it as a plain int.

    Raises
    ------
    TypeError
        If ``nbins`` is not an integer.
    ValueError
        If ``nbins`` is negative.
    """
    try:
        count = operator.index(nbins)
    except TypeError:
        raise TypeError(
            f"Bin count for dimension {dimension} must be an integer, got {nbins!r}."
        ) from None

    if count < 0:
        raise ValueError(
            f"Bin count for dimension {dimension} must be non-negative, got {count}."
        )
    return count


def check_equal_length(code_arrays: Sequence[np.ndarray]) -> int:
    """Return the shared length of aligned code arrays.

    Raises
    ------
    LengthMismatchError
        If the arrays do not all have the same length.
    """
    lengths = tuple(arr.shape[0] for arr in code_arrays)
    if len(set(lengths)) > 1:
        raise LengthMismatchError(lengths)
    return lengths[0] if lengths else 0


def check_codes_in_range(codes: np.ndarray, nbins: int, dimension: int = 0) -> None:
    """Ensure every code lies in ``[0, nbins)``.

    Raises
    ------
    OutOfRangeError
        Reporting the dimension, its bin count and the first offending code.
    """
    out_of_range = (codes < 0) | (codes >= nbins)
    if np.any(out_of_range):
        first_bad = codes[np.flatnonzero(out_of_range)[0]]
        raise OutOfRangeError(dimension=dimension, nbins=nbins, value=first_bad)


__all__ = [
    "as_code_array",
    "as_bin_count",
    "check_equal_length",
    "check_codes_in_range",
]
