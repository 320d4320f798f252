"""Histogram construction for integer-coded categorical samples.

Each aligned position across the supplied sequences addresses one cell of the
histogram tensor, which is incremented once per position.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import numpy.typing as npt

from discrete_information import config
from discrete_information.core_utils.data_utils import (
    as_bin_count,
    as_code_array,
    check_codes_in_range,
    check_equal_length,
)

logger = logging.getLogger(__name__)


def histogramdd_codes(
    sequences: Sequence[npt.ArrayLike], nbins: Sequence[int]
) -> np.ndarray:
    """
    Count occurrences of code tuples across aligned sample sequences.

    Parameters
    ----------
    sequences : Sequence[ArrayLike]
        One sample sequence per dimension, all of equal length.
    nbins : Sequence[int]
        Declared bin count per dimension.

    Returns
    -------
    np.ndarray
        Integer tensor of shape ``tuple(nbins)`` whose entries sum to the
        shared sequence length.

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length. Checked before any counting.
    OutOfRangeError
        If a code in dimension ``d`` is negative or not less than ``nbins[d]``.
    """
    if len(sequences) != len(nbins):
        raise ValueError(
            f"Expected one bin count per sequence, got {len(sequences)} sequences "
            f"and {len(nbins)} bin counts."
        )

    codes = [as_code_array(seq, dimension=d) for d, seq in enumerate(sequences)]
    shape = tuple(as_bin_count(n, dimension=d) for d, n in enumerate(nbins))
    n_samples = check_equal_length(codes)

    for dimension, (dim_codes, dim_bins) in enumerate(zip(codes, shape)):
        check_codes_in_range(dim_codes, dim_bins, dimension=dimension)

    n_cells = int(np.prod(shape, dtype=np.int64))
    if n_samples == 0:
        counts = np.zeros(n_cells, dtype=config.COUNT_DTYPE)
    else:
        # Row-major flat index of every sample's cell, then one bincount pass.
        flat_index = np.ravel_multi_index(tuple(codes), shape)
        counts = np.bincount(flat_index, minlength=n_cells).astype(
            config.COUNT_DTYPE, copy=False
        )

    logger.debug("Built histogram of shape %s from %d samples.", shape, n_samples)
    return counts.reshape(shape)


def hist1d(seq: npt.ArrayLike, nbins: int) -> np.ndarray:
    """Count the events in each bin of a single code sequence."""
    return histogramdd_codes([seq], [nbins])


def hist2d(
    seq_a: npt.ArrayLike, seq_b: npt.ArrayLike, nbins_a: int, nbins_b: int
) -> np.ndarray:
    """Count joint events of two equal-length code sequences, indexed (a, b)."""
    return histogramdd_codes([seq_a, seq_b], [nbins_a, nbins_b])


def hist3d(
    seq_a: npt.ArrayLike,
    seq_b: npt.ArrayLike,
    seq_c: npt.ArrayLike,
    nbins_a: int,
    nbins_b: int,
    nbins_c: int,
) -> np.ndarray:
    """Count joint events of three equal-length code sequences, indexed (a, b, c)."""
    return histogramdd_codes([seq_a, seq_b, seq_c], [nbins_a, nbins_b, nbins_c])


__all__ = ["histogramdd_codes", "hist1d", "hist2d", "hist3d"]
