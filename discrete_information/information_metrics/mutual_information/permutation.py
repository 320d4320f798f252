"""Permutation tests for (conditional) independence using MI and CMI.

Provides statistical testing utilities for assessing independence of
categorical variables using permutation-based hypothesis tests.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np
import numpy.typing as npt
from joblib import Parallel, delayed

from discrete_information import config
from discrete_information.binning.histogram import hist2d, hist3d
from discrete_information.binning.probability import normalize, prob2d, prob3d
from discrete_information.core_utils.data_utils import as_code_array

from .cmi import conditional_mutual_information
from .mi import mutual_information

logger = logging.getLogger(__name__)


def _perm_mi_batch(
    x: np.ndarray,
    y: np.ndarray,
    nbins: tuple[int, int],
    *,
    K: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Produce K permuted MI values.

    Under the null hypothesis X ⟂ Y, shuffling Y preserves both marginals
    while breaking the X-Y dependence.
    """
    if K <= 0 or y.size == 0:
        return np.zeros(0, dtype=float)

    Yp = rng.permuted(np.repeat(y[None, :], K, axis=0), axis=1)
    return np.array(
        [mutual_information(prob2d(x, row, *nbins)) for row in Yp], dtype=float
    )


def _perm_cmi_batch(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    nbins: tuple[int, int, int],
    *,
    K: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Produce K permuted CMI values.

    Under the null hypothesis X ⟂ Y | Z (conditional independence),
    shuffling Y within each Z stratum preserves both P(X|Z) and P(Y|Z)
    while breaking the X-Y dependence.
    """
    if K <= 0 or y.size == 0:
        return np.zeros(0, dtype=float)

    # Create K copies of y
    Yp = np.repeat(y[None, :], K, axis=0)

    # Permute within each Z stratum
    for z_val in np.unique(z):
        idx = np.flatnonzero(z == z_val)
        if idx.size > 1:
            Yp[:, idx] = rng.permuted(Yp[:, idx], axis=1)

    return np.array(
        [conditional_mutual_information(prob3d(x, row, z, *nbins)) for row in Yp],
        dtype=float,
    )


def _process_batch(
    batch_fn: Callable[..., np.ndarray],
    k: int,
    seed: np.random.SeedSequence,
    observed: float,
    args: tuple,
) -> int:
    """Count permuted statistics at least as large as the observed one."""
    # Local RNG for this batch
    local_rng = np.random.default_rng(seed)
    permuted_values = batch_fn(*args, K=k, rng=local_rng)
    return int(np.sum(permuted_values >= observed - config.PERMUTATION_TOLERANCE))


def _run_batches(
    batch_fn: Callable[..., np.ndarray],
    args: tuple,
    observed: float,
    permutations: int,
    random_state: int | None,
    batch_size: int,
    n_jobs: int | None,
) -> float:
    """Split permutations into seeded batches, run them, return the p-value."""
    # Use SeedSequence for robust parallel RNG
    seed_seq = np.random.SeedSequence(random_state)

    effective_batch_size = max(1, int(batch_size))
    n_full_batches = permutations // effective_batch_size
    remainder = permutations % effective_batch_size

    batch_sizes = [effective_batch_size] * n_full_batches
    if remainder > 0:
        batch_sizes.append(remainder)

    batch_seeds = seed_seq.spawn(len(batch_sizes))

    results = Parallel(n_jobs=n_jobs)(
        delayed(_process_batch)(batch_fn, k, seed, observed, args)
        for k, seed in zip(batch_sizes, batch_seeds)
    )

    count_greater_equal = sum(results)

    # Compute p-value with continuity correction
    return float((1.0 + count_greater_equal) / (permutations + 1.0))


def permutation_test_mutual_information(
    x: npt.ArrayLike,
    y: npt.ArrayLike,
    nbins_x: int,
    nbins_y: int,
    permutations: int | None = None,
    random_state: int | None = None,
    batch_size: int | None = None,
    n_jobs: int | None = None,
) -> tuple[float, float]:
    """
    Batched permutation test for I(X;Y).

    Tests the null hypothesis H0: X ⟂ Y (independence).

    Parameters
    ----------
    x, y : ArrayLike
        Equal-length category code sequences.
    nbins_x, nbins_y : int
        Declared bin counts for x and y.
    permutations : int | None
        Number of permutations; ``None`` uses ``config.N_PERMUTATIONS``.
    random_state : int | None
        Seed for reproducibility. Results do not depend on ``n_jobs``.
    batch_size : int | None
        Permutations per batch; ``None`` uses ``config.PERMUTATION_BATCH_SIZE``.
    n_jobs : int | None
        Number of joblib workers. None means 1, -1 means all processors.

    Returns
    -------
    observed_mi : float
        Observed MI in nats.
    p_value : float
        Permutation p-value.

    Notes
    -----
    Returns p=1.0 for empty data or ``permutations <= 0`` as these provide no
    evidence against independence.
    """
    permutations = config.N_PERMUTATIONS if permutations is None else permutations
    batch_size = config.PERMUTATION_BATCH_SIZE if batch_size is None else batch_size

    counts = hist2d(x, y, nbins_x, nbins_y)
    if counts.sum() == 0:
        return 0.0, 1.0

    observed_mi = mutual_information(normalize(counts))
    if permutations <= 0:
        return observed_mi, 1.0

    x_codes = as_code_array(x, dimension=0)
    y_codes = as_code_array(y, dimension=1)

    p_value = _run_batches(
        _perm_mi_batch,
        (x_codes, y_codes, (counts.shape[0], counts.shape[1])),
        observed_mi,
        permutations,
        random_state,
        batch_size,
        n_jobs,
    )
    logger.info(
        "Permutation test I(X;Y): observed=%.6g nats, p=%.4g over %d permutations.",
        observed_mi,
        p_value,
        permutations,
    )
    return observed_mi, p_value


def permutation_test_conditional_mutual_information(
    x: npt.ArrayLike,
    y: npt.ArrayLike,
    z: npt.ArrayLike,
    nbins_x: int,
    nbins_y: int,
    nbins_z: int,
    permutations: int | None = None,
    random_state: int | None = None,
    batch_size: int | None = None,
    n_jobs: int | None = None,
) -> tuple[float, float]:
    """
    Batched, stratified permutation test for I(X;Y|Z).

    Tests the null hypothesis H0: X ⟂ Y | Z (conditional independence).
    Uses stratified permutation within Z values to preserve marginals.

    Parameters
    ----------
    x, y, z : ArrayLike
        Equal-length category code sequences; z is the conditioning variable.
    nbins_x, nbins_y, nbins_z : int
        Declared bin counts.
    permutations, random_state, batch_size, n_jobs
        As in :func:`permutation_test_mutual_information`.

    Returns
    -------
    observed_cmi : float
        Observed CMI in nats.
    p_value : float
        Permutation p-value.

    Notes
    -----
    Returns p=1.0 for edge cases (empty data, no stratum with more than one
    sample, ``permutations <= 0``).
    """
    permutations = config.N_PERMUTATIONS if permutations is None else permutations
    batch_size = config.PERMUTATION_BATCH_SIZE if batch_size is None else batch_size

    counts = hist3d(x, y, z, nbins_x, nbins_y, nbins_z)
    if counts.sum() == 0:
        return 0.0, 1.0

    observed_cmi = conditional_mutual_information(normalize(counts))
    if permutations <= 0:
        return observed_cmi, 1.0

    x_codes = as_code_array(x, dimension=0)
    y_codes = as_code_array(y, dimension=1)
    z_codes = as_code_array(z, dimension=2)

    # We need at least one stratum with > 1 sample to do any permutation
    _, stratum_sizes = np.unique(z_codes, return_counts=True)
    if np.all(stratum_sizes <= 1):
        return observed_cmi, 1.0

    p_value = _run_batches(
        _perm_cmi_batch,
        (x_codes, y_codes, z_codes, counts.shape),
        observed_cmi,
        permutations,
        random_state,
        batch_size,
        n_jobs,
    )
    logger.info(
        "Permutation test I(X;Y|Z): observed=%.6g nats, p=%.4g over %d permutations.",
        observed_cmi,
        p_value,
        permutations,
    )
    return observed_cmi, p_value


__all__ = [
    "permutation_test_mutual_information",
    "permutation_test_conditional_mutual_information",
]
