"""Mutual-information summaries over integer-coded pandas DataFrames.

Every column holds zero-based category codes for one variable; rows are
aligned samples. Used for dependency screening and feature selection.
"""

from __future__ import annotations

import logging
from typing import Mapping

import numpy as np
import pandas as pd

from discrete_information.binning.probability import prob1d, prob2d, prob3d

from .entropy import entropy
from .mutual_information import conditional_mutual_information, mutual_information

logger = logging.getLogger(__name__)


def infer_nbins(frame: pd.DataFrame) -> pd.Series:
    """Smallest bin count per column that fits every code (max code + 1)."""
    nbins = {}
    for column in frame.columns:
        values = frame[column].to_numpy()
        nbins[column] = int(values.max()) + 1 if values.size else 0
    return pd.Series(nbins, dtype=np.int64, name="nbins")


def _resolve_nbins(
    frame: pd.DataFrame, nbins: Mapping[str, int] | None
) -> dict[str, int]:
    resolved = infer_nbins(frame).to_dict()
    if nbins is not None:
        resolved.update({column: int(n) for column, n in nbins.items()})
    return resolved


def _require_column(frame: pd.DataFrame, column: str, role: str) -> None:
    if column not in frame.columns:
        raise KeyError(f"Missing {role} column {column!r} in dataframe.")


def mutual_information_matrix(
    frame: pd.DataFrame, nbins: Mapping[str, int] | None = None
) -> pd.DataFrame:
    """Pairwise mutual information between all columns.

    Parameters
    ----------
    frame
        Integer-coded samples, one column per variable.
    nbins
        Optional bin counts per column; columns not listed use
        :func:`infer_nbins`.

    Returns
    -------
    pd.DataFrame
        Symmetric matrix of I(Xi;Xj) in nats, with H(Xi) on the diagonal.
    """
    columns = list(frame.columns)
    bins = _resolve_nbins(frame, nbins)
    matrix = pd.DataFrame(
        np.zeros((len(columns), len(columns))), index=columns, columns=columns
    )

    for i, a in enumerate(columns):
        matrix.loc[a, a] = entropy(prob1d(frame[a].to_numpy(), bins[a]))
        for b in columns[i + 1 :]:
            value = mutual_information(
                prob2d(frame[a].to_numpy(), frame[b].to_numpy(), bins[a], bins[b])
            )
            matrix.loc[a, b] = value
            matrix.loc[b, a] = value

    logger.info("Computed pairwise mutual information for %d columns.", len(columns))
    return matrix


def rank_features(
    frame: pd.DataFrame,
    target: str,
    conditioning: str | None = None,
    nbins: Mapping[str, int] | None = None,
) -> pd.Series:
    """Rank columns by their information about ``target``.

    Computes I(feature; target), or I(feature; target | conditioning) when a
    conditioning column is given, for every other column.

    Returns
    -------
    pd.Series
        Scores in nats indexed by feature name, sorted descending.

    Raises
    ------
    KeyError
        If ``target`` or ``conditioning`` is not a column of ``frame``.
    """
    _require_column(frame, target, "target")
    if conditioning is not None:
        _require_column(frame, conditioning, "conditioning")

    bins = _resolve_nbins(frame, nbins)
    features = [c for c in frame.columns if c not in (target, conditioning)]
    target_codes = frame[target].to_numpy()

    scores = {}
    for feature in features:
        codes = frame[feature].to_numpy()
        if conditioning is None:
            p_xy = prob2d(codes, target_codes, bins[feature], bins[target])
            scores[feature] = mutual_information(p_xy)
        else:
            p_xyz = prob3d(
                codes,
                target_codes,
                frame[conditioning].to_numpy(),
                bins[feature],
                bins[target],
                bins[conditioning],
            )
            scores[feature] = conditional_mutual_information(p_xyz)

    name = (
        "mutual_information"
        if conditioning is None
        else "conditional_mutual_information"
    )
    ranking = pd.Series(scores, dtype=float, name=name).sort_values(ascending=False)
    logger.info("Ranked %d features against target %r.", len(ranking), target)
    return ranking


__all__ = ["infer_nbins", "mutual_information_matrix", "rank_features"]
