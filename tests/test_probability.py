from __future__ import annotations

import numpy as np
import pytest

from discrete_information import config
from discrete_information.binning.probability import normalize, prob1d, prob2d, prob3d
from discrete_information.core_utils.errors import (
    EmptyInputError,
    LengthMismatchError,
    OutOfRangeError,
)


def test_prob1d_uniform() -> None:
    prob = prob1d([0, 1, 2], 3)
    np.testing.assert_array_equal(prob, np.full(3, 1.0 / 3.0))
    assert prob.dtype == np.float64


def test_prob1d_missing_bin_is_exactly_zero() -> None:
    prob = prob1d([0, 1, 2], 4)
    np.testing.assert_array_equal(prob[:3], np.full(3, 1.0 / 3.0))
    assert prob[3] == 0.0


def test_prob2d_basic() -> None:
    prob = prob2d([0, 1], [0, 1], 2, 2)
    np.testing.assert_array_equal(prob, [[0.5, 0.0], [0.0, 0.5]])


def test_prob2d_missing_row() -> None:
    prob = prob2d([0, 1], [0, 1], 3, 2)
    assert prob.shape == (3, 2)
    np.testing.assert_array_equal(prob, [[0.5, 0.0], [0.0, 0.5], [0.0, 0.0]])


def test_prob3d_basic() -> None:
    prob = prob3d([0, 1], [0, 1], [0, 1], 2, 2, 2)
    expected = [
        [[0.5, 0.0], [0.0, 0.0]],
        [[0.0, 0.0], [0.0, 0.5]],
    ]
    assert prob.shape == (2, 2, 2)
    np.testing.assert_array_equal(prob, expected)


def test_probabilities_sum_to_one(rng: np.random.Generator) -> None:
    a = rng.integers(0, 4, 333)
    b = rng.integers(0, 3, 333)
    c = rng.integers(0, 2, 333)
    assert prob3d(a, b, c, 4, 3, 2).sum() == pytest.approx(1.0, abs=1e-12)
    assert np.all(prob3d(a, b, c, 4, 3, 2) >= 0.0)


def test_histogram_errors_propagate() -> None:
    with pytest.raises(OutOfRangeError):
        prob1d([0, 1, 2], 2)
    with pytest.raises(LengthMismatchError):
        prob2d([0, 1], [0], 2, 2)
    with pytest.raises(LengthMismatchError):
        prob3d([0, 1], [0, 1], [0], 2, 2, 2)


def test_empty_input_raises_by_default() -> None:
    assert config.EMPTY_INPUT_POLICY == "raise"
    with pytest.raises(EmptyInputError, match="zero total count"):
        prob1d([], 3)


def test_empty_input_nan_policy() -> None:
    prob = prob2d([], [], 2, 3, on_empty="nan")
    assert prob.shape == (2, 3)
    assert np.all(np.isnan(prob))


def test_empty_input_policy_follows_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "EMPTY_INPUT_POLICY", "nan")
    assert np.all(np.isnan(prob1d([], 2)))


def test_unknown_empty_policy_rejected() -> None:
    with pytest.raises(ValueError, match="on_empty"):
        prob1d([0, 1], 2, on_empty="ignore")


def test_normalize_counts() -> None:
    np.testing.assert_allclose(
        normalize([[1, 3], [0, 4]]), [[0.125, 0.375], [0.0, 0.5]]
    )
