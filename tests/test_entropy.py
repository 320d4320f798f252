from __future__ import annotations

import numpy as np
import pytest
from scipy.stats import entropy as scipy_entropy

from discrete_information.binning.probability import prob1d, prob2d
from discrete_information.information_metrics.entropy import (
    conditional_entropy,
    entropy,
    joint_entropy,
)
from discrete_information.information_metrics.terms import marginal

N_ITER = 200
ARRAY_SIZE = 100


@pytest.mark.parametrize(
    "k, expected",
    [
        (2, 0.6931471805599453),
        (3, 1.0986122886681096),
        (4, 1.38629436111989061),
    ],
)
def test_entropy_uniform_is_log_k(k: int, expected: float) -> None:
    p = np.full(k, 1.0 / k)
    assert entropy(p) == pytest.approx(expected, rel=1e-15)
    assert entropy(p) == pytest.approx(np.log(k), rel=1e-15)


def test_entropy_from_samples() -> None:
    assert entropy(prob1d([0, 0, 1, 1], 2)) == pytest.approx(0.6931471805599453)


def test_entropy_zero_cells_contribute_nothing() -> None:
    assert entropy([1.0, 0.0, 0.0]) == 0.0
    assert entropy([0.5, 0.0, 0.5]) == pytest.approx(np.log(2))
    assert np.isfinite(entropy([0.0, 1.0]))


def test_entropy_matches_scipy(rng: np.random.Generator) -> None:
    for _ in range(20):
        p = prob1d(rng.integers(0, 5, ARRAY_SIZE), 7)
        assert entropy(p) == pytest.approx(scipy_entropy(p), rel=1e-12)


def test_entropy_is_non_negative(rng: np.random.Generator) -> None:
    for _ in range(N_ITER):
        c = rng.uniform(0.1, 0.8, ARRAY_SIZE)
        assert entropy(c / c.sum()) >= 0.0


def test_joint_entropy_reference_value() -> None:
    assert joint_entropy([[0.5, 0.0], [0.25, 0.25]]) == pytest.approx(
        1.0397207708399179, rel=1e-15
    )


@pytest.mark.parametrize(
    "shape",
    [(ARRAY_SIZE,), (2, ARRAY_SIZE), (2, 2, ARRAY_SIZE), (2, 2, 2, ARRAY_SIZE)],
)
def test_joint_entropy_any_rank(rng: np.random.Generator, shape) -> None:
    c = rng.uniform(0.1, 0.8, shape)
    p = c / c.sum()
    h = joint_entropy(p)

    assert h >= 0.0
    # Rank does not matter, only the cells do.
    assert h == pytest.approx(entropy(p.ravel()), rel=1e-14)


def test_joint_entropy_of_vector_equals_entropy(rng: np.random.Generator) -> None:
    p = prob1d(rng.integers(0, 3, ARRAY_SIZE), 4)
    assert joint_entropy(p) == pytest.approx(entropy(p), rel=1e-15)


def test_joint_entropy_bounds(rng: np.random.Generator) -> None:
    for _ in range(N_ITER):
        x = rng.integers(0, 3, ARRAY_SIZE)
        y = rng.integers(0, 3, ARRAY_SIZE)
        p_xy = prob2d(x, y, 4, 4)
        h_x = entropy(marginal(p_xy, (0,)))
        h_y = entropy(marginal(p_xy, (1,)))
        h_xy = joint_entropy(p_xy)

        # Measures: max(H(X), H(Y)) <= H(X,Y) <= H(X) + H(Y)
        assert h_xy >= max(h_x, h_y) - 1e-12
        assert h_xy <= h_x + h_y + 1e-12


def test_conditional_entropy_reference_value() -> None:
    p_xy = np.array([[0.5, 0.0], [0.25, 0.25]])
    assert conditional_entropy(p_xy) == pytest.approx(0.4773856262211097, rel=1e-15)


def test_conditional_entropy_all_zero_tensor() -> None:
    assert conditional_entropy([[0.0, 0.0], [0.0, 0.0]]) == 0.0


def test_conditional_entropy_of_determined_variable_is_zero() -> None:
    # X is a function of Y, so H(X|Y) = 0
    p_xy = prob2d([0, 1, 2, 0], [2, 0, 1, 2], 3, 3)
    assert conditional_entropy(p_xy) == pytest.approx(0.0, abs=1e-15)


def test_conditional_entropy_chain_rule(rng: np.random.Generator) -> None:
    for _ in range(N_ITER):
        x = rng.integers(0, 3, ARRAY_SIZE)
        y = rng.integers(0, 3, ARRAY_SIZE)

        p_xy = prob2d(x, y, 4, 4)
        p_yx = prob2d(y, x, 4, 4)
        p_x = prob1d(x, 4)
        p_y = prob1d(y, 4)

        h_x_given_y = conditional_entropy(p_xy)
        h_y_given_x = conditional_entropy(p_yx)
        h_xy = joint_entropy(p_xy)

        assert h_x_given_y >= 0.0
        # Measures: H(X|Y) = H(X,Y) - H(Y)
        np.testing.assert_allclose(h_x_given_y, h_xy - entropy(p_y), rtol=1e-14)
        # Measures: H(Y|X) = H(X,Y) - H(X)
        np.testing.assert_allclose(h_y_given_x, h_xy - entropy(p_x), rtol=1e-14)
