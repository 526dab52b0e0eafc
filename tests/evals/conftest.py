"""
Pathological fixtures for EVALs.

Each fixture creates an economy that targets a specific numerical weakness.
"""

import numpy as np
import pytest

from pyequilibrium import ExchangeEconomy


# =============================================================================
# CONDITIONING FIXTURES
# =============================================================================


@pytest.fixture
def near_singular_substitution_matrix():
    """Two almost identical rows; condition number around 4e13."""
    return np.array([[1.0, 1.0], [1.0, 1.0 + 1e-13]])


@pytest.fixture
def badly_scaled_substitution_matrix():
    """Invertible, condition number 1e13; Pi^T Pi has condition number 1e26."""
    return np.diag([1.0, 1e-13])


@pytest.fixture
def exactly_singular_substitution_matrix():
    return np.array([[1.0, 2.0], [2.0, 4.0]])


# =============================================================================
# SCALE FIXTURES
# =============================================================================


@pytest.fixture
def large_scale_economy():
    """Symmetric two-agent economy scaled up by 1e8."""
    scale = 1e8
    return ExchangeEconomy(
        substitution_matrix=np.eye(2),
        bliss_points=np.array([[5.0, 5.0], [5.0, 5.0]]) * scale,
        endowments=np.array([[0.0, 2.0], [2.0, 0.0]]) * scale,
    )


@pytest.fixture
def small_scale_economy():
    """Symmetric two-agent economy scaled down by 1e-8."""
    scale = 1e-8
    return ExchangeEconomy(
        substitution_matrix=np.eye(2),
        bliss_points=np.array([[5.0, 5.0], [5.0, 5.0]]) * scale,
        endowments=np.array([[0.0, 2.0], [2.0, 0.0]]) * scale,
    )


@pytest.fixture
def identical_agents_economy():
    """Five identical agents, twenty goods, dense substitution matrix.

    Identical agents have nothing to trade, so every agent must end up
    consuming exactly its own endowment.
    """
    rng = np.random.default_rng(42)
    n, m = 20, 5
    Pi = np.eye(n) + 0.1 * rng.uniform(0.0, 1.0, size=(n, n))
    return ExchangeEconomy(
        substitution_matrix=Pi,
        bliss_points=np.full((m, n), 10.0),
        endowments=np.ones((m, n)),
    )
