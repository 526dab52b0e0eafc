"""Pytest fixtures for PyEquilibrium tests."""

import numpy as np
import pytest

from pyequilibrium import ExchangeEconomy, ProductionEconomy


@pytest.fixture
def symmetric_exchange_economy() -> ExchangeEconomy:
    """
    Two identical agents with mirrored endowments.

    Pi = I, both bliss points [5, 5], endowments [0, 2] and [2, 0].
    By symmetry prices are [1, 1] and each agent consumes [1, 1].
    """
    return ExchangeEconomy(
        substitution_matrix=np.eye(2),
        bliss_points=np.array([[5.0, 5.0], [5.0, 5.0]]),
        endowments=np.array([[0.0, 2.0], [2.0, 0.0]]),
        wealth_transfers=np.array([0.0, 0.0]),
    )


@pytest.fixture
def asymmetric_exchange_economy() -> ExchangeEconomy:
    """
    Two agents with different tastes, endowments and a wealth transfer.

    Pi has an off-diagonal substitution term. Every allocation is interior:
    c_0 is about [3.15, 2.11] and c_1 about [0.85, 1.89].
    """
    return ExchangeEconomy(
        substitution_matrix=np.array([[1.0, 0.0], [0.5, 1.0]]),
        bliss_points=np.array([[11.0, 13.5], [9.0, 12.5]]),
        endowments=np.array([[3.0, 1.0], [1.0, 3.0]]),
        wealth_transfers=np.array([1.0, -1.0]),
    )


@pytest.fixture
def three_good_exchange_economy() -> ExchangeEconomy:
    """Three agents and three goods with a diagonal substitution matrix."""
    return ExchangeEconomy(
        substitution_matrix=np.diag([1.0, 2.0, 1.5]),
        bliss_points=np.array([
            [20.0, 25.0, 22.0],
            [18.0, 30.0, 20.0],
            [22.0, 28.0, 24.0],
        ]),
        endowments=np.array([
            [3.0, 1.0, 2.0],
            [1.0, 4.0, 2.0],
            [2.0, 2.0, 3.0],
        ]),
    )


@pytest.fixture
def single_good_production_economy() -> ProductionEconomy:
    """
    Single good: Pi = 1, b = 10, h = 0.5, J = 1, mu = 1.

    Competitive c = 4.75 and p = 5.25.
    """
    return ProductionEconomy(
        substitution_matrix=np.array([[1.0]]),
        bliss_point=np.array([10.0]),
        linear_cost=np.array([0.5]),
        quadratic_cost=np.array([[1.0]]),
        welfare_weight=1.0,
    )


@pytest.fixture
def two_good_production_economy() -> ProductionEconomy:
    """
    Two goods with an unsymmetric quadratic cost matrix.

    H = [[1, 0.5], [0.5, 1]], so c = [3.6, 3.6] and p = [6.4, 6.4].
    """
    return ProductionEconomy(
        substitution_matrix=np.array([[1.0, 0.0], [0.0, 1.0]]),
        bliss_point=np.array([10.0, 10.0]),
        linear_cost=np.array([1.0, 1.0]),
        quadratic_cost=np.array([[1.0, 1.0], [0.0, 1.0]]),
        welfare_weight=1.0,
    )
