"""Competitive equilibrium of a pure-exchange economy with quadratic utility.

With quadratic utility ``-0.5 * ||Pi c - b||^2`` and a linear budget
constraint, agent i's demand at prices p is linear:

    c_i = Pi^{-1} b_i - mu_i (Pi^T Pi)^{-1} p

where the marginal utility of wealth mu_i makes the budget bind,

    mu_i = (-W_i + p^T (Pi^{-1} b_i - e_i)) / (p^T (Pi^T Pi)^{-1} p).

Market clearing applied to the aggregate consumer (with the sum of the
mu_i normalized to one) pins down the price direction

    p = Pi^T b - Pi^T Pi e,    b = sum(b_i), e = sum(e_i),

which is then normalized so that good 0 is the numeraire. The whole
equilibrium is one pair of inversions plus vector arithmetic; there is no
iteration and no fixed-point search.

Functions:
    - compute_exchange_equilibrium(): Prices, allocations and mu_i
    - compute_demand(): Marshallian demand of one agent at given prices
    - compute_excess_demand(): Aggregate excess demand at given prices
    - representative_consumer(): Aggregate single-agent economy
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyequilibrium._linalg import as_float_array, check_length, invert
from pyequilibrium.core.config import ALLOCATION_TOLERANCE, NUMERAIRE_TOLERANCE
from pyequilibrium.core.economy import read_exchange_fields
from pyequilibrium.core.exceptions import (
    DegenerateNormalizationError,
    EquilibriumNonexistenceError,
    ValueRangeError,
)
from pyequilibrium.core.result import ExchangeEquilibriumResult

if TYPE_CHECKING:
    from pyequilibrium.core.economy import ExchangeEconomy, PreferenceSystem


def compute_exchange_equilibrium(
    economy: "ExchangeEconomy",
    allocation_tolerance: float = ALLOCATION_TOLERANCE,
    numeraire_tolerance: float = NUMERAIRE_TOLERANCE,
) -> ExchangeEquilibriumResult:
    """
    Compute the competitive equilibrium of an exchange economy.

    Every call recomputes from the economy's current fields, so calling
    twice on an unmodified economy returns identical numbers.

    Args:
        economy: ExchangeEconomy with m agents and n goods
        allocation_tolerance: Components down to -allocation_tolerance
            count as non-negative
        numeraire_tolerance: Relative tolerance below which the
            unnormalized price of good 0 counts as zero

    Returns:
        ExchangeEquilibriumResult with prices (prices[0] == 1), allocations
        and marginal utilities of wealth

    Raises:
        DimensionError: If fields assigned after construction have bad shapes
        ConfigurationError: If wealth transfers no longer sum to zero
        NonSatiationError: If some agent is no longer safely non-satiated
        DegenerateNormalizationError: If the price of good 0 is zero
        EquilibriumNonexistenceError: If some allocation is negative

    Example:
        >>> economy = ExchangeEconomy(np.eye(2), [[5, 5], [5, 5]], [[0, 2], [2, 0]])
        >>> result = compute_exchange_equilibrium(economy)
        >>> result.allocations
        array([[1., 1.],
               [1., 1.]])
    """
    start_time = time.perf_counter()

    Pi, bs, es, Ws = read_exchange_fields(economy)

    # Shared across agents, computed once. (Pi^T Pi)^{-1} = Pi^{-1} Pi^{-T}
    # keeps the conditioning of Pi rather than squaring it.
    Pi_inv = invert(Pi, "substitution_matrix")
    gram_inv = Pi_inv @ Pi_inv.T

    b = np.sum(bs, axis=0)
    e = np.sum(es, axis=0)
    prices = _normalized_prices(Pi, b, e, numeraire_tolerance)

    allocations, mus = _linear_demand(Pi_inv, gram_inv, bs, es, Ws, prices)

    if np.any(allocations < -allocation_tolerance):
        negative = np.argwhere(allocations < -allocation_tolerance)
        preview = negative[:5].tolist()
        raise EquilibriumNonexistenceError(
            f"Negative allocation for {len(negative)} (agent, good) pairs: "
            f"{preview}{'...' if len(negative) > 5 else ''}. "
            f"No competitive equilibrium with non-negative consumption exists "
            f"for these endowments and bliss points.",
            allocations=allocations,
        )

    computation_time = (time.perf_counter() - start_time) * 1000

    return ExchangeEquilibriumResult(
        prices=prices,
        allocations=allocations,
        marginal_utilities=mus,
        endowments=es.copy(),
        computation_time_ms=computation_time,
    )


def compute_demand(
    preferences: "PreferenceSystem",
    endowment: ArrayLike,
    prices: ArrayLike,
    wealth: float = 0.0,
) -> tuple[NDArray[np.float64], float]:
    """
    Marshallian demand of one quadratic-utility consumer.

    Maximizes ``-0.5 * ||Pi c - b||^2`` subject to ``p @ c = p @ e + W``.
    Non-negativity is not imposed, so the returned bundle can have
    negative components at prices far from equilibrium.

    Args:
        preferences: PreferenceSystem (Pi, b)
        endowment: n-length endowment e
        prices: n-length price vector p (not all zero)
        wealth: Wealth transfer W received by the consumer

    Returns:
        Tuple of (consumption c, marginal utility of wealth mu)
    """
    Pi = preferences.substitution_matrix
    n = preferences.num_goods
    e = as_float_array(endowment, "endowment", ndim=1)
    p = as_float_array(prices, "prices", ndim=1)
    check_length(e, n, "endowment")
    check_length(p, n, "prices")
    if not np.any(p):
        raise ValueRangeError("prices must not all be zero.")

    Pi_inv = invert(Pi, "substitution_matrix")
    gram_inv = Pi_inv @ Pi_inv.T
    allocations, mus = _linear_demand(
        Pi_inv,
        gram_inv,
        preferences.bliss_point[np.newaxis, :],
        e[np.newaxis, :],
        np.array([float(wealth)]),
        p,
    )
    return allocations[0], float(mus[0])


def compute_excess_demand(
    economy: "ExchangeEconomy",
    prices: ArrayLike,
) -> NDArray[np.float64]:
    """
    Aggregate excess demand of an exchange economy at arbitrary prices.

    Satisfies Walras' law ``p @ z = sum(W)``, which is zero for valid
    wealth transfers, and vanishes at the equilibrium prices.

    Args:
        economy: ExchangeEconomy
        prices: n-length price vector (not all zero)

    Returns:
        n-length vector sum_i c_i(p) - sum_i e_i
    """
    Pi, bs, es, Ws = read_exchange_fields(economy)
    p = as_float_array(prices, "prices", ndim=1)
    check_length(p, Pi.shape[0], "prices")
    if not np.any(p):
        raise ValueRangeError("prices must not all be zero.")

    Pi_inv = invert(Pi, "substitution_matrix")
    gram_inv = Pi_inv @ Pi_inv.T
    allocations, _ = _linear_demand(Pi_inv, gram_inv, bs, es, Ws, p)
    return np.sum(allocations, axis=0) - np.sum(es, axis=0)


def representative_consumer(economy: "ExchangeEconomy") -> "ExchangeEconomy":
    """
    Single-agent economy with the aggregate bliss point and endowment.

    Because demand is linear in b_i and e_i, the aggregate behaves like one
    consumer with b = sum(b_i) and e = sum(e_i). Its equilibrium prices
    equal those of the original economy.

    Args:
        economy: ExchangeEconomy with m agents

    Returns:
        ExchangeEconomy with one agent and no wealth transfers
    """
    from pyequilibrium.core.economy import ExchangeEconomy

    return ExchangeEconomy(
        substitution_matrix=economy.substitution_matrix,
        bliss_points=economy.aggregate_bliss_point[np.newaxis, :],
        endowments=economy.aggregate_endowment[np.newaxis, :],
        satiation_threshold=economy.satiation_threshold,
    )


def _normalized_prices(
    Pi: NDArray[np.float64],
    b: NDArray[np.float64],
    e: NDArray[np.float64],
    tolerance: float,
) -> NDArray[np.float64]:
    """Price direction Pi^T b - Pi^T Pi e, scaled so that good 0 costs 1."""
    raw = Pi.T @ b - Pi.T @ Pi @ e
    scale = max(1.0, float(np.linalg.norm(raw)))
    if abs(raw[0]) <= tolerance * scale:
        raise DegenerateNormalizationError(
            f"Unnormalized price of the numeraire (good 0) is {raw[0]:.3e}. "
            f"Prices cannot be normalized by it."
        )
    prices = raw / raw[0]
    prices[0] = 1.0
    return prices


def _linear_demand(
    Pi_inv: NDArray[np.float64],
    gram_inv: NDArray[np.float64],
    bs: NDArray[np.float64],
    es: NDArray[np.float64],
    Ws: NDArray[np.float64],
    prices: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Demand of every agent (rows of bs, es) at the given prices."""
    direction = gram_inv @ prices
    A = float(prices @ direction)

    # Row i is Pi^{-1} b_i, the unconstrained optimum of agent i
    satiation_bundles = bs @ Pi_inv.T

    mus = (-Ws + (satiation_bundles - es) @ prices) / A
    allocations = satiation_bundles - np.outer(mus, direction)
    return allocations, mus
