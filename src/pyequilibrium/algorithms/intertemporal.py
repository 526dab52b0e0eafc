"""Dynamic and contingent-claims exchange economies.

Both economies reuse the static exchange solver by stacking K blocks of
n goods. With block weights w_k, the weighted sum of quadratic utilities

    -0.5 * sum_k w_k * ||Pi c_k - b_k||^2

equals the static quadratic utility with

    Pi_hat = blockdiag(sqrt(w_0) Pi, ..., sqrt(w_{K-1}) Pi)
    b_hat  = (sqrt(w_0) b_0, ..., sqrt(w_{K-1}) b_{K-1})
    e_hat  = (e_0, ..., e_{K-1})

so a single closed-form solve prices every block at once.

    - Dynamic economy: blocks are periods t = 0..T-1, w_t = beta^t.
      Prices are present values in units of good 0 at t = 0.
    - Contingent-claims economy: blocks are states s with probability
      lambda_s, w_s = lambda_s. Prices are Arrow-security prices in units
      of good 0 in state 0.

Functions:
    - build_dynamic_economy(), compute_dynamic_equilibrium()
    - build_contingent_claims_economy(), compute_contingent_claims_equilibrium()
"""

from __future__ import annotations

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import linalg

from pyequilibrium._linalg import as_float_array, check_square
from pyequilibrium.core.config import ALLOCATION_TOLERANCE, DEFAULT_SATIATION_THRESHOLD
from pyequilibrium.core.economy import ExchangeEconomy
from pyequilibrium.core.exceptions import DimensionError, ValueRangeError
from pyequilibrium.core.result import StackedEquilibriumResult
from pyequilibrium.algorithms.exchange import compute_exchange_equilibrium


def _per_block(
    values: ArrayLike,
    num_blocks: int,
    num_goods: int,
    name: str,
) -> NDArray[np.float64]:
    """Return an m x K x n array; m x n input is repeated in every block."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 2:
        arr = np.repeat(arr[:, np.newaxis, :], num_blocks, axis=1)
    if arr.ndim != 3 or arr.shape[1:] != (num_blocks, num_goods):
        raise DimensionError(
            f"{name} must be m x n or m x {num_blocks} x {num_goods}, "
            f"got shape {np.shape(values)}."
        )
    return arr


def _stack_economy(
    substitution_matrix: ArrayLike,
    bliss_points: ArrayLike,
    endowments: ArrayLike,
    weights: NDArray[np.float64],
    wealth_transfers: ArrayLike | None,
    satiation_threshold: float,
) -> ExchangeEconomy:
    Pi = as_float_array(substitution_matrix, "substitution_matrix", ndim=2)
    n = check_square(Pi, "substitution_matrix")
    K = weights.shape[0]

    bs = _per_block(bliss_points, K, n, "bliss_points")
    es = _per_block(endowments, K, n, "endowments")
    if bs.shape[0] != es.shape[0]:
        raise DimensionError(
            f"bliss_points describe {bs.shape[0]} agents but endowments "
            f"describe {es.shape[0]}."
        )
    m = bs.shape[0]

    roots = np.sqrt(weights)
    Pi_hat = linalg.block_diag(*[root * Pi for root in roots])
    bs_hat = (bs * roots[np.newaxis, :, np.newaxis]).reshape(m, K * n)
    es_hat = es.reshape(m, K * n)

    return ExchangeEconomy(
        substitution_matrix=Pi_hat,
        bliss_points=bs_hat,
        endowments=es_hat,
        wealth_transfers=wealth_transfers,
        satiation_threshold=satiation_threshold,
    )


def _discount_weights(discount_factor: float, horizon: int) -> NDArray[np.float64]:
    if not 0 < discount_factor <= 1:
        raise ValueRangeError(
            f"discount_factor must be in (0, 1], got {discount_factor}."
        )
    if horizon < 1:
        raise ValueRangeError(f"horizon must be at least 1, got {horizon}.")
    return discount_factor ** np.arange(horizon, dtype=np.float64)


def _state_weights(probabilities: ArrayLike) -> NDArray[np.float64]:
    probs = as_float_array(probabilities, "probabilities", ndim=1)
    if np.any(probs <= 0):
        raise ValueRangeError(
            f"State probabilities must be strictly positive, got {probs.tolist()}."
        )
    if not np.isclose(np.sum(probs), 1.0, rtol=0.0, atol=1e-10):
        raise ValueRangeError(
            f"State probabilities must sum to 1, got {np.sum(probs):.10g}."
        )
    return probs


def _infer_horizon(values: ArrayLike, horizon: int | None) -> int:
    shape = np.shape(values)
    if len(shape) == 3:
        if horizon is not None and horizon != shape[1]:
            raise DimensionError(
                f"horizon={horizon} does not match the {shape[1]} periods given."
            )
        return shape[1]
    if horizon is None:
        raise DimensionError(
            "horizon is required when bliss points are the same in every period."
        )
    return horizon


def build_dynamic_economy(
    substitution_matrix: ArrayLike,
    bliss_points: ArrayLike,
    endowments: ArrayLike,
    discount_factor: float,
    horizon: int | None = None,
    wealth_transfers: ArrayLike | None = None,
    satiation_threshold: float = DEFAULT_SATIATION_THRESHOLD,
) -> ExchangeEconomy:
    """
    Stack a T-period economy with discounting into one exchange economy.

    Args:
        substitution_matrix: n x n per-period substitution matrix Pi
        bliss_points: m x T x n per-period bliss points, or m x n if constant
        endowments: m x T x n per-period endowments, or m x n if constant
        discount_factor: beta in (0, 1]
        horizon: Number of periods T; required when inputs are m x n
        wealth_transfers: m-length lifetime wealth transfers (sum to zero)
        satiation_threshold: Non-satiation margin for every agent

    Returns:
        ExchangeEconomy over T * n goods

    Raises:
        ValueRangeError: If beta is outside (0, 1]
        DimensionError: If shapes are inconsistent

    Example:
        >>> economy = build_dynamic_economy(
        ...     [[1.0]], bliss_points=[[5.0]], endowments=[[1.0]],
        ...     discount_factor=0.95, horizon=2,
        ... )
        >>> economy.substitution_matrix
        array([[1.        , 0.        ],
               [0.        , 0.97467943]])
    """
    T = _infer_horizon(bliss_points, horizon)
    weights = _discount_weights(discount_factor, T)
    return _stack_economy(
        substitution_matrix, bliss_points, endowments, weights,
        wealth_transfers, satiation_threshold,
    )


def build_contingent_claims_economy(
    substitution_matrix: ArrayLike,
    bliss_points: ArrayLike,
    endowments: ArrayLike,
    probabilities: ArrayLike,
    wealth_transfers: ArrayLike | None = None,
    satiation_threshold: float = DEFAULT_SATIATION_THRESHOLD,
) -> ExchangeEconomy:
    """
    Stack an economy with S states of nature into one exchange economy.

    Agents trade Arrow securities before the state is realized and
    maximize expected quadratic utility.

    Args:
        substitution_matrix: n x n per-state substitution matrix Pi
        bliss_points: m x S x n per-state bliss points, or m x n if constant
        endowments: m x S x n per-state endowments, or m x n if constant
        probabilities: S-length state probabilities (positive, sum to 1)
        wealth_transfers: m-length wealth transfers (sum to zero)
        satiation_threshold: Non-satiation margin for every agent

    Returns:
        ExchangeEconomy over S * n goods

    Raises:
        ValueRangeError: If probabilities are invalid
        DimensionError: If shapes are inconsistent
    """
    weights = _state_weights(probabilities)
    return _stack_economy(
        substitution_matrix, bliss_points, endowments, weights,
        wealth_transfers, satiation_threshold,
    )


def _unstack(
    economy: ExchangeEconomy,
    weights: NDArray[np.float64],
    kind: Literal["dynamic", "contingent_claims"],
    allocation_tolerance: float,
) -> StackedEquilibriumResult:
    result = compute_exchange_equilibrium(economy, allocation_tolerance=allocation_tolerance)
    K = weights.shape[0]
    n = result.num_goods // K
    return StackedEquilibriumResult(
        prices=result.prices.reshape(K, n),
        allocations=result.allocations.reshape(result.num_agents, K, n),
        marginal_utilities=result.marginal_utilities,
        block_weights=weights,
        kind=kind,
        stacked_result=result,
    )


def compute_dynamic_equilibrium(
    substitution_matrix: ArrayLike,
    bliss_points: ArrayLike,
    endowments: ArrayLike,
    discount_factor: float,
    horizon: int | None = None,
    wealth_transfers: ArrayLike | None = None,
    satiation_threshold: float = DEFAULT_SATIATION_THRESHOLD,
    allocation_tolerance: float = ALLOCATION_TOLERANCE,
) -> StackedEquilibriumResult:
    """
    Competitive equilibrium of a T-period exchange economy.

    Arguments are those of ``build_dynamic_economy``.

    Returns:
        StackedEquilibriumResult with T x n present-value prices and
        m x T x n allocations
    """
    T = _infer_horizon(bliss_points, horizon)
    weights = _discount_weights(discount_factor, T)
    economy = _stack_economy(
        substitution_matrix, bliss_points, endowments, weights,
        wealth_transfers, satiation_threshold,
    )
    return _unstack(economy, weights, "dynamic", allocation_tolerance)


def compute_contingent_claims_equilibrium(
    substitution_matrix: ArrayLike,
    bliss_points: ArrayLike,
    endowments: ArrayLike,
    probabilities: ArrayLike,
    wealth_transfers: ArrayLike | None = None,
    satiation_threshold: float = DEFAULT_SATIATION_THRESHOLD,
    allocation_tolerance: float = ALLOCATION_TOLERANCE,
) -> StackedEquilibriumResult:
    """
    Competitive equilibrium with complete markets in Arrow securities.

    Arguments are those of ``build_contingent_claims_economy``.

    Returns:
        StackedEquilibriumResult with S x n Arrow-security prices and
        m x S x n state-contingent allocations
    """
    weights = _state_weights(probabilities)
    economy = _stack_economy(
        substitution_matrix, bliss_points, endowments, weights,
        wealth_transfers, satiation_threshold,
    )
    return _unstack(economy, weights, "contingent_claims", allocation_tolerance)
