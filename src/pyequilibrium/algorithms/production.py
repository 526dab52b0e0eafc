"""Production economy with a representative consumer and quadratic costs.

The planner maximizes consumer utility minus mu times production cost,

    max_c  -0.5 * ||Pi c - b||^2 - mu * (h @ c + 0.5 * c @ H @ c),

whose first-order condition is linear in c. The competitive price is
recovered from the consumer's demand-inversion identity

    p = (1 / mu) * (Pi^T b - Pi^T Pi c).

A monopolist internalizes its own effect on price, which doubles the
Pi^T Pi term in the first-order condition and restricts output.

For a single good the inverse demand and supply curves are straight
lines, so surpluses are evaluated from closed-form quadratic
antiderivatives rather than by numerical integration.

Functions:
    - compute_competitive_equilibrium(): Competitive allocation and price
    - compute_monopoly_equilibrium(): Monopoly quantity and price
    - compute_surplus(): Consumer and producer surplus (n = 1)
    - compute_deadweight_loss(): Surplus lost under monopoly (n = 1)
    - compute_supply_demand_curves(): Curve series for plotting (n = 1)
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from numpy.typing import NDArray

from pyequilibrium._linalg import as_float_array, gram, solve, symmetrize
from pyequilibrium.core.config import DEFAULT_CURVE_POINTS
from pyequilibrium.core.exceptions import (
    DimensionError,
    NaNInfError,
    NonSatiationError,
    ValueRangeError,
)
from pyequilibrium.core.result import (
    ProductionEquilibriumResult,
    SupplyDemandCurves,
    SurplusResult,
)

if TYPE_CHECKING:
    from pyequilibrium.core.economy import ProductionEconomy
    from pyequilibrium.core.types import Regime


class _Fields(NamedTuple):
    Pi: NDArray[np.float64]
    b: NDArray[np.float64]
    h: NDArray[np.float64]
    H: NDArray[np.float64]
    mu: float


def _read_fields(economy: "ProductionEconomy") -> _Fields:
    """Snapshot the economy's current fields as validated arrays."""
    Pi = as_float_array(economy.substitution_matrix, "substitution_matrix", ndim=2)
    b = as_float_array(economy.bliss_point, "bliss_point", ndim=1)
    h = as_float_array(economy.linear_cost, "linear_cost", ndim=1)
    J = as_float_array(economy.quadratic_cost, "quadratic_cost", ndim=2)
    mu = float(economy.welfare_weight)

    n = Pi.shape[0]
    if Pi.shape != (n, n) or J.shape != (n, n) or b.shape != (n,) or h.shape != (n,):
        raise DimensionError(
            f"Inconsistent shapes: substitution_matrix {Pi.shape}, bliss_point "
            f"{b.shape}, linear_cost {h.shape}, quadratic_cost {J.shape}."
        )
    if not np.isfinite(mu):
        raise NaNInfError(f"welfare_weight must be a finite number, got {mu}.")
    if mu == 0:
        raise ValueRangeError(
            "welfare_weight is zero; prices p = (1 / mu) * (Pi^T b - Pi^T Pi c) "
            "are undefined."
        )
    return _Fields(Pi, b, h, symmetrize(J), mu)


def _solve_regime(economy: "ProductionEconomy", regime: "Regime") -> ProductionEquilibriumResult:
    start_time = time.perf_counter()

    Pi, b, h, H, mu = _read_fields(economy)
    gram_Pi = gram(Pi)

    # Monopolist's own-price effect doubles the Pi^T Pi term
    own_price_weight = 2.0 if regime == "monopoly" else 1.0
    system = own_price_weight * gram_Pi + mu * H
    rhs = Pi.T @ b - mu * h
    quantity = solve(system, rhs, f"{regime} first-order condition")

    prices = (Pi.T @ b - gram_Pi @ quantity) / mu

    gap = Pi @ quantity - b
    if np.any(gap >= 0):
        raise NonSatiationError(
            f"{regime.capitalize()} allocation {np.round(quantity, 6).tolist()} "
            f"reaches or passes the bliss point in goods "
            f"{np.where(gap >= 0)[0].tolist()}. Set the bliss point further away."
        )

    computation_time = (time.perf_counter() - start_time) * 1000

    return ProductionEquilibriumResult(
        quantity=quantity,
        prices=prices,
        marginal_cost=h + H @ quantity,
        regime=regime,
        welfare_weight=mu,
        computation_time_ms=computation_time,
    )


def compute_competitive_equilibrium(economy: "ProductionEconomy") -> ProductionEquilibriumResult:
    """
    Compute the competitive equilibrium of a production economy.

    Solves ``(Pi^T Pi + mu H) c = Pi^T b - mu h`` and recovers the price as
    ``p = (1 / mu) * (Pi^T b - Pi^T Pi c)``. At the solution the price
    equals marginal cost ``h + H c``.

    Args:
        economy: ProductionEconomy

    Returns:
        ProductionEquilibriumResult with regime "competitive"

    Raises:
        NonSatiationError: If any component of Pi @ c - b is >= 0
        SingularMatrixError: If Pi^T Pi + mu H is singular
        ValueRangeError: If the welfare weight is zero

    Example:
        >>> economy = ProductionEconomy([[1]], [10], [0.5], [[1]], welfare_weight=1)
        >>> result = compute_competitive_equilibrium(economy)
        >>> float(result.quantity[0]), float(result.prices[0])
        (4.75, 5.25)
    """
    return _solve_regime(economy, "competitive")


def compute_monopoly_equilibrium(economy: "ProductionEconomy") -> ProductionEquilibriumResult:
    """
    Compute the equilibrium when a monopolist supplies the goods.

    Solves ``(mu H + 2 Pi^T Pi) q = Pi^T b - mu h``; the price follows from
    the same demand-inversion identity as the competitive case.

    Args:
        economy: ProductionEconomy

    Returns:
        ProductionEquilibriumResult with regime "monopoly"

    Raises:
        NonSatiationError: If any component of Pi @ q - b is >= 0
        SingularMatrixError: If mu H + 2 Pi^T Pi is singular
        ValueRangeError: If the welfare weight is zero
    """
    return _solve_regime(economy, "monopoly")


def _single_good_coefficients(
    economy: "ProductionEconomy",
    operation: str,
) -> tuple[float, float, float, float]:
    """Intercepts and slopes (d0, d1, s0, s1) of the single-good curves.

    Inverse demand is ``d0 - d1 x`` and inverse supply ``s0 + s1 x``.
    """
    Pi, b, h, H, mu = _read_fields(economy)
    if Pi.shape[0] != 1:
        raise DimensionError(
            f"{operation} is only defined for a single-good economy, "
            f"got {Pi.shape[0]} goods."
        )
    pi, bliss = float(Pi[0, 0]), float(b[0])
    d0 = pi * bliss / mu
    d1 = pi**2 / mu
    s0 = float(h[0])
    s1 = float(H[0, 0])
    return d0, d1, s0, s1


def compute_surplus(
    economy: "ProductionEconomy",
    regime: "Regime" = "competitive",
) -> SurplusResult:
    """
    Compute consumer and producer surplus in a single-good economy.

    With inverse demand ``d0 - d1 x`` and inverse supply ``s0 + s1 x``,
    at traded quantity x* and price p*:

        CS = d0 x* - 0.5 d1 x*^2 - p* x*
        PS = p* x* - s0 x* - 0.5 s1 x*^2

    Args:
        economy: ProductionEconomy with one good
        regime: "competitive" (default) or "monopoly"

    Returns:
        SurplusResult

    Raises:
        DimensionError: If the economy has more than one good
        ValueError: If regime is not recognized
    """
    if regime not in ("competitive", "monopoly"):
        raise ValueError(f"Unknown regime: {regime}. Use 'competitive' or 'monopoly'.")

    d0, d1, s0, s1 = _single_good_coefficients(economy, "Surplus")

    if regime == "monopoly":
        equilibrium = compute_monopoly_equilibrium(economy)
    else:
        equilibrium = compute_competitive_equilibrium(economy)
    x = float(equilibrium.quantity[0])
    p = float(equilibrium.prices[0])

    consumer_surplus = d0 * x - 0.5 * d1 * x**2 - p * x
    producer_surplus = p * x - s0 * x - 0.5 * s1 * x**2

    return SurplusResult(
        consumer_surplus=consumer_surplus,
        producer_surplus=producer_surplus,
        quantity=x,
        price=p,
        regime=regime,
    )


def compute_deadweight_loss(economy: "ProductionEconomy") -> float:
    """
    Total surplus lost when a monopolist replaces competitive supply.

    Args:
        economy: ProductionEconomy with one good

    Returns:
        Competitive total surplus minus monopoly total surplus (>= 0)

    Raises:
        DimensionError: If the economy has more than one good
    """
    competitive = compute_surplus(economy, regime="competitive")
    monopoly = compute_surplus(economy, regime="monopoly")
    return competitive.total_surplus - monopoly.total_surplus


def compute_supply_demand_curves(
    economy: "ProductionEconomy",
    num_points: int = DEFAULT_CURVE_POINTS,
    max_quantity: float | None = None,
) -> SupplyDemandCurves:
    """
    Evaluate the single-good curves over a quantity grid.

    The default grid runs from 0 to the quantity where inverse demand
    hits zero, ``b / Pi``.

    Args:
        economy: ProductionEconomy with one good
        num_points: Number of grid points
        max_quantity: Right end of the grid (default b / Pi)

    Returns:
        SupplyDemandCurves with demand, supply and marginal revenue series

    Raises:
        DimensionError: If the economy has more than one good
        ValueRangeError: If num_points < 2 or max_quantity <= 0
    """
    d0, d1, s0, s1 = _single_good_coefficients(economy, "Supply and demand curves")
    if num_points < 2:
        raise ValueRangeError(f"num_points must be at least 2, got {num_points}.")
    if max_quantity is None:
        max_quantity = d0 / d1
    if max_quantity <= 0:
        raise ValueRangeError(f"max_quantity must be positive, got {max_quantity}.")

    grid = np.linspace(0.0, max_quantity, num_points)
    return SupplyDemandCurves(
        quantities=grid,
        demand=d0 - d1 * grid,
        supply=s0 + s1 * grid,
        marginal_revenue=d0 - 2.0 * d1 * grid,
    )
