"""Core data structures for linear-quadratic economies.

This module provides the value structs that describe preferences,
endowments and production costs, and the two economy containers that
the solvers in ``pyequilibrium.algorithms`` take as input.

Value structs (immutable):
    - PreferenceSystem: substitution matrix Pi and bliss point b
    - Agent: preferences, endowment and wealth transfer of one consumer
    - CostStructure: linear cost h and quadratic cost J of a producer

Economies:
    - ExchangeEconomy: m agents sharing one Pi, trading their endowments
    - ProductionEconomy: representative consumer facing a convex cost
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyequilibrium._linalg import (
    as_float_array,
    check_conditioning,
    check_length,
    check_square,
    symmetrize,
)
from pyequilibrium.core.config import (
    ALLOCATION_TOLERANCE,
    DEFAULT_CURVE_POINTS,
    DEFAULT_SATIATION_THRESHOLD,
    WEALTH_TOLERANCE,
)
from pyequilibrium.core.exceptions import (
    ConfigurationError,
    DataQualityWarning,
    DimensionError,
    NonSatiationError,
)

if TYPE_CHECKING:
    from pyequilibrium.core.result import (
        ExchangeEquilibriumResult,
        ProductionEquilibriumResult,
        SupplyDemandCurves,
        SurplusResult,
    )
    from pyequilibrium.core.types import Regime


def _check_non_satiation(
    bliss_point: NDArray[np.float64],
    substitution_matrix: NDArray[np.float64],
    endowment: NDArray[np.float64],
    threshold: float,
    label: str = "agent",
) -> None:
    """Raise NonSatiationError unless min(b / max(Pi @ e)) > threshold."""
    scale = float(np.max(substitution_matrix @ endowment))
    if scale > 0:
        ratio = bliss_point / scale
    else:
        # No endowment-implied consumption to compare against
        ratio = np.where(bliss_point > 0, np.inf, -np.inf)
    if np.min(ratio) <= threshold:
        raise NonSatiationError(
            f"Bliss point of {label} is too close to its endowment: "
            f"min(b / max(Pi @ e)) = {np.min(ratio):.4g} must exceed "
            f"{threshold}. Set bliss points further away."
        )


def read_exchange_fields(
    economy: ExchangeEconomy,
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """
    Snapshot an exchange economy's current fields as validated arrays.

    Runs the full construction contract (shapes, zero-sum wealth transfers,
    invertibility of Pi, non-satiation of every agent) on whatever the fields
    hold now, so values assigned after construction are checked before they
    are solved.

    Returns:
        Tuple of (Pi, bliss_points, endowments, wealth_transfers)

    Raises:
        DimensionError: If shapes are inconsistent
        NaNInfError: If any field holds NaN or Inf
        ConfigurationError: If wealth transfers do not sum to zero
        SingularMatrixError: If Pi is singular to working precision
        NonSatiationError: If some agent's bliss point is too close
    """
    Pi = as_float_array(economy.substitution_matrix, "substitution_matrix", ndim=2)
    bs = as_float_array(economy.bliss_points, "bliss_points", ndim=2)
    es = as_float_array(economy.endowments, "endowments", ndim=2)

    n = check_square(Pi, "substitution_matrix")
    if bs.shape != es.shape:
        raise DimensionError(
            f"bliss_points shape {bs.shape} does not match endowments shape "
            f"{es.shape}. Both must be m x n (one row per agent)."
        )
    m = bs.shape[0]
    if m == 0:
        raise DimensionError("An exchange economy needs at least one agent.")
    check_length(bs, n, "bliss_points")

    if economy.wealth_transfers is None:
        Ws = np.zeros(m)
    else:
        Ws = as_float_array(economy.wealth_transfers, "wealth_transfers", ndim=1)
    if Ws.shape[0] != m:
        raise DimensionError(
            f"wealth_transfers has {Ws.shape[0]} entries but the economy has "
            f"{m} agents."
        )

    total = float(np.sum(Ws))
    scale = max(1.0, float(np.sum(np.abs(Ws))))
    if abs(total) > economy.tolerance * scale:
        raise ConfigurationError(
            f"Wealth transfers must sum to zero, got {total:.6g}. "
            f"Transfers redistribute wealth and cannot create it."
        )

    check_conditioning(Pi, "substitution_matrix")
    for i in range(m):
        _check_non_satiation(
            bs[i], Pi, es[i], economy.satiation_threshold, label=f"agent {i}"
        )
    return Pi, bs, es, Ws


@dataclass(frozen=True)
class PreferenceSystem:
    """
    Quadratic preferences over n goods.

    Utility is ``u(c) = -0.5 * (Pi @ c - b) @ (Pi @ c - b)``: goods are
    mapped into a characteristics space by Pi, and utility falls with the
    distance from the bliss point b in that space.

    Attributes:
        substitution_matrix: n x n invertible matrix Pi
        bliss_point: n-length vector b

    Example:
        >>> prefs = PreferenceSystem(np.eye(2), [5.0, 5.0])
        >>> prefs.utility([1.0, 1.0])
        -16.0
    """

    substitution_matrix: NDArray[np.float64]
    bliss_point: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Convert to float64 arrays and validate."""
        Pi = as_float_array(self.substitution_matrix, "substitution_matrix", ndim=2)
        b = as_float_array(self.bliss_point, "bliss_point", ndim=1)
        n = check_square(Pi, "substitution_matrix")
        check_length(b, n, "bliss_point")
        check_conditioning(Pi, "substitution_matrix")
        object.__setattr__(self, "substitution_matrix", Pi)
        object.__setattr__(self, "bliss_point", b)

    @property
    def num_goods(self) -> int:
        """Number of goods n."""
        return self.bliss_point.shape[0]

    def utility(self, consumption: ArrayLike) -> float:
        """Evaluate u(c) = -0.5 * ||Pi @ c - b||^2."""
        c = as_float_array(consumption, "consumption", ndim=1)
        gap = self.substitution_matrix @ c - self.bliss_point
        return float(-0.5 * gap @ gap)

    def marginal_utility(self, consumption: ArrayLike) -> NDArray[np.float64]:
        """Gradient of u at c: Pi^T (b - Pi @ c)."""
        c = as_float_array(consumption, "consumption", ndim=1)
        Pi = self.substitution_matrix
        return Pi.T @ (self.bliss_point - Pi @ c)


@dataclass(frozen=True)
class Agent:
    """
    One consumer in an exchange economy.

    Construction fails with NonSatiationError when the bliss point is not
    sufficiently far above the consumption implied by the endowment, i.e.
    when ``min(b / max(Pi @ e)) <= satiation_threshold``.

    Attributes:
        preferences: PreferenceSystem of the agent
        endowment: n-length endowment vector e
        wealth: Wealth transfer W received by the agent (default 0)
        satiation_threshold: Minimum non-satiation margin (default 1.5)
    """

    preferences: PreferenceSystem
    endowment: NDArray[np.float64]
    wealth: float = 0.0
    satiation_threshold: float = DEFAULT_SATIATION_THRESHOLD

    def __post_init__(self) -> None:
        e = as_float_array(self.endowment, "endowment", ndim=1)
        check_length(e, self.preferences.num_goods, "endowment")
        object.__setattr__(self, "endowment", e)
        object.__setattr__(self, "wealth", float(self.wealth))
        _check_non_satiation(
            self.preferences.bliss_point,
            self.preferences.substitution_matrix,
            e,
            self.satiation_threshold,
        )

    @property
    def bliss_point(self) -> NDArray[np.float64]:
        return self.preferences.bliss_point


@dataclass(frozen=True)
class CostStructure:
    """
    Quadratic production cost ``h @ q + 0.5 * q @ H @ q``.

    Only the symmetric part ``H = (J + J^T) / 2`` of the quadratic cost
    matrix affects costs, so J may be passed unsymmetrized.

    Attributes:
        linear_cost: n-length vector h (conceptually non-negative)
        quadratic_cost: n x n matrix J
    """

    linear_cost: NDArray[np.float64]
    quadratic_cost: NDArray[np.float64]

    def __post_init__(self) -> None:
        h = as_float_array(self.linear_cost, "linear_cost", ndim=1)
        J = as_float_array(self.quadratic_cost, "quadratic_cost", ndim=2)
        n = check_square(J, "quadratic_cost")
        check_length(h, n, "linear_cost")
        if np.any(h < 0):
            warnings.warn(
                f"linear_cost has negative components at {np.where(h < 0)[0].tolist()}. "
                "Marginal cost at zero output will be negative.",
                DataQualityWarning,
                stacklevel=3,
            )
        object.__setattr__(self, "linear_cost", h)
        object.__setattr__(self, "quadratic_cost", J)

    @property
    def symmetrized(self) -> NDArray[np.float64]:
        """H = (J + J^T) / 2."""
        return symmetrize(self.quadratic_cost)

    def cost(self, quantity: ArrayLike) -> float:
        q = as_float_array(quantity, "quantity", ndim=1)
        return float(self.linear_cost @ q + 0.5 * q @ self.symmetrized @ q)

    def marginal_cost(self, quantity: ArrayLike) -> NDArray[np.float64]:
        """Inverse supply curve: h + H @ q."""
        q = as_float_array(quantity, "quantity", ndim=1)
        return self.linear_cost + self.symmetrized @ q


@dataclass
class ExchangeEconomy:
    """
    Pure-exchange economy with m agents and n goods.

    All agents share one substitution matrix Pi and differ in their bliss
    points, endowments and wealth transfers. Wealth transfers redistribute
    wealth among agents and must sum to zero.

    The equilibrium is recomputed from the current fields on every call;
    nothing is cached.

    Attributes:
        substitution_matrix: n x n invertible matrix Pi
        bliss_points: m x n matrix, one bliss point per agent
        endowments: m x n matrix, one endowment per agent
        wealth_transfers: m-length vector W summing to zero (default zeros)
        satiation_threshold: Non-satiation margin for every agent
        tolerance: Tolerance for the zero-sum check on wealth transfers

    Example:
        >>> economy = ExchangeEconomy(
        ...     substitution_matrix=np.eye(2),
        ...     bliss_points=[[5, 5], [5, 5]],
        ...     endowments=[[0, 2], [2, 0]],
        ... )
        >>> result = economy.compute_equilibrium()
        >>> result.prices
        array([1., 1.])
    """

    substitution_matrix: NDArray[np.float64]
    bliss_points: NDArray[np.float64]
    endowments: NDArray[np.float64]
    wealth_transfers: NDArray[np.float64] | None = None
    satiation_threshold: float = DEFAULT_SATIATION_THRESHOLD
    tolerance: float = field(default=WEALTH_TOLERANCE, repr=False)

    def __post_init__(self) -> None:
        """Convert inputs to float64 arrays and validate."""
        Pi, bs, es, Ws = read_exchange_fields(self)
        self.substitution_matrix = Pi
        self.bliss_points = bs
        self.endowments = es
        self.wealth_transfers = Ws

    @classmethod
    def from_agents(
        cls,
        agents: Sequence[Agent],
        satiation_threshold: float | None = None,
    ) -> ExchangeEconomy:
        """Build an economy from Agent structs sharing one substitution matrix.

        The agents' ``wealth`` fields become the wealth transfer vector.
        The economy holds one satiation threshold for all agents; by default
        it is the smallest of the agents' own thresholds, so every agent that
        could be constructed also passes the economy's check.

        Raises:
            DimensionError: If no agents are given
            ConfigurationError: If agents use different substitution matrices
        """
        if len(agents) == 0:
            raise DimensionError("An exchange economy needs at least one agent.")
        if satiation_threshold is None:
            satiation_threshold = min(a.satiation_threshold for a in agents)
        Pi = agents[0].preferences.substitution_matrix
        for i, agent in enumerate(agents[1:], start=1):
            other = agent.preferences.substitution_matrix
            if other.shape != Pi.shape or not np.array_equal(other, Pi):
                raise ConfigurationError(
                    f"Agent {i} has a different substitution matrix than agent 0. "
                    f"All agents in an exchange economy share one Pi."
                )
        return cls(
            substitution_matrix=Pi,
            bliss_points=np.array([a.bliss_point for a in agents]),
            endowments=np.array([a.endowment for a in agents]),
            wealth_transfers=np.array([a.wealth for a in agents]),
            satiation_threshold=satiation_threshold,
        )

    @property
    def num_agents(self) -> int:
        """Number of agents m."""
        return self.bliss_points.shape[0]

    @property
    def num_goods(self) -> int:
        """Number of goods n."""
        return self.substitution_matrix.shape[0]

    @property
    def agents(self) -> list[Agent]:
        """Agent structs built from the current fields."""
        return [
            Agent(
                preferences=PreferenceSystem(self.substitution_matrix, self.bliss_points[i]),
                endowment=self.endowments[i],
                wealth=self.wealth_transfers[i],
                satiation_threshold=self.satiation_threshold,
            )
            for i in range(self.num_agents)
        ]

    @property
    def aggregate_bliss_point(self) -> NDArray[np.float64]:
        """b = sum of agents' bliss points."""
        return np.sum(self.bliss_points, axis=0)

    @property
    def aggregate_endowment(self) -> NDArray[np.float64]:
        """e = sum of agents' endowments."""
        return np.sum(self.endowments, axis=0)

    def compute_equilibrium(
        self,
        allocation_tolerance: float = ALLOCATION_TOLERANCE,
    ) -> "ExchangeEquilibriumResult":
        """Compute the competitive equilibrium.

        See ``pyequilibrium.algorithms.exchange.compute_exchange_equilibrium``.
        """
        from pyequilibrium.algorithms.exchange import compute_exchange_equilibrium
        return compute_exchange_equilibrium(self, allocation_tolerance=allocation_tolerance)

    def excess_demand(self, prices: ArrayLike) -> NDArray[np.float64]:
        """Aggregate demand minus aggregate endowment at the given prices."""
        from pyequilibrium.algorithms.exchange import compute_excess_demand
        return compute_excess_demand(self, prices)

    def representative_consumer(self) -> ExchangeEconomy:
        """Single-agent economy with aggregated bliss point and endowment."""
        from pyequilibrium.algorithms.exchange import representative_consumer
        return representative_consumer(self)


@dataclass
class ProductionEconomy:
    """
    Representative consumer facing a producer with quadratic costs.

    The consumer has quadratic preferences (Pi, b); the producer's cost is
    ``h @ q + 0.5 * q @ H @ q`` with ``H = (J + J^T) / 2``. The welfare
    weight mu is the planner's weight on production cost relative to
    consumer utility; it also converts utility into money in the price
    identity ``p = (1 / mu) * (Pi^T b - Pi^T Pi c)``.

    Fields may be reassigned between calls (e.g. a higher bliss point or
    another welfare weight). Every solver call reads the current values.

    Attributes:
        substitution_matrix: n x n invertible matrix Pi
        bliss_point: n-length vector b
        linear_cost: n-length vector h
        quadratic_cost: n x n matrix J
        welfare_weight: scalar mu (expected positive)

    Example:
        >>> economy = ProductionEconomy(
        ...     substitution_matrix=[[1.0]],
        ...     bliss_point=[10.0],
        ...     linear_cost=[0.5],
        ...     quadratic_cost=[[1.0]],
        ...     welfare_weight=1.0,
        ... )
        >>> result = economy.competitive_equilibrium()
        >>> result.quantity, result.prices
        (array([4.75]), array([5.25]))
    """

    substitution_matrix: NDArray[np.float64]
    bliss_point: NDArray[np.float64]
    linear_cost: NDArray[np.float64]
    quadratic_cost: NDArray[np.float64]
    welfare_weight: float = 1.0

    def __post_init__(self) -> None:
        """Convert inputs to float64 arrays and validate."""
        self.substitution_matrix = as_float_array(
            self.substitution_matrix, "substitution_matrix", ndim=2
        )
        self.bliss_point = as_float_array(self.bliss_point, "bliss_point", ndim=1)
        self.linear_cost = as_float_array(self.linear_cost, "linear_cost", ndim=1)
        self.quadratic_cost = as_float_array(self.quadratic_cost, "quadratic_cost", ndim=2)
        self.welfare_weight = float(self.welfare_weight)

        # Builds and validates both value structs
        _ = self.preferences
        costs = self.costs
        if costs.linear_cost.shape[0] != self.num_goods:
            raise DimensionError(
                f"Cost structure covers {costs.linear_cost.shape[0]} goods but "
                f"preferences cover {self.num_goods}."
            )
        if self.welfare_weight <= 0:
            warnings.warn(
                f"welfare_weight is {self.welfare_weight}; a positive weight is "
                "expected. Equilibria may fail the non-satiation check.",
                DataQualityWarning,
                stacklevel=3,
            )

    @classmethod
    def from_components(
        cls,
        preferences: PreferenceSystem,
        costs: CostStructure,
        welfare_weight: float = 1.0,
    ) -> ProductionEconomy:
        """Build an economy from PreferenceSystem and CostStructure structs."""
        return cls(
            substitution_matrix=preferences.substitution_matrix,
            bliss_point=preferences.bliss_point,
            linear_cost=costs.linear_cost,
            quadratic_cost=costs.quadratic_cost,
            welfare_weight=welfare_weight,
        )

    @property
    def num_goods(self) -> int:
        """Number of goods n."""
        return self.substitution_matrix.shape[0]

    @property
    def preferences(self) -> PreferenceSystem:
        """Representative consumer's preferences, from the current fields."""
        return PreferenceSystem(self.substitution_matrix, self.bliss_point)

    @property
    def costs(self) -> CostStructure:
        """Producer's cost structure, from the current fields."""
        return CostStructure(self.linear_cost, self.quadratic_cost)

    def competitive_equilibrium(self) -> "ProductionEquilibriumResult":
        """Competitive allocation c and price p."""
        from pyequilibrium.algorithms.production import compute_competitive_equilibrium
        return compute_competitive_equilibrium(self)

    def equilibrium_with_monopoly(self) -> "ProductionEquilibriumResult":
        """Monopoly quantity q and price pm."""
        from pyequilibrium.algorithms.production import compute_monopoly_equilibrium
        return compute_monopoly_equilibrium(self)

    def compute_surplus(self, regime: "Regime" = "competitive") -> "SurplusResult":
        """Consumer and producer surplus (single-good economies only)."""
        from pyequilibrium.algorithms.production import compute_surplus
        return compute_surplus(self, regime=regime)

    def deadweight_loss(self) -> float:
        """Total surplus lost under monopoly (single-good economies only)."""
        from pyequilibrium.algorithms.production import compute_deadweight_loss
        return compute_deadweight_loss(self)

    def supply_demand_curves(
        self,
        num_points: int = DEFAULT_CURVE_POINTS,
        max_quantity: float | None = None,
    ) -> "SupplyDemandCurves":
        """Inverse supply, demand and marginal revenue over a quantity grid."""
        from pyequilibrium.algorithms.production import compute_supply_demand_curves
        return compute_supply_demand_curves(
            self, num_points=num_points, max_quantity=max_quantity
        )
