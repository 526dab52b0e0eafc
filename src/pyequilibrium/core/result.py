"""Result dataclasses for equilibrium computations.

This module provides result containers returned by the solvers:

    - ExchangeEquilibriumResult: prices, allocations and marginal utilities
      of wealth in a pure-exchange economy
    - ProductionEquilibriumResult: quantity and price under competition or
      monopoly in a production economy
    - SurplusResult: consumer and producer surplus in a single-good market
    - SupplyDemandCurves: numeric curve series for plotting
    - StackedEquilibriumResult: exchange equilibrium of a dynamic or
      contingent-claims economy, reshaped per period / state
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pyequilibrium.core.mixins import ResultSummaryMixin
from pyequilibrium.core.types import Regime


@dataclass(frozen=True)
class ExchangeEquilibriumResult:
    """
    Competitive equilibrium of a pure-exchange economy.

    Prices are normalized so that the first good is the numeraire
    (``prices[0] == 1.0``). Allocations clear the market: their sum over
    agents equals the aggregate endowment.

    Attributes:
        prices: n-length equilibrium price vector p
        allocations: m x n matrix, row i is agent i's consumption c_i
        marginal_utilities: m-length vector of marginal utilities of wealth mu_i
        endowments: m x n matrix of the endowments the solve used
        computation_time_ms: Time taken to compute result in milliseconds
    """

    prices: NDArray[np.float64]
    allocations: NDArray[np.float64]
    marginal_utilities: NDArray[np.float64]
    endowments: NDArray[np.float64]
    computation_time_ms: float

    @property
    def num_agents(self) -> int:
        return self.allocations.shape[0]

    @property
    def num_goods(self) -> int:
        return self.allocations.shape[1]

    @property
    def aggregate_consumption(self) -> NDArray[np.float64]:
        """Sum of allocations over agents."""
        return np.sum(self.allocations, axis=0)

    @property
    def excess_demand(self) -> NDArray[np.float64]:
        """Aggregate consumption minus aggregate endowment (zero at equilibrium)."""
        return self.aggregate_consumption - np.sum(self.endowments, axis=0)

    def is_market_clearing(self, tolerance: float = 1e-8) -> bool:
        """True if every component of the excess demand is within tolerance."""
        return bool(np.all(np.abs(self.excess_demand) <= tolerance))

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        lines = [m._format_header("EXCHANGE ECONOMY EQUILIBRIUM REPORT")]

        lines.append(m._format_section("Economy"))
        lines.append(m._format_metric("Agents", self.num_agents))
        lines.append(m._format_metric("Goods", self.num_goods))
        lines.append(m._format_metric("Market Clearing", self.is_market_clearing()))
        lines.append(
            m._format_metric("Max |Excess Demand|", float(np.max(np.abs(self.excess_demand))))
        )

        lines.append(m._format_section("Prices (good 0 = numeraire)"))
        lines.append(f"  {m._format_vector(self.prices)}")

        lines.append(m._format_section("Allocations"))
        for i in range(self.num_agents):
            lines.append(
                f"  Agent {i}: c = {m._format_vector(self.allocations[i])}, "
                f"mu = {m._format_value(float(self.marginal_utilities[i]))}"
            )

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "prices": self.prices.tolist(),
            "allocations": self.allocations.tolist(),
            "marginal_utilities": self.marginal_utilities.tolist(),
            "excess_demand": self.excess_demand.tolist(),
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        return (
            f"ExchangeEquilibriumResult(agents={self.num_agents}, goods={self.num_goods}, "
            f"{self.computation_time_ms:.2f}ms)"
        )


@dataclass(frozen=True)
class ProductionEquilibriumResult:
    """
    Equilibrium of a production economy under one market regime.

    Under competition price equals marginal cost. A monopolist restricts
    output, so under monopoly price exceeds marginal cost and the gap
    shows up as a positive markup.

    Attributes:
        quantity: n-length allocation (c under competition, q under monopoly)
        prices: n-length price vector (p or pm)
        marginal_cost: n-length marginal cost h + H @ quantity
        regime: "competitive" or "monopoly"
        welfare_weight: Welfare weight mu used in the solve
        computation_time_ms: Time taken in milliseconds
    """

    quantity: NDArray[np.float64]
    prices: NDArray[np.float64]
    marginal_cost: NDArray[np.float64]
    regime: Regime
    welfare_weight: float
    computation_time_ms: float

    @property
    def num_goods(self) -> int:
        return self.quantity.shape[0]

    @property
    def markup(self) -> NDArray[np.float64]:
        """Price minus marginal cost, per good."""
        return self.prices - self.marginal_cost

    @property
    def revenue(self) -> float:
        return float(self.prices @ self.quantity)

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        lines = [m._format_header(f"{self.regime.upper()} PRODUCTION EQUILIBRIUM REPORT")]

        lines.append(m._format_section("Metrics"))
        lines.append(m._format_metric("Goods", self.num_goods))
        lines.append(m._format_metric("Welfare Weight (mu)", self.welfare_weight))
        lines.append(m._format_metric("Revenue", self.revenue))

        lines.append(m._format_section("Quantities"))
        lines.append(f"  {m._format_vector(self.quantity)}")
        lines.append(m._format_section("Prices"))
        lines.append(f"  {m._format_vector(self.prices)}")
        lines.append(m._format_section("Markup over Marginal Cost"))
        lines.append(f"  {m._format_vector(self.markup)}")

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "regime": self.regime,
            "quantity": self.quantity.tolist(),
            "prices": self.prices.tolist(),
            "marginal_cost": self.marginal_cost.tolist(),
            "markup": self.markup.tolist(),
            "welfare_weight": self.welfare_weight,
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        return (
            f"ProductionEquilibriumResult({self.regime}, goods={self.num_goods}, "
            f"{self.computation_time_ms:.2f}ms)"
        )


@dataclass(frozen=True)
class SurplusResult:
    """
    Consumer and producer surplus in a single-good market.

    Consumer surplus is the area between the inverse demand curve and the
    price up to the traded quantity; producer surplus is the area between
    the price and the inverse supply curve.

    Attributes:
        consumer_surplus: Integral of demand from 0 to quantity, minus price * quantity
        producer_surplus: Price * quantity, minus integral of supply from 0 to quantity
        quantity: Traded quantity
        price: Market price
        regime: "competitive" or "monopoly"
    """

    consumer_surplus: float
    producer_surplus: float
    quantity: float
    price: float
    regime: Regime

    @property
    def total_surplus(self) -> float:
        return self.consumer_surplus + self.producer_surplus

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        lines = [m._format_header(f"{self.regime.upper()} SURPLUS REPORT")]
        lines.append(m._format_section("Market"))
        lines.append(m._format_metric("Quantity", self.quantity))
        lines.append(m._format_metric("Price", self.price))
        lines.append(m._format_section("Surplus"))
        lines.append(m._format_metric("Consumer Surplus", self.consumer_surplus))
        lines.append(m._format_metric("Producer Surplus", self.producer_surplus))
        lines.append(m._format_metric("Total Surplus", self.total_surplus))
        lines.append("=" * 80)
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "regime": self.regime,
            "consumer_surplus": self.consumer_surplus,
            "producer_surplus": self.producer_surplus,
            "total_surplus": self.total_surplus,
            "quantity": self.quantity,
            "price": self.price,
        }

    def __repr__(self) -> str:
        return (
            f"SurplusResult({self.regime}, cs={self.consumer_surplus:.4f}, "
            f"ps={self.producer_surplus:.4f})"
        )


@dataclass(frozen=True)
class SupplyDemandCurves:
    """
    Inverse supply, demand and marginal revenue curves of a single-good market.

    All arrays share the quantity grid.

    Attributes:
        quantities: Quantity grid starting at 0
        demand: Inverse demand (1 / mu) * (Pi * b - Pi^2 * x)
        supply: Inverse supply h + H * x
        marginal_revenue: Monopolist's marginal revenue (1 / mu) * (Pi * b - 2 * Pi^2 * x)
    """

    quantities: NDArray[np.float64]
    demand: NDArray[np.float64]
    supply: NDArray[np.float64]
    marginal_revenue: NDArray[np.float64]


@dataclass(frozen=True)
class StackedEquilibriumResult:
    """
    Equilibrium of an economy stacked over periods or states.

    Dynamic and contingent-claims economies are solved as one static
    exchange economy over K blocks of n goods each. This result reshapes
    the static solution so that block k holds the prices and allocations
    of period (or state) k.

    Attributes:
        prices: K x n matrix of prices per block
        allocations: m x K x n array of allocations per agent and block
        marginal_utilities: m-length vector of marginal utilities of wealth
        block_weights: K-length weights (beta^t or state probabilities)
        kind: "dynamic" or "contingent_claims"
        stacked_result: The underlying static ExchangeEquilibriumResult
    """

    prices: NDArray[np.float64]
    allocations: NDArray[np.float64]
    marginal_utilities: NDArray[np.float64]
    block_weights: NDArray[np.float64]
    kind: Literal["dynamic", "contingent_claims"]
    stacked_result: ExchangeEquilibriumResult

    @property
    def num_blocks(self) -> int:
        return self.prices.shape[0]

    @property
    def computation_time_ms(self) -> float:
        return self.stacked_result.computation_time_ms

    def summary(self) -> str:
        """Return human-readable summary report."""
        m = ResultSummaryMixin
        title = "DYNAMIC" if self.kind == "dynamic" else "CONTINGENT CLAIMS"
        block = "Period" if self.kind == "dynamic" else "State"
        lines = [m._format_header(f"{title} EQUILIBRIUM REPORT")]

        lines.append(m._format_section("Economy"))
        lines.append(m._format_metric("Agents", self.allocations.shape[0]))
        lines.append(m._format_metric(f"{block}s", self.num_blocks))
        lines.append(m._format_metric("Goods per " + block.lower(), self.prices.shape[1]))

        lines.append(m._format_section(f"Prices by {block.lower()}"))
        for k in range(self.num_blocks):
            lines.append(
                f"  {block} {k} (weight {self.block_weights[k]:.4f}): "
                f"{m._format_vector(self.prices[k])}"
            )

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "kind": self.kind,
            "prices": self.prices.tolist(),
            "allocations": self.allocations.tolist(),
            "marginal_utilities": self.marginal_utilities.tolist(),
            "block_weights": self.block_weights.tolist(),
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        return (
            f"StackedEquilibriumResult({self.kind}, blocks={self.num_blocks}, "
            f"{self.computation_time_ms:.2f}ms)"
        )
