"""Equilibrium solvers for linear-quadratic economies."""

from pyequilibrium.algorithms.exchange import (
    compute_exchange_equilibrium,
    compute_demand,
    compute_excess_demand,
    representative_consumer,
)
from pyequilibrium.algorithms.production import (
    compute_competitive_equilibrium,
    compute_monopoly_equilibrium,
    compute_surplus,
    compute_deadweight_loss,
    compute_supply_demand_curves,
)
from pyequilibrium.algorithms.intertemporal import (
    build_dynamic_economy,
    build_contingent_claims_economy,
    compute_dynamic_equilibrium,
    compute_contingent_claims_equilibrium,
)

__all__ = [
    # Exchange economy
    "compute_exchange_equilibrium",
    "compute_demand",
    "compute_excess_demand",
    "representative_consumer",
    # Production economy
    "compute_competitive_equilibrium",
    "compute_monopoly_equilibrium",
    "compute_surplus",
    "compute_deadweight_loss",
    "compute_supply_demand_curves",
    # Stacked economies
    "build_dynamic_economy",
    "build_contingent_claims_economy",
    "compute_dynamic_equilibrium",
    "compute_contingent_claims_equilibrium",
]
