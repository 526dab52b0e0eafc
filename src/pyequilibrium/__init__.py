"""
PyEquilibrium: Competitive equilibria of linear-quadratic economies.

Closed-form solvers for heterogeneous-agent exchange economies and
production economies with quadratic utility and quadratic costs.
"""

from pyequilibrium.core.economy import (
    PreferenceSystem,
    Agent,
    CostStructure,
    ExchangeEconomy,
    ProductionEconomy,
)
from pyequilibrium.core.result import (
    ExchangeEquilibriumResult,
    ProductionEquilibriumResult,
    SurplusResult,
    SupplyDemandCurves,
    StackedEquilibriumResult,
)
from pyequilibrium.core.exceptions import (
    PyEquilibriumError,
    DataValidationError,
    DimensionError,
    ValueRangeError,
    NaNInfError,
    SingularMatrixError,
    ConfigurationError,
    NonSatiationError,
    DegenerateNormalizationError,
    EquilibriumNonexistenceError,
    DataQualityWarning,
    NumericalInstabilityWarning,
)
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

__version__ = "0.1.0"

__all__ = [
    # Data structures
    "PreferenceSystem",
    "Agent",
    "CostStructure",
    "ExchangeEconomy",
    "ProductionEconomy",
    # Result types
    "ExchangeEquilibriumResult",
    "ProductionEquilibriumResult",
    "SurplusResult",
    "SupplyDemandCurves",
    "StackedEquilibriumResult",
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
    # Dynamic and contingent-claims economies
    "build_dynamic_economy",
    "build_contingent_claims_economy",
    "compute_dynamic_equilibrium",
    "compute_contingent_claims_equilibrium",
    # Exceptions
    "PyEquilibriumError",
    "DataValidationError",
    "DimensionError",
    "ValueRangeError",
    "NaNInfError",
    "SingularMatrixError",
    "ConfigurationError",
    "NonSatiationError",
    "DegenerateNormalizationError",
    "EquilibriumNonexistenceError",
    # Warnings
    "DataQualityWarning",
    "NumericalInstabilityWarning",
]
