"""Core data structures for PyEquilibrium."""

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

__all__ = [
    "PreferenceSystem",
    "Agent",
    "CostStructure",
    "ExchangeEconomy",
    "ProductionEconomy",
    "ExchangeEquilibriumResult",
    "ProductionEquilibriumResult",
    "SurplusResult",
    "SupplyDemandCurves",
    "StackedEquilibriumResult",
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
