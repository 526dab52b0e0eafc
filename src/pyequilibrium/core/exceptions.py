"""Custom exceptions and warnings for PyEquilibrium.

This module provides a hierarchy of exceptions for specific error types,
all inheriting from ValueError so that existing ``except ValueError``
handlers keep working.

Exception Hierarchy:
    PyEquilibriumError (ValueError)
    ├── DataValidationError
    │   ├── DimensionError
    │   ├── ValueRangeError
    │   ├── NaNInfError
    │   └── SingularMatrixError
    ├── ConfigurationError
    ├── NonSatiationError
    ├── DegenerateNormalizationError
    └── EquilibriumNonexistenceError

Warning Classes:
    DataQualityWarning (UserWarning)
    NumericalInstabilityWarning (UserWarning)

None of these errors are transient. Every one of them describes inputs
that cannot produce a valid equilibrium, so callers should change the
bliss points, endowments, costs or wealth transfers and solve again.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class PyEquilibriumError(ValueError):
    """Base exception for all PyEquilibrium errors.

    Inherits from ValueError - code that catches ValueError will also
    catch every PyEquilibrium error.

    Example:
        >>> try:
        ...     economy = ExchangeEconomy(Pi, bliss_points, endowments)
        ... except PyEquilibriumError as e:
        ...     print(f"PyEquilibrium error: {e}")
    """

    pass


# =============================================================================
# DATA VALIDATION EXCEPTIONS
# =============================================================================


class DataValidationError(PyEquilibriumError):
    """Raised when input data fails validation checks.

    This is the base class for all data-related validation errors.
    Use more specific subclasses when possible.
    """

    pass


class DimensionError(DataValidationError):
    """Raised when array dimensions are incompatible.

    Common causes:
        - Substitution matrix is not square
        - Bliss point or endowment length differs from the number of goods
        - Wealth transfer vector length differs from the number of agents
        - Surplus requested for an economy with more than one good

    Example:
        >>> ProductionEconomy(np.eye(2), [10, 10], ...).compute_surplus()
        DimensionError: Surplus is only defined for a single-good economy...
    """

    pass


class ValueRangeError(DataValidationError):
    """Raised when values are outside expected ranges.

    Common causes:
        - Discount factor outside (0, 1]
        - State probabilities that are not positive or do not sum to one
        - Zero welfare weight when recovering prices
    """

    pass


class NaNInfError(DataValidationError):
    """Raised when NaN or Inf values are detected in input data."""

    pass


class SingularMatrixError(DataValidationError):
    """Raised when a matrix that must be inverted is singular.

    The substitution matrix must be invertible, and so must the linear
    systems solved for the production allocations.

    Suggested fixes:
        1. Check that no row of the substitution matrix is a combination
           of the others
        2. Check the quadratic cost matrix together with the welfare weight
    """

    pass


# =============================================================================
# EQUILIBRIUM EXCEPTIONS
# =============================================================================


class ConfigurationError(PyEquilibriumError):
    """Raised when an economy is configured inconsistently.

    The wealth transfer vector redistributes wealth among agents and must
    sum to zero: no wealth is created or destroyed.

    Example:
        >>> ExchangeEconomy(Pi, bs, es, wealth_transfers=[1.0, 0.5])
        ConfigurationError: Wealth transfers must sum to zero, got 1.5...
    """

    pass


class NonSatiationError(PyEquilibriumError):
    """Raised when quadratic utility leaves its region of validity.

    Quadratic utility only makes economic sense where marginal utility is
    positive. This error is raised when

        - a bliss point is too close to (or below) the consumption implied
          by the agent's endowment, checked at construction, or
        - a solved production allocation has Pi @ c >= b in some component.

    Suggested fix: set bliss points further away.
    """

    pass


class DegenerateNormalizationError(PyEquilibriumError):
    """Raised when the numeraire price is numerically zero.

    Prices are normalized so that the first good costs exactly 1. When the
    unnormalized price of the first good is zero, no such normalization
    exists.
    """

    pass


class EquilibriumNonexistenceError(PyEquilibriumError):
    """Raised when the computed allocation has a negative component.

    The closed-form solution ignores non-negativity constraints. When it
    assigns a negative quantity to some agent, no interior competitive
    equilibrium exists for the given inputs.

    Attributes:
        allocations: The offending allocation(s), kept for diagnostics.
    """

    def __init__(self, message: str, allocations: Any = None) -> None:
        super().__init__(message)
        self.allocations = allocations


# =============================================================================
# WARNINGS
# =============================================================================


class DataQualityWarning(UserWarning):
    """Warning for suspicious inputs that don't prevent computation.

    Emitted when:
        - The linear cost vector has negative components
        - The welfare weight is not strictly positive

    Example:
        >>> import warnings
        >>> warnings.filterwarnings('error', category=DataQualityWarning)
    """

    pass


class NumericalInstabilityWarning(UserWarning):
    """Warning for potential numerical issues in computations.

    Emitted when the substitution matrix or a linear system being solved
    is ill-conditioned. Results may be less reliable when this warning
    appears.
    """

    pass
