"""Default thresholds and tolerances for PyEquilibrium.

Every constant here is a default only: economies and solver functions
accept keyword arguments that override them per instance or per call.
"""

# =============================================================================
# NON-SATIATION
# =============================================================================

# An agent's bliss point must exceed the largest component of Pi @ e by
# this factor. A heuristic guard, not a derived bound.
DEFAULT_SATIATION_THRESHOLD = 1.5

# =============================================================================
# TOLERANCES
# =============================================================================

# Wealth transfers must sum to zero up to this tolerance, scaled by
# max(1, sum(|W|)).
WEALTH_TOLERANCE = 1e-10

# The unnormalized numeraire price counts as zero below this tolerance,
# scaled by max(1, ||p_raw||).
NUMERAIRE_TOLERANCE = 1e-12

# Allocation components down to -ALLOCATION_TOLERANCE are accepted as zero.
ALLOCATION_TOLERANCE = 1e-9

# =============================================================================
# DIAGNOSTICS
# =============================================================================

# Condition numbers above this emit a NumericalInstabilityWarning.
CONDITION_NUMBER_WARNING = 1e12

# =============================================================================
# CURVES
# =============================================================================

# Grid size for supply/demand curve series.
DEFAULT_CURVE_POINTS = 100
