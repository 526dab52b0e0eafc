"""Example: Economies over time and under uncertainty.

Both cases reuse the static exchange solver by stacking periods (or
states of nature) into one larger economy:

1. A three-period economy with discounting
2. Complete markets in Arrow securities over two states
"""

import numpy as np

from pyequilibrium import (
    compute_contingent_claims_equilibrium,
    compute_dynamic_equilibrium,
)

# =============================================================================
# Example 1: Dynamic Economy
# =============================================================================

print("=" * 70)
print("Example 1: Dynamic Economy (beta = 0.95, T = 3)")
print("=" * 70)

result = compute_dynamic_equilibrium(
    substitution_matrix=np.eye(2),
    bliss_points=[[5.0, 5.0], [5.0, 5.0]],
    endowments=[[0.0, 2.0], [2.0, 0.0]],
    discount_factor=0.95,
    horizon=3,
)

print(result.summary())
for i in range(result.allocations.shape[0]):
    print(f"Agent {i} consumption by period:\n{np.round(result.allocations[i], 4)}")

# =============================================================================
# Example 2: Contingent Claims
# =============================================================================

print("\n" + "=" * 70)
print("Example 2: Contingent Claims (two states)")
print("=" * 70)

# Endowments are indexed agent x state x good. Agents hold opposite
# bundles in state 0 and the same bundle in state 1. The aggregate
# endowment is the same in both states, so agents fully insure.
state_endowments = [
    [[0.0, 2.0], [1.0, 1.0]],
    [[2.0, 0.0], [1.0, 1.0]],
]

result = compute_contingent_claims_equilibrium(
    substitution_matrix=np.eye(2),
    bliss_points=[[5.0, 5.0], [5.0, 5.0]],
    endowments=state_endowments,
    probabilities=[0.4, 0.6],
)

print(result.summary())
for i in range(result.allocations.shape[0]):
    print(f"Agent {i} consumption by state:\n{np.round(result.allocations[i], 4)}")
