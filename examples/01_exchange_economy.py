"""Example: Competitive equilibrium of a pure-exchange economy.

This module walks through the exchange solver:

1. A symmetric two-agent economy where the answer is known by symmetry
2. Heterogeneous tastes and a wealth transfer between agents
3. Aggregation: the representative consumer prices the economy
4. What happens when no interior equilibrium exists
"""

import numpy as np

from pyequilibrium import (
    Agent,
    ExchangeEconomy,
    PreferenceSystem,
    EquilibriumNonexistenceError,
    representative_consumer,
)

# =============================================================================
# Example 1: Symmetric Economy
# =============================================================================

print("=" * 70)
print("Example 1: Symmetric Economy")
print("=" * 70)

# Both agents want 5 units of each good. Agent 0 owns 2 units of good 1,
# agent 1 owns 2 units of good 0. Trade splits everything evenly.
economy = ExchangeEconomy(
    substitution_matrix=np.eye(2),
    bliss_points=[[5.0, 5.0], [5.0, 5.0]],
    endowments=[[0.0, 2.0], [2.0, 0.0]],
)

result = economy.compute_equilibrium()
print(result.summary())

# =============================================================================
# Example 2: Heterogeneous Tastes and a Wealth Transfer
# =============================================================================

print("\n" + "=" * 70)
print("Example 2: Heterogeneous Tastes and a Wealth Transfer")
print("=" * 70)

# Pi mixes the goods: good 0 also contributes to the second characteristic
Pi = np.array([[1.0, 0.0], [0.5, 1.0]])

agents = [
    Agent(PreferenceSystem(Pi, [11.0, 13.5]), endowment=[3.0, 1.0], wealth=1.0),
    Agent(PreferenceSystem(Pi, [9.0, 12.5]), endowment=[1.0, 3.0], wealth=-1.0),
]
economy = ExchangeEconomy.from_agents(agents)
result = economy.compute_equilibrium()

print(f"Prices (good 0 = numeraire): {np.round(result.prices, 4)}")
for i, allocation in enumerate(result.allocations):
    print(f"  Agent {i}: consumes {np.round(allocation, 4)}, "
          f"mu = {result.marginal_utilities[i]:.4f}")
print(f"Market clears: {result.is_market_clearing()}")

# Excess demand is zero at the equilibrium and positive for goods priced too low
print(f"Excess demand at equilibrium: {np.round(economy.excess_demand(result.prices), 10)}")
print(f"Excess demand at p = [1, 0.5]: {np.round(economy.excess_demand([1.0, 0.5]), 4)}")

# =============================================================================
# Example 3: Representative Consumer
# =============================================================================

print("\n" + "=" * 70)
print("Example 3: Representative Consumer")
print("=" * 70)

aggregate = representative_consumer(economy)
aggregate_result = aggregate.compute_equilibrium()

print(f"Aggregate bliss point: {aggregate.bliss_points[0]}")
print(f"Aggregate endowment:   {aggregate.endowments[0]}")
print(f"Prices, m agents:            {np.round(result.prices, 6)}")
print(f"Prices, representative agent: {np.round(aggregate_result.prices, 6)}")

# =============================================================================
# Example 4: Nonexistence
# =============================================================================

print("\n" + "=" * 70)
print("Example 4: When No Interior Equilibrium Exists")
print("=" * 70)

# Tastes are so skewed that the closed-form allocation goes negative
skewed = ExchangeEconomy(
    substitution_matrix=np.eye(2),
    bliss_points=[[2.0, 20.0], [20.0, 2.0]],
    endowments=[[0.0, 1.0], [1.0, 0.0]],
)

try:
    skewed.compute_equilibrium()
except EquilibriumNonexistenceError as e:
    print(f"EquilibriumNonexistenceError: {e}")
    print(f"Offending allocations:\n{e.allocations}")
