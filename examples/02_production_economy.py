"""Example: Competition, monopoly and welfare in a production economy.

A representative consumer with quadratic utility buys from a producer
with quadratic costs. This example compares the competitive outcome with
the monopoly outcome and measures the welfare cost of market power.
"""

import numpy as np

from pyequilibrium import ProductionEconomy

# =============================================================================
# Example 1: Single Good
# =============================================================================

print("=" * 70)
print("Example 1: Single Good")
print("=" * 70)

economy = ProductionEconomy(
    substitution_matrix=[[1.0]],
    bliss_point=[10.0],
    linear_cost=[0.5],
    quadratic_cost=[[1.0]],
    welfare_weight=1.0,
)

competitive = economy.competitive_equilibrium()
monopoly = economy.equilibrium_with_monopoly()

print(competitive.summary())
print(monopoly.summary())

# =============================================================================
# Example 2: Surplus and Deadweight Loss
# =============================================================================

print("\n" + "=" * 70)
print("Example 2: Surplus and Deadweight Loss")
print("=" * 70)

for regime in ("competitive", "monopoly"):
    surplus = economy.compute_surplus(regime=regime)
    print(f"{regime:>12}: CS = {surplus.consumer_surplus:.4f}, "
          f"PS = {surplus.producer_surplus:.4f}, "
          f"total = {surplus.total_surplus:.4f}")

print(f"Deadweight loss of monopoly: {economy.deadweight_loss():.4f}")

# =============================================================================
# Example 3: Comparative Statics
# =============================================================================

print("\n" + "=" * 70)
print("Example 3: Comparative Statics")
print("=" * 70)

# Fields can be reassigned; every call recomputes from the current values
for bliss in (10.0, 12.0, 15.0):
    economy.bliss_point = np.array([bliss])
    result = economy.competitive_equilibrium()
    print(f"b = {bliss:>5.1f}: c = {result.quantity[0]:.4f}, p = {result.prices[0]:.4f}")

# =============================================================================
# Example 4: Two Goods with Cross-Cost Effects
# =============================================================================

print("\n" + "=" * 70)
print("Example 4: Two Goods with Cross-Cost Effects")
print("=" * 70)

# Only the symmetric part of J matters: H = [[1, 0.5], [0.5, 1]]
two_goods = ProductionEconomy(
    substitution_matrix=np.eye(2),
    bliss_point=[10.0, 10.0],
    linear_cost=[1.0, 1.0],
    quadratic_cost=[[1.0, 1.0], [0.0, 1.0]],
)

competitive = two_goods.competitive_equilibrium()
monopoly = two_goods.equilibrium_with_monopoly()
print(f"Competitive: c = {np.round(competitive.quantity, 4)}, p = {np.round(competitive.prices, 4)}")
print(f"Monopoly:    q = {np.round(monopoly.quantity, 4)}, p = {np.round(monopoly.prices, 4)}")
print(f"Monopoly markup over marginal cost: {np.round(monopoly.markup, 4)}")

# =============================================================================
# Example 5: Plots (requires matplotlib)
# =============================================================================

try:
    import matplotlib
    matplotlib.use("Agg")
    from pyequilibrium.viz import plot_competitive_equilibrium, plot_monopoly

    economy.bliss_point = np.array([10.0])
    fig, _ = plot_competitive_equilibrium(economy)
    fig.savefig("competitive_equilibrium.png", dpi=100)
    fig, _ = plot_monopoly(economy)
    fig.savefig("monopoly.png", dpi=100)
    print("\nSaved competitive_equilibrium.png and monopoly.png")
except ImportError:
    print("\nmatplotlib not installed; skipping plots")
