"""Visualization utilities for equilibrium results (requires matplotlib)."""

from pyequilibrium.viz.plots import (
    plot_competitive_equilibrium,
    plot_monopoly,
    plot_exchange_allocations,
)

__all__ = [
    "plot_competitive_equilibrium",
    "plot_monopoly",
    "plot_exchange_allocations",
]
