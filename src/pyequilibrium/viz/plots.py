"""Plotting functions for equilibrium results.

The solvers only hand over numeric series; nothing here feeds back into a
computation. matplotlib is imported inside each function so the core
package works without it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from pyequilibrium.core.economy import ProductionEconomy
    from pyequilibrium.core.result import ExchangeEquilibriumResult


def _get_axes(ax: Any, figsize: tuple[int, int]) -> tuple[Any, Any]:
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()
    return fig, ax


def plot_competitive_equilibrium(
    economy: ProductionEconomy,
    num_points: int = 100,
    figsize: tuple[int, int] = (8, 6),
    ax: Any = None,
) -> tuple[Any, Any]:
    """
    Plot inverse supply and demand of a single-good economy.

    Shows the equilibrium point and shades consumer surplus (between demand
    and price) and producer surplus (between price and supply).

    Args:
        economy: ProductionEconomy with one good
        num_points: Grid size for the curves
        figsize: Figure size as (width, height)
        ax: Optional matplotlib axes to draw on

    Returns:
        Tuple of (figure, axes) matplotlib objects

    Example:
        >>> from pyequilibrium.viz import plot_competitive_equilibrium
        >>> fig, ax = plot_competitive_equilibrium(economy)
        >>> fig.savefig("equilibrium.png")
    """
    from pyequilibrium.algorithms.production import (
        compute_competitive_equilibrium,
        compute_supply_demand_curves,
    )

    fig, ax = _get_axes(ax, figsize)

    curves = compute_supply_demand_curves(economy, num_points=num_points)
    equilibrium = compute_competitive_equilibrium(economy)
    c = float(equilibrium.quantity[0])
    p = float(equilibrium.prices[0])

    ax.plot(curves.quantities, curves.supply, color="tab:blue", label="Supply")
    ax.plot(curves.quantities, curves.demand, color="tab:orange", label="Demand")

    traded = curves.quantities <= c
    q_traded = curves.quantities[traded]
    ax.fill_between(
        q_traded, curves.demand[traded], p,
        color="tab:orange", alpha=0.2, label="Consumer surplus",
    )
    ax.fill_between(
        q_traded, p, curves.supply[traded],
        color="tab:blue", alpha=0.2, label="Producer surplus",
    )

    ax.scatter([c], [p], color="black", zorder=5)
    ax.annotate(
        f"({c:.2f}, {p:.2f})",
        (c, p),
        textcoords="offset points",
        xytext=(8, 8),
        fontsize=9,
    )

    ax.set_xlim(0, curves.quantities[-1])
    ax.set_ylim(bottom=0)
    ax.set_xlabel("Quantity")
    ax.set_ylabel("Price")
    ax.set_title("Competitive Equilibrium")
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_monopoly(
    economy: ProductionEconomy,
    num_points: int = 100,
    figsize: tuple[int, int] = (8, 6),
    ax: Any = None,
) -> tuple[Any, Any]:
    """
    Plot the monopoly outcome against the competitive one (single good).

    Draws supply, demand and the monopolist's marginal revenue curve,
    marks both equilibria and shades the deadweight loss triangle.

    Args:
        economy: ProductionEconomy with one good
        num_points: Grid size for the curves
        figsize: Figure size as (width, height)
        ax: Optional matplotlib axes to draw on

    Returns:
        Tuple of (figure, axes)
    """
    from pyequilibrium.algorithms.production import (
        compute_competitive_equilibrium,
        compute_monopoly_equilibrium,
        compute_supply_demand_curves,
    )

    fig, ax = _get_axes(ax, figsize)

    curves = compute_supply_demand_curves(economy, num_points=num_points)
    competitive = compute_competitive_equilibrium(economy)
    monopoly = compute_monopoly_equilibrium(economy)
    c, p = float(competitive.quantity[0]), float(competitive.prices[0])
    q, pm = float(monopoly.quantity[0]), float(monopoly.prices[0])

    ax.plot(curves.quantities, curves.supply, color="tab:blue", label="Supply")
    ax.plot(curves.quantities, curves.demand, color="tab:orange", label="Demand")
    ax.plot(
        curves.quantities, curves.marginal_revenue,
        color="tab:green", linestyle="--", label="Marginal revenue",
    )

    lost = (curves.quantities >= q) & (curves.quantities <= c)
    ax.fill_between(
        curves.quantities[lost], curves.demand[lost], curves.supply[lost],
        color="tab:red", alpha=0.25, label="Deadweight loss",
    )

    ax.scatter([c], [p], color="black", zorder=5, label="Competitive")
    ax.scatter([q], [pm], color="tab:red", marker="s", zorder=5, label="Monopoly")
    ax.vlines(q, 0, pm, color="tab:red", linestyle=":", alpha=0.7)

    ax.set_xlim(0, curves.quantities[-1])
    ax.set_ylim(bottom=0)
    ax.set_xlabel("Quantity")
    ax.set_ylabel("Price")
    ax.set_title("Monopoly vs. Competitive Equilibrium")
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_exchange_allocations(
    result: ExchangeEquilibriumResult,
    goods: list[str] | None = None,
    figsize: tuple[int, int] = (8, 6),
    ax: Any = None,
) -> tuple[Any, Any]:
    """
    Grouped bar chart of equilibrium allocations and endowments per agent.

    Args:
        result: ExchangeEquilibriumResult
        goods: Optional names of the goods (default "Good 0", "Good 1", ...)
        figsize: Figure size
        ax: Optional matplotlib axes

    Returns:
        Tuple of (figure, axes)
    """
    fig, ax = _get_axes(ax, figsize)

    m, n = result.allocations.shape
    labels = goods if goods is not None else [f"Good {j}" for j in range(n)]
    if len(labels) != n:
        raise ValueError(f"Expected {n} good names, got {len(labels)}")

    width = 0.8 / m
    x = np.arange(n)
    for i in range(m):
        offset = (i - (m - 1) / 2) * width
        ax.bar(x + offset, result.allocations[i], width, label=f"Agent {i}")
        ax.scatter(
            x + offset, result.endowments[i],
            color="black", marker="_", s=200, zorder=5,
            label="Endowment" if i == 0 else None,
        )

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylabel("Quantity")
    ax.set_title("Equilibrium Allocations")
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, axis="y", alpha=0.3)

    return fig, ax
