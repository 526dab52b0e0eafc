#!/usr/bin/env python3
"""Generate static plot images for the front page documentation."""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

# Ensure we're using a non-interactive backend
plt.switch_backend('Agg')

from pyequilibrium import ExchangeEconomy, ProductionEconomy
from pyequilibrium.viz import (
    plot_competitive_equilibrium,
    plot_monopoly,
    plot_exchange_allocations,
)


def main():
    # Output directory
    output_dir = Path(__file__).parent / "_static"
    output_dir.mkdir(exist_ok=True)

    production = ProductionEconomy(
        substitution_matrix=[[1.0]],
        bliss_point=[10.0],
        linear_cost=[0.5],
        quadratic_cost=[[1.0]],
    )

    # 1. Competitive equilibrium with surplus areas
    print("Generating competitive equilibrium plot...")
    fig, ax = plot_competitive_equilibrium(production, figsize=(6, 6))
    fig.savefig(output_dir / "front_competitive.png", dpi=150, bbox_inches="tight")
    plt.close(fig)

    # 2. Monopoly with deadweight loss
    print("Generating monopoly plot...")
    fig, ax = plot_monopoly(production, figsize=(6, 6))
    fig.savefig(output_dir / "front_monopoly.png", dpi=150, bbox_inches="tight")
    plt.close(fig)

    # 3. Exchange allocations: three agents, three goods
    print("Generating exchange allocation plot...")
    exchange = ExchangeEconomy(
        substitution_matrix=np.diag([1.0, 2.0, 1.5]),
        bliss_points=np.array([
            [20.0, 25.0, 22.0],
            [18.0, 30.0, 20.0],
            [22.0, 28.0, 24.0],
        ]),
        endowments=np.array([
            [3.0, 1.0, 2.0],
            [1.0, 4.0, 2.0],
            [2.0, 2.0, 3.0],
        ]),
    )
    result = exchange.compute_equilibrium()
    fig, ax = plot_exchange_allocations(result, goods=["Food", "Fuel", "Cloth"], figsize=(8, 5))
    fig.savefig(output_dir / "front_exchange_allocations.png", dpi=150, bbox_inches="tight")
    plt.close(fig)

    print(f"All plots saved to {output_dir}")

    # List generated files
    for f in sorted(output_dir.glob("front_*.png")):
        print(f"  - {f.name}")


if __name__ == "__main__":
    main()
