"""Smoke tests for the plotting helpers."""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from pyequilibrium import DimensionError  # noqa: E402
from pyequilibrium.viz import (  # noqa: E402
    plot_competitive_equilibrium,
    plot_exchange_allocations,
    plot_monopoly,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestProductionPlots:

    def test_competitive_equilibrium(self, single_good_production_economy):
        fig, ax = plot_competitive_equilibrium(single_good_production_economy, num_points=50)
        assert ax.get_title() == "Competitive Equilibrium"
        assert len(ax.lines) == 2
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert "Consumer surplus" in labels
        assert "Producer surplus" in labels

    def test_monopoly(self, single_good_production_economy):
        fig, ax = plot_monopoly(single_good_production_economy)
        assert len(ax.lines) == 3
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert "Deadweight loss" in labels
        assert "Marginal revenue" in labels

    def test_draws_on_given_axes(self, single_good_production_economy):
        fig, axes = plt.subplots(1, 2)
        _, left = plot_competitive_equilibrium(single_good_production_economy, ax=axes[0])
        _, right = plot_monopoly(single_good_production_economy, ax=axes[1])
        assert left is axes[0]
        assert right is axes[1]

    def test_multi_good_rejected(self, two_good_production_economy):
        with pytest.raises(DimensionError):
            plot_competitive_equilibrium(two_good_production_economy)


class TestExchangePlots:

    def test_allocations(self, three_good_exchange_economy):
        result = three_good_exchange_economy.compute_equilibrium()
        fig, ax = plot_exchange_allocations(result, goods=["food", "fuel", "cloth"])
        assert len(ax.patches) == 9
        assert [t.get_text() for t in ax.get_xticklabels()] == ["food", "fuel", "cloth"]

    def test_wrong_number_of_goods(self, symmetric_exchange_economy):
        result = symmetric_exchange_economy.compute_equilibrium()
        with pytest.raises(ValueError, match="good names"):
            plot_exchange_allocations(result, goods=["only one"])
