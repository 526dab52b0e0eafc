"""Tests for the production economy: competition, monopoly and surplus."""

import numpy as np
import pytest

from pyequilibrium import (
    CostStructure,
    PreferenceSystem,
    ProductionEconomy,
    DataQualityWarning,
    DimensionError,
    NonSatiationError,
    ValueRangeError,
    compute_competitive_equilibrium,
    compute_deadweight_loss,
    compute_monopoly_equilibrium,
    compute_supply_demand_curves,
    compute_surplus,
)


PRODUCTION_FIXTURES = [
    "single_good_production_economy",
    "two_good_production_economy",
]


class TestCompetitiveEquilibrium:

    def test_single_good_values(self, single_good_production_economy):
        result = single_good_production_economy.competitive_equilibrium()
        assert result.quantity[0] == pytest.approx(4.75)
        assert result.prices[0] == pytest.approx(5.25)
        assert result.regime == "competitive"

    def test_two_good_values(self, two_good_production_economy):
        result = compute_competitive_equilibrium(two_good_production_economy)
        np.testing.assert_allclose(result.quantity, [3.6, 3.6])
        np.testing.assert_allclose(result.prices, [6.4, 6.4])

    @pytest.mark.parametrize("fixture_name", PRODUCTION_FIXTURES)
    def test_price_equals_marginal_cost(self, fixture_name, request):
        result = request.getfixturevalue(fixture_name).competitive_equilibrium()
        np.testing.assert_allclose(result.prices, result.marginal_cost)
        np.testing.assert_allclose(result.markup, 0.0, atol=1e-10)

    @pytest.mark.parametrize("fixture_name", PRODUCTION_FIXTURES)
    def test_price_matches_demand_inversion(self, fixture_name, request):
        """p = (1 / mu) (Pi^T b - Pi^T Pi c)."""
        economy = request.getfixturevalue(fixture_name)
        result = economy.competitive_equilibrium()
        Pi = economy.substitution_matrix
        expected = (Pi.T @ economy.bliss_point - Pi.T @ Pi @ result.quantity) / economy.welfare_weight
        np.testing.assert_allclose(result.prices, expected)

    def test_welfare_weight_changes_outcome(self, single_good_production_economy):
        """With mu = 2: 3c = 9, so c = 3 and p = (10 - 3) / 2."""
        single_good_production_economy.welfare_weight = 2.0
        result = single_good_production_economy.competitive_equilibrium()
        assert result.quantity[0] == pytest.approx(3.0)
        assert result.prices[0] == pytest.approx(3.5)
        assert result.welfare_weight == 2.0

    def test_bliss_point_change_is_picked_up(self, single_good_production_economy):
        """Fields are re-read on every call; nothing is cached."""
        before = single_good_production_economy.competitive_equilibrium()
        single_good_production_economy.bliss_point = np.array([12.0])
        after = single_good_production_economy.competitive_equilibrium()
        assert before.quantity[0] == pytest.approx(4.75)
        assert after.quantity[0] == pytest.approx(5.75)
        assert after.prices[0] == pytest.approx(6.25)

    def test_unsymmetric_cost_matches_symmetrized(self, two_good_production_economy):
        symmetric = ProductionEconomy(
            substitution_matrix=np.eye(2),
            bliss_point=[10.0, 10.0],
            linear_cost=[1.0, 1.0],
            quadratic_cost=[[1.0, 0.5], [0.5, 1.0]],
        )
        a = two_good_production_economy.competitive_equilibrium()
        b = symmetric.competitive_equilibrium()
        np.testing.assert_allclose(a.quantity, b.quantity)
        np.testing.assert_allclose(a.prices, b.prices)

    def test_from_components(self, single_good_production_economy):
        economy = ProductionEconomy.from_components(
            PreferenceSystem([[1.0]], [10.0]),
            CostStructure([0.5], [[1.0]]),
        )
        expected = single_good_production_economy.competitive_equilibrium()
        result = economy.competitive_equilibrium()
        np.testing.assert_allclose(result.quantity, expected.quantity)
        np.testing.assert_allclose(result.prices, expected.prices)

    def test_idempotent(self, two_good_production_economy):
        first = two_good_production_economy.competitive_equilibrium()
        second = two_good_production_economy.competitive_equilibrium()
        np.testing.assert_array_equal(first.quantity, second.quantity)
        np.testing.assert_array_equal(first.prices, second.prices)


class TestMonopoly:

    def test_single_good_values(self, single_good_production_economy):
        """3q = 9.5 under monopoly."""
        result = single_good_production_economy.equilibrium_with_monopoly()
        assert result.quantity[0] == pytest.approx(9.5 / 3.0)
        assert result.prices[0] == pytest.approx(10.0 - 9.5 / 3.0)
        assert result.regime == "monopoly"

    def test_two_good_values(self, two_good_production_economy):
        result = compute_monopoly_equilibrium(two_good_production_economy)
        np.testing.assert_allclose(result.quantity, [9.0 / 3.5, 9.0 / 3.5])
        np.testing.assert_allclose(result.prices, [10.0 - 9.0 / 3.5] * 2)

    @pytest.mark.parametrize("fixture_name", PRODUCTION_FIXTURES)
    def test_monopolist_restricts_output(self, fixture_name, request):
        economy = request.getfixturevalue(fixture_name)
        competitive = economy.competitive_equilibrium()
        monopoly = economy.equilibrium_with_monopoly()
        assert np.all(monopoly.quantity < competitive.quantity)
        assert np.all(monopoly.prices > competitive.prices)

    @pytest.mark.parametrize("fixture_name", PRODUCTION_FIXTURES)
    def test_positive_markup(self, fixture_name, request):
        result = request.getfixturevalue(fixture_name).equilibrium_with_monopoly()
        assert np.all(result.markup > 0)

    def test_marginal_revenue_equals_marginal_cost(self, single_good_production_economy):
        """d0 - 2 d1 q = s0 + s1 q at the monopoly quantity."""
        result = single_good_production_economy.equilibrium_with_monopoly()
        q = result.quantity[0]
        assert 10.0 - 2.0 * q == pytest.approx(result.marginal_cost[0])


class TestSurplus:

    def test_competitive_surplus(self, single_good_production_economy):
        surplus = compute_surplus(single_good_production_economy)
        assert surplus.consumer_surplus == pytest.approx(11.28125)
        assert surplus.producer_surplus == pytest.approx(11.28125)
        assert surplus.total_surplus == pytest.approx(22.5625)
        assert surplus.quantity == pytest.approx(4.75)
        assert surplus.price == pytest.approx(5.25)

    def test_monopoly_surplus(self, single_good_production_economy):
        surplus = single_good_production_economy.compute_surplus(regime="monopoly")
        assert surplus.consumer_surplus == pytest.approx(361.0 / 72.0)
        assert surplus.producer_surplus == pytest.approx(361.0 / 24.0)
        assert surplus.regime == "monopoly"

    def test_monopoly_shifts_surplus_to_producer(self, single_good_production_economy):
        competitive = single_good_production_economy.compute_surplus()
        monopoly = single_good_production_economy.compute_surplus(regime="monopoly")
        assert monopoly.consumer_surplus < competitive.consumer_surplus
        assert monopoly.producer_surplus > competitive.producer_surplus
        assert monopoly.total_surplus < competitive.total_surplus

    def test_deadweight_loss(self, single_good_production_economy):
        dwl = compute_deadweight_loss(single_good_production_economy)
        assert dwl == pytest.approx(22.5625 - 361.0 / 18.0)
        assert dwl > 0
        assert single_good_production_economy.deadweight_loss() == pytest.approx(dwl)

    def test_deadweight_loss_is_triangle(self, single_good_production_economy):
        """DWL = 0.5 * (c - q) * (pm - mc(q)) for linear curves."""
        competitive = single_good_production_economy.competitive_equilibrium()
        monopoly = single_good_production_economy.equilibrium_with_monopoly()
        triangle = 0.5 * (competitive.quantity[0] - monopoly.quantity[0]) * monopoly.markup[0]
        assert single_good_production_economy.deadweight_loss() == pytest.approx(triangle)

    def test_multi_good_rejected(self, two_good_production_economy):
        with pytest.raises(DimensionError):
            compute_surplus(two_good_production_economy)
        with pytest.raises(DimensionError):
            two_good_production_economy.deadweight_loss()

    def test_unknown_regime(self, single_good_production_economy):
        with pytest.raises(ValueError, match="regime"):
            compute_surplus(single_good_production_economy, regime="oligopoly")


class TestSupplyDemandCurves:

    def test_default_grid(self, single_good_production_economy):
        curves = compute_supply_demand_curves(single_good_production_economy)
        assert len(curves.quantities) == 100
        assert curves.quantities[0] == 0.0
        assert curves.quantities[-1] == pytest.approx(10.0)
        assert curves.demand[0] == pytest.approx(10.0)
        assert curves.demand[-1] == pytest.approx(0.0, abs=1e-12)
        assert curves.supply[0] == pytest.approx(0.5)

    def test_curves_cross_at_equilibrium(self, single_good_production_economy):
        curves = single_good_production_economy.supply_demand_curves(
            num_points=5, max_quantity=9.5
        )
        np.testing.assert_allclose(curves.quantities, [0.0, 2.375, 4.75, 7.125, 9.5])
        assert curves.demand[2] == pytest.approx(curves.supply[2])
        assert curves.demand[2] == pytest.approx(5.25)

    def test_marginal_revenue_slope(self, single_good_production_economy):
        curves = single_good_production_economy.supply_demand_curves(num_points=11)
        np.testing.assert_allclose(
            curves.demand - curves.marginal_revenue, curves.quantities
        )

    def test_invalid_grid(self, single_good_production_economy):
        with pytest.raises(ValueRangeError):
            compute_supply_demand_curves(single_good_production_economy, num_points=1)
        with pytest.raises(ValueRangeError):
            compute_supply_demand_curves(single_good_production_economy, max_quantity=-1.0)

    def test_multi_good_rejected(self, two_good_production_economy):
        with pytest.raises(DimensionError):
            two_good_production_economy.supply_demand_curves()


class TestProductionFailures:

    def test_zero_welfare_weight(self):
        with pytest.warns(DataQualityWarning):
            economy = ProductionEconomy([[1.0]], [10.0], [0.5], [[1.0]], welfare_weight=0.0)
        with pytest.raises(ValueRangeError):
            economy.competitive_equilibrium()

    def test_weight_set_to_zero_after_construction(self, single_good_production_economy):
        single_good_production_economy.welfare_weight = 0.0
        with pytest.raises(ValueRangeError):
            single_good_production_economy.equilibrium_with_monopoly()

    def test_allocation_past_bliss_point(self):
        """Negative linear cost pushes c = 15 beyond b = 10."""
        with pytest.warns(DataQualityWarning):
            economy = ProductionEconomy([[1.0]], [10.0], [-20.0], [[1.0]])
        with pytest.raises(NonSatiationError):
            economy.competitive_equilibrium()

    def test_mismatched_shapes(self):
        with pytest.raises(DimensionError):
            ProductionEconomy(np.eye(2), [10.0, 10.0], [1.0], [[1.0]])


class TestCostStructure:

    def test_cost_and_marginal_cost(self):
        costs = CostStructure([0.5], [[1.0]])
        assert costs.cost([2.0]) == pytest.approx(3.0)
        np.testing.assert_allclose(costs.marginal_cost([2.0]), [2.5])

    def test_symmetrized(self):
        costs = CostStructure([1.0, 1.0], [[1.0, 1.0], [0.0, 1.0]])
        np.testing.assert_allclose(costs.symmetrized, [[1.0, 0.5], [0.5, 1.0]])
        # Only the symmetric part enters the quadratic form
        q = np.array([1.0, 2.0])
        assert costs.cost(q) == pytest.approx(3.0 + 0.5 * q @ costs.symmetrized @ q)
