"""Tests for result summary(), to_dict(), and __repr__() methods."""

import json

import numpy as np
import pytest

from pyequilibrium.core.result import (
    ExchangeEquilibriumResult,
    ProductionEquilibriumResult,
    SurplusResult,
    StackedEquilibriumResult,
)


class TestExchangeEquilibriumResultMethods:

    @pytest.fixture
    def result(self):
        return ExchangeEquilibriumResult(
            prices=np.array([1.0, 1.0]),
            allocations=np.array([[1.0, 1.0], [1.0, 1.0]]),
            marginal_utilities=np.array([4.0, 4.0]),
            endowments=np.array([[0.0, 2.0], [2.0, 0.0]]),
            computation_time_ms=0.25,
        )

    def test_summary_contains_header(self, result):
        summary = result.summary()
        assert "EXCHANGE ECONOMY EQUILIBRIUM REPORT" in summary
        assert "Market Clearing" in summary
        assert "Yes" in summary

    def test_summary_lists_agents(self, result):
        summary = result.summary()
        assert "Agent 0: c = [1.0000, 1.0000], mu = 4.0000" in summary
        assert "Agent 1" in summary
        assert "0.25 ms" in summary

    def test_to_dict(self, result):
        d = result.to_dict()
        assert d["prices"] == [1.0, 1.0]
        assert d["allocations"] == [[1.0, 1.0], [1.0, 1.0]]
        assert d["excess_demand"] == [0.0, 0.0]
        json.dumps(d)

    def test_repr(self, result):
        assert repr(result) == "ExchangeEquilibriumResult(agents=2, goods=2, 0.25ms)"

    def test_market_clearing_detects_excess(self):
        result = ExchangeEquilibriumResult(
            prices=np.array([1.0, 1.0]),
            allocations=np.array([[1.0, 1.0], [1.0, 1.5]]),
            marginal_utilities=np.array([4.0, 4.0]),
            endowments=np.array([[0.0, 2.0], [2.0, 0.0]]),
            computation_time_ms=0.1,
        )
        assert not result.is_market_clearing()
        np.testing.assert_allclose(result.excess_demand, [0.0, 0.5])
        assert "No" in result.summary()

    def test_frozen(self, result):
        with pytest.raises(AttributeError):
            result.prices = np.array([2.0, 2.0])


class TestProductionEquilibriumResultMethods:

    @pytest.fixture
    def monopoly_result(self):
        return ProductionEquilibriumResult(
            quantity=np.array([2.0]),
            prices=np.array([8.0]),
            marginal_cost=np.array([2.5]),
            regime="monopoly",
            welfare_weight=1.0,
            computation_time_ms=1500.0,
        )

    def test_markup_and_revenue(self, monopoly_result):
        np.testing.assert_allclose(monopoly_result.markup, [5.5])
        assert monopoly_result.revenue == pytest.approx(16.0)

    def test_summary(self, monopoly_result):
        summary = monopoly_result.summary()
        assert "MONOPOLY PRODUCTION EQUILIBRIUM REPORT" in summary
        assert "Markup over Marginal Cost" in summary
        assert "[5.5000]" in summary
        assert "1.50 s" in summary

    def test_to_dict(self, monopoly_result):
        d = monopoly_result.to_dict()
        assert d["regime"] == "monopoly"
        assert d["markup"] == [5.5]
        json.dumps(d)

    def test_repr(self, monopoly_result):
        assert "monopoly" in repr(monopoly_result)
        assert "goods=1" in repr(monopoly_result)


class TestSurplusResultMethods:

    @pytest.fixture
    def surplus(self):
        return SurplusResult(
            consumer_surplus=11.28125,
            producer_surplus=11.28125,
            quantity=4.75,
            price=5.25,
            regime="competitive",
        )

    def test_total(self, surplus):
        assert surplus.total_surplus == pytest.approx(22.5625)

    def test_summary(self, surplus):
        summary = surplus.summary()
        assert "COMPETITIVE SURPLUS REPORT" in summary
        assert "Consumer Surplus" in summary
        assert "22.5625" in summary

    def test_to_dict(self, surplus):
        d = surplus.to_dict()
        assert d["total_surplus"] == pytest.approx(22.5625)
        assert d["regime"] == "competitive"

    def test_repr(self, surplus):
        assert repr(surplus) == "SurplusResult(competitive, cs=11.2812, ps=11.2812)"


class TestStackedEquilibriumResultMethods:

    @pytest.fixture
    def stacked(self):
        inner = ExchangeEquilibriumResult(
            prices=np.array([1.0, 1.0, 0.9, 0.9]),
            allocations=np.ones((2, 4)),
            marginal_utilities=np.array([4.0, 4.0]),
            endowments=np.array([[0.0, 2.0, 0.0, 2.0], [2.0, 0.0, 2.0, 0.0]]),
            computation_time_ms=0.5,
        )
        return StackedEquilibriumResult(
            prices=inner.prices.reshape(2, 2),
            allocations=inner.allocations.reshape(2, 2, 2),
            marginal_utilities=inner.marginal_utilities,
            block_weights=np.array([1.0, 0.9]),
            kind="dynamic",
            stacked_result=inner,
        )

    def test_blocks(self, stacked):
        assert stacked.num_blocks == 2
        assert stacked.computation_time_ms == 0.5

    def test_summary_uses_periods(self, stacked):
        summary = stacked.summary()
        assert "DYNAMIC EQUILIBRIUM REPORT" in summary
        assert "Period 1 (weight 0.9000): [0.9000, 0.9000]" in summary

    def test_to_dict(self, stacked):
        d = stacked.to_dict()
        assert d["kind"] == "dynamic"
        assert d["prices"] == [[1.0, 1.0], [0.9, 0.9]]
        json.dumps(d)

    def test_repr(self, stacked):
        assert "blocks=2" in repr(stacked)
