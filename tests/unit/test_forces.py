"""Unit tests for the force model."""

import math

import pytest

from forcegraph.core import NodeData, SimulationParameters, attract_nodes, repel_nodes


def body(x, y, mass=10.0):
    return NodeData(x=x, y=y, mass=mass)


class TestAttraction:
    """Tests for attract_nodes."""

    def test_points_toward_other_node(self, params):
        fx, fy = attract_nodes(body(0.0, 0.0), body(100.0, 0.0), params)
        assert fx > 0
        assert fy == 0.0

    def test_strength_linear_in_distance(self, params):
        # strength = force_spring * distance * 0.5
        fx, _ = attract_nodes(body(0.0, 0.0), body(200.0, 0.0), params)
        assert fx == pytest.approx(0.3 * 200.0 * 0.5)

        fx2, _ = attract_nodes(body(0.0, 0.0), body(400.0, 0.0), params)
        assert fx2 == pytest.approx(2 * fx)

    def test_diagonal_direction(self, params):
        fx, fy = attract_nodes(body(0.0, 0.0), body(30.0, 40.0), params)
        strength = 0.3 * 50.0 * 0.5
        assert fx == pytest.approx(0.6 * strength)
        assert fy == pytest.approx(0.8 * strength)

    def test_symmetric(self, params):
        a, b = body(10.0, 20.0), body(-50.0, 70.0)
        fab = attract_nodes(a, b, params)
        fba = attract_nodes(b, a, params)
        assert fab[0] == pytest.approx(-fba[0])
        assert fab[1] == pytest.approx(-fba[1])

    def test_independent_of_mass(self, params):
        f_light = attract_nodes(body(0.0, 0.0, mass=1.0), body(100.0, 0.0, mass=1.0), params)
        f_heavy = attract_nodes(body(0.0, 0.0, mass=50.0), body(100.0, 0.0, mass=50.0), params)
        assert f_light == pytest.approx(f_heavy)

    def test_coincident_nodes_zero(self, params):
        assert attract_nodes(body(5.0, 5.0), body(5.0, 5.0), params) == (0.0, 0.0)


class TestRepulsion:
    """Tests for repel_nodes."""

    def test_points_away_from_other_node(self, params):
        fx, fy = repel_nodes(body(0.0, 0.0), body(100.0, 0.0), params)
        assert fx < 0
        assert fy == 0.0

    def test_inverse_square(self, params):
        # strength = -force_charge * m1 * m2 / d²
        fx, _ = repel_nodes(body(0.0, 0.0), body(200.0, 0.0), params)
        assert fx == pytest.approx(-12000.0 * 100.0 / 200.0 ** 2)

        fx_far, _ = repel_nodes(body(0.0, 0.0), body(400.0, 0.0), params)
        assert fx_far == pytest.approx(fx / 4)

    def test_scales_with_mass_product(self, params):
        base, _ = repel_nodes(body(0.0, 0.0, mass=1.0), body(100.0, 0.0, mass=1.0), params)
        heavy, _ = repel_nodes(body(0.0, 0.0, mass=2.0), body(100.0, 0.0, mass=3.0), params)
        assert heavy == pytest.approx(6 * base)

    def test_coincident_nodes_zero(self, params):
        assert repel_nodes(body(5.0, 5.0), body(5.0, 5.0), params) == (0.0, 0.0)

    def test_negative_charge_attracts(self):
        p = SimulationParameters(force_charge=-100.0)
        fx, _ = repel_nodes(body(0.0, 0.0), body(10.0, 0.0), p)
        assert fx > 0

    def test_balances_spring_at_equilibrium(self, params):
        # 0.15 * d = 12000 * 100 / d²  ->  d = 200 for default mass
        a, b = body(0.0, 0.0), body(200.0, 0.0)
        attract = attract_nodes(a, b, params)
        repel = repel_nodes(a, b, params)
        assert attract[0] + repel[0] == pytest.approx(0.0, abs=1e-9)

    def test_result_finite_for_tiny_separation(self, params):
        fx, fy = repel_nodes(body(0.0, 0.0), body(1e-6, 0.0), params)
        assert math.isfinite(fx)
        assert fy == 0.0


class TestExtremeSeparation:
    """Distinct nodes at the ends of the float range still get a usable force."""

    @pytest.mark.parametrize("gap", [1e-170, 5e-324])
    def test_tiny_separation_repels_without_bound(self, params, gap):
        fx, fy = repel_nodes(body(0.0, 0.0), body(gap, 0.0), params)
        assert fx == -math.inf
        assert fy == 0.0

    def test_tiny_diagonal_separation(self, params):
        fx, fy = repel_nodes(body(0.0, 0.0), body(1e-170, 1e-170), params)
        assert fx == -math.inf
        assert fy == -math.inf

    @pytest.mark.parametrize("gap", [1e-170, 5e-324])
    def test_tiny_separation_attraction_finite(self, params, gap):
        fx, fy = attract_nodes(body(0.0, 0.0), body(gap, 0.0), params)
        assert 0.0 <= fx < 1.0
        assert fy == 0.0

    def test_zero_charge_tiny_separation(self):
        p = SimulationParameters(force_charge=0.0)
        assert repel_nodes(body(0.0, 0.0), body(5e-324, 0.0), p) == (0.0, 0.0)

    def test_huge_separation_attraction(self, params):
        fx, fy = attract_nodes(body(0.0, 0.0), body(1e200, 0.0), params)
        assert fx == pytest.approx(0.3 * 1e200 * 0.5)
        assert fy == 0.0

    def test_huge_separation_repulsion_vanishes(self, params):
        fx, fy = repel_nodes(body(0.0, 0.0), body(1e200, 0.0), params)
        assert fx == pytest.approx(0.0)
        assert fy == 0.0
