# evrptw_verifier/tests/test_route_verifier.py
import io
import pytest

from evrptw_verifier.agents import RouteVerifier, verify
from evrptw_verifier.models import VerifierConfig, ViolationKind

DEMO_COST = 234.787087   # 54.142136 + 52.360680 + 128.284271


def test_demo_solution_is_valid(demo_instance, demo_solution):
    assert verify(demo_instance, demo_solution.routes, demo_solution.cost)

    res = RouteVerifier(demo_instance).verify(demo_solution.routes, demo_solution.cost)
    assert res.valid and res.fleet_ok and res.cost_ok
    assert res.true_cost == pytest.approx(DEMO_COST, abs=1e-6)
    assert [r.feasible for r in res.routes] == [True, True, True]
    assert res.violations == []


def test_cost_off_by_one_is_invalid(demo_instance, demo_solution):
    assert not verify(demo_instance, demo_solution.routes, demo_solution.cost + 1.0)

    res = RouteVerifier(demo_instance).verify(demo_solution.routes, demo_solution.cost + 1.0)
    assert all(r.feasible for r in res.routes)
    assert not res.cost_ok
    assert [v.kind for v in res.violations] == [ViolationKind.COST_MISMATCH]


def test_cost_within_tolerance(demo_instance, demo_solution):
    assert verify(demo_instance, demo_solution.routes, DEMO_COST + 9e-4)
    assert not verify(demo_instance, demo_solution.routes, DEMO_COST + 2e-3)
    cfg = VerifierConfig(cost_tolerance=1e-2)
    assert verify(demo_instance, demo_solution.routes, DEMO_COST + 2e-3, config=cfg)


def test_true_cost_round_trip(demo_instance, demo_solution):
    true_cost = RouteVerifier(demo_instance).verify(demo_solution.routes, 0.0).true_cost
    assert verify(demo_instance, demo_solution.routes, true_cost)


def test_route_order_does_not_change_cost(demo_instance, demo_solution):
    v = RouteVerifier(demo_instance)
    forward = v.verify(demo_solution.routes, 0.0).true_cost
    backward = v.verify(tuple(reversed(demo_solution.routes)), 0.0).true_cost
    assert forward == pytest.approx(backward)


def test_node_order_changes_cost(demo_instance):
    v = RouteVerifier(demo_instance)
    c = demo_instance.customer
    a = v.verify([(c("C5"), c("C6"), c("C7"))], 0.0).true_cost
    b = v.verify([(c("C6"), c("C5"), c("C7"))], 0.0).true_cost
    assert a != pytest.approx(b)


def _spoke_instance(make_instance, n, **vehicle):
    # customer i sits at (i, 0): a round trip costs 2 * i
    return make_instance(customers=[{"x": float(i), "y": 0.0} for i in range(1, n + 1)], **vehicle)


def test_thirteen_routes_exceed_fleet(make_instance):
    inst = _spoke_instance(make_instance, 13)
    routes = [(c,) for c in inst.customers]
    res = RouteVerifier(inst).verify(routes, 182.0)
    assert all(r.feasible for r in res.routes)
    assert res.cost_ok
    assert not res.fleet_ok and not res.valid
    assert res.max_vehicles == 12
    assert [v.kind for v in res.violations] == [ViolationKind.FLEET]


def test_twelve_routes_fit_fleet(make_instance):
    inst = _spoke_instance(make_instance, 12)
    routes = [(c,) for c in inst.customers]
    assert verify(inst, routes, 156.0)


def test_max_vehicles_override(make_instance):
    inst = _spoke_instance(make_instance, 3)
    routes = [(c,) for c in inst.customers]
    assert verify(inst, routes, 12.0)
    assert not verify(inst, routes, 12.0, config=VerifierConfig(max_vehicles=2))


def test_fixed_cost_per_used_vehicle(make_instance):
    inst = _spoke_instance(make_instance, 2, fixed_cost=10.0)
    routes = [(inst.customers[0],), (inst.customers[1],), (inst.depot, inst.depot)]
    res = RouteVerifier(inst).verify(routes, 26.0)
    assert res.valid
    assert res.true_cost == pytest.approx(2.0 + 4.0 + 2 * 10.0)

    distance_only = RouteVerifier(inst, VerifierConfig(cost_model="distance")).verify(routes, 6.0)
    assert distance_only.valid


def test_infeasible_route_does_not_stop_siblings(make_instance):
    inst = make_instance(customers=[
        {"x": 0.0, "y": 10.0, "demand": 150.0},
        {"x": 0.0, "y": 20.0, "demand": 100.0},
        {"x": 0.0, "y": 30.0, "time_window": [0.0, 5.0]},
        {"x": 0.0, "y": 5.0},
    ])
    c = inst.customer
    routes = [(c("C1"), c("C2")), (c("C3"),), (c("C4"),)]
    res = RouteVerifier(inst).verify(routes, 40.0 + 60.0 + 10.0)
    assert [r.feasible for r in res.routes] == [False, False, True]
    assert [r.violation.kind for r in res.routes[:2]] == [ViolationKind.CAPACITY, ViolationKind.TIME_WINDOW]
    assert [v.route_index for v in res.violations] == [0, 1]
    assert res.cost_ok and not res.valid


def test_detailed_trace_is_written(demo_instance, demo_solution):
    buf = io.StringIO()
    assert verify(demo_instance, demo_solution.routes, demo_solution.cost, detailed=True, stream=buf)
    out = buf.getvalue()
    assert "Route 3: D0 C8 C9 S1 C10 D0" in out
    assert "recharges 1" in out
    assert "Cost: true 234.787087, declared 234.787087 (ok)" in out


def test_detailed_trace_reports_first_violation(make_instance):
    inst = make_instance(customers=[{"x": 0.0, "y": 60.0}], depot_window=(0.0, 100.0))
    buf = io.StringIO()
    assert not verify(inst, [(inst.customers[0],)], 120.0, detailed=True, stream=buf)
    assert "INFEASIBLE (time_window)" in buf.getvalue()


def test_no_trace_without_detailed(demo_instance, demo_solution):
    buf = io.StringIO()
    verify(demo_instance, demo_solution.routes, demo_solution.cost, stream=buf)
    assert buf.getvalue() == ""
