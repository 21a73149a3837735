""" RouteVerifier takes a problem Instance and checks a complete solution against it: every route is simulated
independently by a VehicleAgent, then the fleet size and the recomputed total cost are checked. The true cost is the
sum of all route distances plus the vehicle fixed cost for every route actually used. A solution is valid only if
every route is feasible, the fleet limit holds and the declared cost matches the true cost within tolerance.

verify(...) is the boolean entry point; it also prints the human-readable trace when asked for details. """

from __future__ import annotations
import logging
import sys
from typing import Optional, Sequence, TextIO

from ..models import CoverageReport, Instance, VerificationResult, VerifierConfig
from ..report import format_result
from .vehicle_agent import VehicleAgent

logger = logging.getLogger(__name__)


class RouteVerifier:
    def __init__(self, inst: Instance, cfg: Optional[VerifierConfig] = None):
        self.instance: Instance = inst
        self.cfg: VerifierConfig = cfg or VerifierConfig()
        self.vehicle = VehicleAgent(inst.vehicle_type, inst.depot, self.cfg)

    @property
    def max_vehicles(self) -> int:
        if self.cfg.max_vehicles is not None:
            return self.cfg.max_vehicles
        return self.instance.max_vehicles

    def verify(
        self,
        routes: Sequence[Sequence],
        declared_cost: float,
        detailed: Optional[bool] = None,
        coverage: Optional[CoverageReport] = None,
    ) -> VerificationResult:
        if detailed is None:
            detailed = self.cfg.detailed

        reports = [
            self.vehicle.simulate_route(route, self.instance, index=i, detailed=detailed)
            for i, route in enumerate(routes)
        ]

        total_distance = sum(r.distance for r in reports)
        used = sum(1 for r in reports if r.used)
        true_cost = total_distance
        if self.cfg.cost_model == "distance_plus_fixed":
            true_cost += self.instance.vehicle_type.fixed_cost * used

        max_vehicles = self.max_vehicles
        fleet_ok = len(reports) <= max_vehicles
        cost_ok = abs(declared_cost - true_cost) <= self.cfg.cost_tolerance
        valid = (all(r.feasible for r in reports) and fleet_ok and cost_ok
                 and (coverage is None or coverage.ok))

        logger.debug("verified %d routes: valid=%s fleet_ok=%s true_cost=%.6f declared=%.6f",
                     len(reports), valid, fleet_ok, true_cost, declared_cost)

        return VerificationResult(
            valid=valid,
            routes=reports,
            num_routes=len(reports),
            max_vehicles=max_vehicles,
            fleet_ok=fleet_ok,
            declared_cost=declared_cost,
            true_cost=true_cost,
            cost_ok=cost_ok,
            coverage=coverage,
        )


def verify(
    instance: Instance,
    routes: Sequence[Sequence],
    declared_cost: float,
    detailed: bool = False,
    config: Optional[VerifierConfig] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    result = RouteVerifier(instance, config).verify(routes, declared_cost, detailed=detailed)
    if detailed:
        print(format_result(result), file=stream or sys.stdout)
    return result.valid
