""" Result models produced by the route verifier.

ViolationKind: the error taxonomy (time window, energy, capacity, fleet, cost mismatch, coverage).
Violation: one concrete broken constraint, located on a route/node when it has a location.
NodeVisit: one row of the detailed trace (arrival, service start, departure, load and battery at a node).
RouteReport: outcome of simulating one route, with the first violation if the route is infeasible.
CoverageReport: customers never visited or visited more than once.
VerificationResult: the aggregated verdict for a whole solution. """

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel


class ViolationKind(str, Enum):
    TIME_WINDOW = "time_window"
    ENERGY = "energy"
    CAPACITY = "capacity"
    FLEET = "fleet"
    COST_MISMATCH = "cost_mismatch"
    COVERAGE = "coverage"


class Violation(BaseModel):
    kind: ViolationKind
    message: str
    route_index: Optional[int] = None     # 0-based index of the offending route
    node: Optional[str] = None            # name of the node where it was detected
    value: Optional[float] = None         # observed value (arrival time, energy, load, cost, routes)
    limit: Optional[float] = None         # bound that was broken


class NodeVisit(BaseModel):
    node: str
    kind: str
    arrival: float
    start: float                          # after waiting for the window to open
    departure: float
    load: float
    energy_arrival: float
    energy_departure: float


class RouteReport(BaseModel):
    index: int
    nodes: List[str]
    feasible: bool = True
    violation: Optional[Violation] = None
    distance: float = 0.0
    load: float = 0.0
    end_time: float = 0.0
    min_energy: float = 0.0
    recharges: int = 0
    used: bool = False                    # visits at least one non-depot node
    visits: List[NodeVisit] = []


class CoverageReport(BaseModel):
    missing: List[str] = []
    duplicated: List[str] = []

    @property
    def ok(self) -> bool:
        return not self.missing and not self.duplicated


class VerificationResult(BaseModel):
    valid: bool
    routes: List[RouteReport] = []
    num_routes: int = 0
    max_vehicles: int = 0
    fleet_ok: bool = True
    declared_cost: float = 0.0
    true_cost: float = 0.0
    cost_ok: bool = True
    coverage: Optional[CoverageReport] = None

    @property
    def feasible_routes(self) -> bool:
        return all(r.feasible for r in self.routes)

    @property
    def violations(self) -> List[Violation]:
        out = [r.violation for r in self.routes if r.violation is not None]
        if not self.fleet_ok:
            out.append(Violation(
                kind=ViolationKind.FLEET,
                message=f"{self.num_routes} routes used but only {self.max_vehicles} vehicles available",
                value=float(self.num_routes), limit=float(self.max_vehicles),
            ))
        if not self.cost_ok:
            out.append(Violation(
                kind=ViolationKind.COST_MISMATCH,
                message=f"declared cost {self.declared_cost:.6f} differs from true cost {self.true_cost:.6f}",
                value=self.declared_cost, limit=self.true_cost,
            ))
        if self.coverage is not None and not self.coverage.ok:
            parts = []
            if self.coverage.missing:
                parts.append("missing: " + ", ".join(self.coverage.missing))
            if self.coverage.duplicated:
                parts.append("visited more than once: " + ", ".join(self.coverage.duplicated))
            out.append(Violation(kind=ViolationKind.COVERAGE, message="; ".join(parts)))
        return out
