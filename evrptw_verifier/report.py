# report.py
from typing import List

from .models import CoverageReport, RouteReport, VerificationResult


def format_verdict(valid: bool) -> str:
    return "[_{}_]".format("valid" if valid else "INVALID")


def format_coverage(coverage: CoverageReport) -> str:
    if coverage.ok:
        return "All customers have been assigned to a route."
    lines = []
    if coverage.missing:
        lines.append("Not all customers have been assigned to a route!")
        lines.append("customers missing: " + ", ".join(coverage.missing))
    if coverage.duplicated:
        lines.append("customers visited more than once: " + ", ".join(coverage.duplicated))
    return "\n".join(lines)


def _format_visits(route: RouteReport) -> List[str]:
    header = (f"    {'Node':<8}| {'Kind':<9}| {'Arrival':>10}| {'Start':>10}| {'Departure':>10}"
              f"| {'Load':>9}| {'E arrive':>9}| {'E leave':>9}")
    lines = [header, "    " + "-" * (len(header) - 4)]
    for v in route.visits:
        lines.append(f"    {v.node:<8}| {v.kind:<9}| {v.arrival:>10.2f}| {v.start:>10.2f}| {v.departure:>10.2f}"
                     f"| {v.load:>9.2f}| {v.energy_arrival:>9.2f}| {v.energy_departure:>9.2f}")
    return lines


def format_route(route: RouteReport) -> str:
    lines = [f"Route {route.index + 1}: {' '.join(route.nodes) or '(empty)'}"]
    if route.feasible:
        lines.append(f"  feasible: distance {route.distance:.4f}, load {route.load:.2f}, "
                     f"end time {route.end_time:.2f}, min energy {route.min_energy:.2f}, "
                     f"recharges {route.recharges}")
    else:
        v = route.violation
        lines.append(f"  INFEASIBLE ({v.kind.value}): {v.message}")
    if route.visits:
        lines.extend(_format_visits(route))
    return "\n".join(lines)


def format_result(result: VerificationResult) -> str:
    lines = []
    if result.coverage is not None:
        lines.append(format_coverage(result.coverage))
    lines.extend(format_route(r) for r in result.routes)

    fleet = f"Fleet: {result.num_routes} routes, {result.max_vehicles} vehicles available"
    lines.append(fleet if result.fleet_ok else fleet + " (too many routes)")

    diff = result.declared_cost - result.true_cost
    status = "ok" if result.cost_ok else f"MISMATCH by {diff:+.6f}"
    lines.append(f"Cost: true {result.true_cost:.6f}, declared {result.declared_cost:.6f} ({status})")
    return "\n".join(lines)
