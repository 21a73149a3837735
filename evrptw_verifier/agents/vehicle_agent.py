""" VehicleAgent.simulate_route(...) replays a single vehicle's itinerary node by node, carrying three resources forward:

Time: elapsed clock, advanced by travel time, waiting for a window to open, recharging and service.
Load: cumulative demand delivered so far.
Energy: remaining battery charge, drained by distance * consumption and refilled to capacity at charging stations.

At every arrival it checks, in this order, the node's time window end, the battery level and (at customers) the load
capacity. The first broken constraint moves the route into an absorbing infeasible state: no further checks are made,
but the remaining arcs still count towards the route distance so the solution cost can be recomputed.

It uses the Instance for distances and node data and VerifierConfig for tolerances and the recharge policy. """

import logging
from typing import List, Optional, Sequence                  # Type hints for routes and optional violations

from ..models import (
    ChargingStation, Customer, Depot, Instance, NodeVisit,
    RouteReport, VehicleType, VerifierConfig, Violation, ViolationKind,
)

logger = logging.getLogger(__name__)


class VehicleAgent:                                          # Agent responsible for simulating a single route
    def __init__(self, vt: VehicleType, depot: Depot, cfg: VerifierConfig):
        self.vt = vt                                         # Shared vehicle type (capacity, battery, consumption)
        self.depot = depot                                   # Route start and end
        self.cfg = cfg                                       # Tolerances and recharge policy

    def recharge_duration(self, energy_on_arrival: float, rate: float) -> float:
        missing = max(0.0, self.vt.energy_capacity - energy_on_arrival)
        if self.cfg.recharge_policy == "inverse_rate":
            return missing * rate                            # rate given as time per energy unit
        return missing / rate                                # rate given as energy units per time unit

    def close_route(self, route: Sequence) -> List:
        """Return the route with the depot at both ends (added only where missing)."""
        nodes = list(route)
        if not nodes or not isinstance(nodes[0], Depot):
            nodes.insert(0, self.depot)
        if len(nodes) == 1 or not isinstance(nodes[-1], Depot):
            nodes.append(self.depot)
        return nodes

    def simulate_route(                                      # Simulate one route and return its report
        self,
        route: Sequence,                    # nodes as parsed; depot ends optional
        inst: Instance,                     # travel distances/times
        index: int = 0,                     # position of the route inside the solution
        detailed: bool = False,             # record a NodeVisit per node
    ) -> RouteReport:
        tol = self.cfg.feasibility_tolerance
        nodes = self.close_route(route)

        time = self.depot.time_window[0]                     # Leave the depot when it opens
        load = 0.0
        energy = self.vt.energy_capacity                     # Start fully charged
        min_energy = energy
        distance = 0.0
        recharges = 0
        violation: Optional[Violation] = None
        visits: List[NodeVisit] = []

        if detailed:
            visits.append(self._visit(self.depot, time, time, time, load, energy, energy))

        for prev, nxt in zip(nodes, nodes[1:]):              # Iterate over consecutive arcs prev -> nxt
            dist = inst.travel_distance(prev, nxt)
            distance += dist
            if violation is not None:                        # Infeasible is absorbing; only distance accrues
                continue

            energy -= dist * self.vt.energy_consumption
            time += inst.travel_time(prev, nxt)
            arrival, energy_arrival = time, energy
            min_energy = min(min_energy, energy)
            tw_start, tw_end = nxt.time_window

            if arrival > tw_end + tol:                       # Late arrival: no waiting can fix it
                violation = self._violation(
                    ViolationKind.TIME_WINDOW, index, nxt, arrival, tw_end,
                    f"arrival at {nxt.name} at {arrival:.4f} after its window closes at {tw_end:.4f}")
            elif energy < -tol:                              # Stranded somewhere on the arc
                violation = self._violation(
                    ViolationKind.ENERGY, index, nxt, energy, 0.0,
                    f"battery exhausted before reaching {nxt.name} (energy {energy:.4f})")
            if violation is not None:
                if detailed:
                    visits.append(self._visit(nxt, arrival, arrival, arrival, load, energy_arrival, energy))
                continue

            if time < tw_start:                              # Early arrival: wait for the window to open
                time = tw_start
            start = time

            if isinstance(nxt, ChargingStation):             # Full recharge, time proportional to energy restored
                time += self.recharge_duration(energy, nxt.recharging_rate)
                energy = self.vt.energy_capacity
                recharges += 1
                if self.cfg.check_station_departure and time > tw_end + tol:
                    violation = self._violation(
                        ViolationKind.TIME_WINDOW, index, nxt, time, tw_end,
                        f"recharging at {nxt.name} ends at {time:.4f} after its window closes at {tw_end:.4f}")
            elif isinstance(nxt, Customer):
                load += nxt.demand
                if load > self.vt.load_capacity + tol:       # Demands only grow along the route
                    violation = self._violation(
                        ViolationKind.CAPACITY, index, nxt, load, self.vt.load_capacity,
                        f"load {load:.4f} after {nxt.name} exceeds capacity {self.vt.load_capacity:.4f}")
                else:
                    time += nxt.service_time

            if detailed:
                visits.append(self._visit(nxt, arrival, start, time, load, energy_arrival, energy))

        report = RouteReport(
            index=index,
            nodes=[n.name for n in route],
            feasible=violation is None,
            violation=violation,
            distance=distance,
            load=load,
            end_time=time,
            min_energy=min_energy,
            recharges=recharges,
            used=any(not isinstance(n, Depot) for n in route),
            visits=visits,
        )
        logger.debug("route %d: feasible=%s distance=%.4f load=%.4f end=%.4f",
                     index, report.feasible, distance, load, time)
        return report

    @staticmethod
    def _violation(kind, index, node, value, limit, message) -> Violation:
        return Violation(kind=kind, message=message, route_index=index, node=node.name, value=value, limit=limit)

    @staticmethod
    def _visit(node, arrival, start, departure, load, energy_arrival, energy_departure) -> NodeVisit:
        return NodeVisit(
            node=node.name, kind=node.kind,
            arrival=arrival, start=start, departure=departure, load=load,
            energy_arrival=energy_arrival, energy_departure=energy_departure,
        )
