
""" The Instance model is the container for a full EVRPTW problem.
It holds:

Depot: the single depot every route starts and ends at.
Charging stations: ordered list of recharging stations (ids 1..S).
Customers: ordered list of customers (ids S+1..S+C).
Vehicle type: the single battery-electric vehicle type shared by the whole fleet.

It also answers every static question the verifier asks: travel distance/time between two nodes, demand, service time,
time window and recharging rate of a node, and name -> node lookups used when resolving solution files.

In short: Instance is the read-only root data structure of the verification problem. """

import math
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, PrivateAttr, model_validator

from .nodes import ChargingStation, Customer, Depot
from .vehicle import VehicleType

DEFAULT_MAX_VEHICLES = 12


class Instance(BaseModel):                             # Top-level model describing a full EVRPTW instance
    name: str = ""                                     # Instance name (usually the file stem)
    depot: Depot
    charging_stations: List[ChargingStation] = []
    customers: List[Customer]
    vehicle_type: VehicleType
    max_vehicles: int = DEFAULT_MAX_VEHICLES           # Fleet size limit

    _customers_by_name: Dict[str, Customer] = PrivateAttr(default_factory=dict)
    _stations_by_name: Dict[str, ChargingStation] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_ids_and_names(self):
        n_stations = len(self.charging_stations)
        for pos, s in enumerate(self.charging_stations, start=1):
            if s.id != pos:
                raise ValueError(f"charging station {s.name} must have id {pos} (got {s.id})")
        for pos, c in enumerate(self.customers, start=n_stations + 1):
            if c.id != pos:
                raise ValueError(f"customer {c.name} must have id {pos} (got {c.id})")

        if len({s.name for s in self.charging_stations}) != n_stations:
            raise ValueError("charging station names must be unique")
        if len({c.name for c in self.customers}) != len(self.customers):
            raise ValueError("customer names must be unique")
        if self.max_vehicles < 1:
            raise ValueError(f"max_vehicles must be >= 1 (got {self.max_vehicles})")
        return self

    def model_post_init(self, __context) -> None:
        self._stations_by_name = {s.name: s for s in self.charging_stations}
        self._customers_by_name = {c.name: c for c in self.customers}

    @property
    def nodes(self) -> List:
        return [self.depot, *self.charging_stations, *self.customers]

    @property
    def num_nodes(self) -> int:
        return 1 + len(self.charging_stations) + len(self.customers)

    @property
    def num_customers(self) -> int:
        return len(self.customers)

    # name lookups (used by the solution loader)
    def customer(self, name: str) -> Optional[Customer]:
        return self._customers_by_name.get(name)

    def charging_station(self, name: str) -> Optional[ChargingStation]:
        return self._stations_by_name.get(name)

    def travel_distance(self, a, b) -> float:
        (ax, ay), (bx, by) = a.coords, b.coords
        return math.hypot(ax - bx, ay - by)

    def travel_time(self, a, b) -> float:
        return self.travel_distance(a, b) / self.vehicle_type.velocity

    def demand(self, node) -> float:
        return node.demand if isinstance(node, Customer) else 0.0

    def service_time(self, node) -> float:
        return node.service_time if isinstance(node, Customer) else 0.0

    def time_window(self, node) -> Tuple[float, float]:
        return node.time_window

    def recharging_rate(self, node) -> float:
        return node.recharging_rate if isinstance(node, ChargingStation) else 0.0
