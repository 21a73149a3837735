"""
Instance loader for the EVRPTW benchmark format of Schneider, Stenger and Goeke (2014).

File layout:

    StringID   Type  x     y     demand  ReadyTime  DueDate  ServiceTime
    D0         d     40.0  50.0  0.0     0.0        1236.0   0.0
    S0         f     40.0  50.0  0.0     0.0        1236.0   0.0
    C20        c     30.0  50.0  10.0    0.0        1136.0   90.0
    ...

    Q Vehicle fuel tank capacity /77.75/
    C Vehicle load capacity /200.0/
    r fuel consumption rate /1.0/
    g inverse refueling rate /3.47/
    v average Velocity /1.0/

Node ids are assigned by position: depot 0, stations 1..S, customers S+1..S+C.
An optional `F ... /value/` line sets the fixed cost per vehicle (0 otherwise).
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from ..errors import InstanceFormatError
from ..models import ChargingStation, Customer, Depot, Instance, VehicleType

logger = logging.getLogger(__name__)

_PARAM_RE = re.compile(r"^(\S+)\s.*/\s*([^/]*?)\s*/\s*$")

# parameter key -> VehicleType field (None = handled separately)
_PARAMS = {
    "Q": "energy_capacity",
    "C": "load_capacity",
    "r": "energy_consumption",
    "g": None,
    "v": "velocity",
    "F": "fixed_cost",
}
_REQUIRED = ("Q", "C", "r", "g")


def _float(token: str, lineno: int, what: str) -> float:
    try:
        return float(token)
    except ValueError as e:
        raise InstanceFormatError(f"line {lineno}: {what} is not a number ({token!r})") from e


def parse_instance(text: str, name: str = "") -> Instance:
    rows = []
    params: Dict[str, float] = {}

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("StringID"):
            continue

        m = _PARAM_RE.match(line)
        if m:
            key, value = m.group(1), m.group(2)
            if key in _PARAMS:
                params[key] = _float(value, lineno, f"parameter {key}")
            else:
                logger.debug("line %d: ignoring unknown parameter %r", lineno, key)
            continue

        parts = line.split()
        if len(parts) < 8:
            raise InstanceFormatError(f"line {lineno}: expected 8 columns, got {len(parts)}: {line!r}")
        sid, kind = parts[0], parts[1]
        if kind not in ("d", "f", "c"):
            raise InstanceFormatError(f"line {lineno}: unknown node type {kind!r} for {sid}")
        x, y, demand, ready, due, service = (
            _float(tok, lineno, col)
            for tok, col in zip(parts[2:8], ("x", "y", "demand", "ReadyTime", "DueDate", "ServiceTime"))
        )
        rows.append((lineno, sid, kind, x, y, demand, ready, due, service))

    missing = [k for k in _REQUIRED if k not in params]
    if missing:
        raise InstanceFormatError(f"missing vehicle parameter(s): {', '.join(missing)}")

    depots = [r for r in rows if r[2] == "d"]
    if len(depots) != 1:
        raise InstanceFormatError(f"expected exactly one depot, found {len(depots)}")

    station_rows = [r for r in rows if r[2] == "f"]
    customer_rows = [r for r in rows if r[2] == "c"]
    rate = params["g"]

    try:
        _, sid, _, x, y, _, ready, due, _ = depots[0]
        depot = Depot(id=0, name=sid, x=x, y=y, time_window=[ready, due])

        stations: List[ChargingStation] = [
            ChargingStation(id=i, name=sid, x=x, y=y, time_window=[ready, due], recharging_rate=rate)
            for i, (_, sid, _, x, y, _, ready, due, _) in enumerate(station_rows, start=1)
        ]
        offset = len(stations) + 1
        customers: List[Customer] = [
            Customer(id=i, name=sid, x=x, y=y, time_window=[ready, due], demand=demand, service_time=service)
            for i, (_, sid, _, x, y, demand, ready, due, service) in enumerate(customer_rows, start=offset)
        ]

        vehicle_kwargs = {field: params[key] for key, field in _PARAMS.items() if field and key in params}
        inst = Instance(
            name=name,
            depot=depot,
            charging_stations=stations,
            customers=customers,
            vehicle_type=VehicleType(**vehicle_kwargs),
        )
    except ValidationError as e:
        raise InstanceFormatError(f"invalid instance data: {e}") from e

    logger.debug("loaded instance %s: %d stations, %d customers", name, len(stations), len(customers))
    return inst


def load_instance(path: Union[str, Path], name: Optional[str] = None) -> Instance:
    path = Path(path)
    text = path.read_text(encoding="utf-8")            # FileNotFoundError propagates to the caller
    return parse_instance(text, name=name if name is not None else path.stem)
