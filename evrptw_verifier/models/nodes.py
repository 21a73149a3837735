""" Node models for an EVRPTW instance.

There are exactly three kinds of node, told apart by the `kind` tag:

Depot: the single start/end point of every route (id 0).
ChargingStation: a place where the vehicle recharges its battery at a fixed rate (ids 1..S).
Customer: a delivery point with demand and service duration (ids S+1..S+C).

Every node validates and normalises its time window into a (start, end) pair and exposes .coords for unified
coordinate access. Nodes are frozen, so they are hashable and can be used in sets (coverage checks). """

from typing import Annotated, Literal, Tuple, Union   # Type hints: tagged union, literal tags, coordinate tuples
from pydantic import BaseModel, ConfigDict, Field, field_validator  # Pydantic base class and validation helpers


def _coerce_window(v):
    if isinstance(v, (int, float)):                    # Single number -> interpret as [0, value]
        return (0.0, float(v))
    if isinstance(v, (list, tuple)):
        if len(v) == 1:                                # Single-element list -> expand to [0, value]
            return (0.0, float(v[0]))
        if len(v) == 2:                                # Two elements -> cast to floats
            start, end = float(v[0]), float(v[1])
            if start > end:
                raise ValueError(f"time window start {start} is after its end {end}")
            return (start, end)
    raise ValueError("time_window must be [start, end]")  # Otherwise invalid format


class _NodeBase(BaseModel):                           # Fields shared by every node variant
    model_config = ConfigDict(frozen=True)

    id: int                                           # Stable integer id (position in the instance node list)
    name: str                                         # Unique name as used in solution files (D0, S15, C20, ...)
    x: float                                          # X-coordinate
    y: float                                          # Y-coordinate
    time_window: Tuple[float, float] = (0.0, float("inf"))  # [start, end]; arriving later than end is infeasible

    @field_validator("time_window", mode="before")
    @classmethod
    def _coerce_time_window(cls, v):
        return _coerce_window(v)

    @property
    def coords(self) -> Tuple[float, float]:          # Unified coordinate accessor
        return float(self.x), float(self.y)

    def __str__(self) -> str:
        return self.name


class Depot(_NodeBase):                               # Start and end of every route
    kind: Literal["depot"] = "depot"

    @field_validator("id")
    @classmethod
    def _depot_id_is_zero(cls, v: int) -> int:
        if v != 0:
            raise ValueError(f"depot id must be 0 (got {v})")
        return v


class ChargingStation(_NodeBase):                     # Recharging station (full recharge on every visit)
    kind: Literal["station"] = "station"
    recharging_rate: float                            # Energy units restored per unit of time

    @field_validator("recharging_rate")
    @classmethod
    def _positive_rate(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"recharging_rate must be > 0 (got {v})")
        return v


class Customer(_NodeBase):                            # Delivery point
    kind: Literal["customer"] = "customer"
    demand: float = 0.0                               # Load delivered at this customer
    service_time: float = 0.0                         # Service duration spent at the customer

    @field_validator("demand", "service_time")
    @classmethod
    def _non_negative(cls, v: float, info) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0 (got {v})")
        return v


Node = Annotated[Union[Depot, ChargingStation, Customer], Field(discriminator="kind")]
