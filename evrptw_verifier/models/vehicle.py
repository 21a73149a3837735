# Defines the single battery-electric vehicle type shared by every route of an instance.

from pydantic import BaseModel, ConfigDict, field_validator  # Pydantic BaseModel and field-level validator


class VehicleType(BaseModel):                         # Battery-electric vehicle type (one per instance)
    model_config = ConfigDict(frozen=True)

    id: int = 0                                       # Vehicle type identifier
    name: str = "BEV"                                 # Human readable name
    energy_capacity: float                            # Battery capacity (energy units)
    energy_consumption: float                         # Energy consumed per distance unit
    load_capacity: float                              # Maximum cumulative demand served per route
    fixed_cost: float = 0.0                           # Fixed cost incurred for every vehicle deployed
    velocity: float = 1.0                             # Average speed; travel time = distance / velocity

    @field_validator("energy_capacity", "energy_consumption", "load_capacity", "fixed_cost")
    @classmethod
    def _non_negative(cls, v: float, info) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0 (got {v})")
        return v

    @field_validator("velocity")
    @classmethod
    def _positive_velocity(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"velocity must be > 0 (got {v})")
        return v
