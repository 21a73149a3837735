
# Defines the policy choices and tolerances of the route verifier.

from typing import Literal, Optional     # Type hints for policy literals and optional overrides
from pydantic import BaseModel, Field    # Pydantic BaseModel for validation and schema support


class VerifierConfig(BaseModel):                              # Model for verifier configuration
    detailed: bool = False                                    # Record per-node trace and print diagnostics
    cost_tolerance: float = Field(1e-3, ge=0.0)               # Max |declared - true| cost accepted
    feasibility_tolerance: float = Field(1e-6, ge=0.0)        # Slack for time/energy/load comparisons
    max_vehicles: Optional[int] = Field(None, ge=1)           # Overrides Instance.max_vehicles when set
    recharge_policy: Literal["rate", "inverse_rate"] = "rate" # rate: missing/rate, inverse_rate: missing*rate
    cost_model: Literal["distance_plus_fixed", "distance"] = "distance_plus_fixed"
    check_station_departure: bool = True                      # Re-check station window end after recharging
