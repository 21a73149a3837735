# VehicleAgent replays one route (time, load, battery) and reports its first violation.
from .vehicle_agent import VehicleAgent

# RouteVerifier aggregates all routes of a solution and checks fleet size and cost;
# verify() is the boolean entry point used by the CLI.
from .route_verifier import RouteVerifier, verify
