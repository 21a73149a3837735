from .nodes import Node, Depot, ChargingStation, Customer
from .vehicle import VehicleType
from .instance import Instance, DEFAULT_MAX_VEHICLES
from .solution import Route, Solution
from .config import VerifierConfig
from .result import (
    ViolationKind, Violation, NodeVisit,
    RouteReport, CoverageReport, VerificationResult
)

from .api_schemas import VerifyRequest, VerifyResponse
