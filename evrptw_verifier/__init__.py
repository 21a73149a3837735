"""Feasibility and cost verifier for EVRPTW solutions."""

from .agents import RouteVerifier, VehicleAgent, verify
from .coverage import check_coverage
from .errors import VerifierError, InstanceFormatError, SolutionFormatError
from .loaders import load_instance, load_solution, parse_instance, parse_solution
from .models import Instance, Solution, VerifierConfig, VerificationResult

__version__ = "1.0.0"
