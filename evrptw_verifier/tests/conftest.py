# evrptw_verifier/tests/conftest.py
from pathlib import Path
import pytest
from fastapi.testclient import TestClient

from evrptw_verifier.app import app
from evrptw_verifier.loaders import load_instance, load_solution
from evrptw_verifier.models import ChargingStation, Customer, Depot, Instance, VehicleType

# Base directories
ROOT = Path(__file__).resolve().parents[2]        # repository root
EXAMPLES_DIR = ROOT / "examples"


@pytest.fixture(scope="session")
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="session")
def examples_dir():
    return EXAMPLES_DIR


@pytest.fixture
def demo_instance():
    """10 customers, 1 station (rate 3.47), capacity 200, battery 77.75, consumption 1.0."""
    return load_instance(EXAMPLES_DIR / "c10_demo.txt")


@pytest.fixture
def demo_solution(demo_instance):
    return load_solution(EXAMPLES_DIR / "c10_demo.sol.txt", demo_instance)


def build_instance(customers, stations=(), depot_window=(0.0, 1000.0), max_vehicles=12, **vehicle):
    """Instance from plain dicts; names default to C1.., S1.. and ids follow the depot/station/customer layout."""
    vt = {"energy_capacity": 1000.0, "energy_consumption": 1.0, "load_capacity": 200.0, **vehicle}
    depot = Depot(id=0, name="D0", x=0.0, y=0.0, time_window=depot_window)
    sts = [
        ChargingStation(id=i, **{"name": f"S{i}", "time_window": depot_window, **s})
        for i, s in enumerate(stations, start=1)
    ]
    custs = [
        Customer(id=i, **{"name": f"C{i - len(sts)}", "time_window": depot_window, **c})
        for i, c in enumerate(customers, start=len(sts) + 1)
    ]
    return Instance(name="test", depot=depot, charging_stations=sts, customers=custs,
                    vehicle_type=VehicleType(**vt), max_vehicles=max_vehicles)


@pytest.fixture
def make_instance():
    return build_instance
