from collections import Counter
from typing import Sequence

from .models import CoverageReport, Customer, Instance


def check_coverage(inst: Instance, routes: Sequence[Sequence]) -> CoverageReport:
    """Every customer of the instance must appear in exactly one route position."""
    counts: Counter = Counter(
        node.name for route in routes for node in route if isinstance(node, Customer)
    )
    missing = [c.name for c in inst.customers if counts.get(c.name, 0) == 0]
    duplicated = [c.name for c in inst.customers if counts.get(c.name, 0) > 1]
    return CoverageReport(missing=missing, duplicated=duplicated)
