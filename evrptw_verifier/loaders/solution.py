"""
Solution loader.

The first line that is neither blank nor a `#` comment holds the declared cost. Each following non-blank line is one
route: node references separated by spaces and/or commas, prefixed `D` (depot), `S` (charging station) or
`C` (customer) and resolved by name against the instance, e.g.

    # r205 best known
    1234.56
    D0, C20, S15, C24, D0
    D0 C30 C31 D0
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..errors import SolutionFormatError
from ..models import Instance, Solution

logger = logging.getLogger(__name__)

_SEP = re.compile(r"[\s,]+")


def resolve_node(token: str, inst: Instance):
    if token.startswith("D"):
        return inst.depot
    if token.startswith("S"):
        node = inst.charging_station(token)
    elif token.startswith("C"):
        node = inst.customer(token)
    else:
        raise SolutionFormatError(f"node reference {token!r} must start with D, S or C")
    if node is None:
        raise SolutionFormatError(f"unknown node {token!r}")
    return node


def parse_route(line: str, inst: Instance) -> tuple:
    return tuple(resolve_node(tok, inst) for tok in _SEP.split(line.strip()) if tok)


def parse_solution(text: str, inst: Instance, name: Optional[str] = None) -> Solution:
    lines = [ln.strip() for ln in text.splitlines()]
    lines = [ln for ln in lines if ln]

    i = 0
    while i < len(lines) and lines[i].startswith("#"):
        i += 1
    if i >= len(lines):
        raise SolutionFormatError("solution is empty: first line has to be the cost (number)")

    try:
        cost = float(lines[i])
    except ValueError as e:
        raise SolutionFormatError(f"first line of the solution has to be the cost (number), got {lines[i]!r}") from e

    routes: List[tuple] = []
    for lineno, line in enumerate(lines[i + 1:], start=1):
        try:
            routes.append(parse_route(line, inst))
        except SolutionFormatError as e:
            raise SolutionFormatError(f"route {lineno}: {e}") from e

    logger.debug("parsed solution %s: cost=%s, %d routes", name, cost, len(routes))
    return Solution(name=name, cost=cost, routes=tuple(routes))


def load_solution(path: Union[str, Path], inst: Instance) -> Solution:
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_solution(text, inst, name=path.name)
