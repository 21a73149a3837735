# evrptw_verifier/models/solution.py
from pydantic import BaseModel, ConfigDict
from typing import Optional, Tuple

from .nodes import Node

# One vehicle itinerary; the depot at either end may be omitted.
Route = Tuple[Node, ...]


class Solution(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    cost: float                     # declared cost, as written in the solution file
    routes: Tuple[Route, ...] = ()
