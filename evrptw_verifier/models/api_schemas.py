from typing import Any, List, Dict, Optional
from pydantic import BaseModel, Field
from .instance import Instance
from .config import VerifierConfig
from .result import RouteReport, CoverageReport


class VerifyRequest(BaseModel):
    instance: Instance
    cost: float = Field(..., description="Declared cost of the solution")
    routes: List[List[str]] = Field(..., description="Routes as node names (D0, S15, C20, ...)")
    config: VerifierConfig = VerifierConfig()


class VerifyResponse(BaseModel):
    status: str
    valid: bool
    metrics: Dict[str, float]
    routes: List[RouteReport]
    coverage: Optional[CoverageReport] = None
    violations: List[Dict[str, Any]] = []
