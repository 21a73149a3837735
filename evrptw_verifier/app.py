from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, Any

from .models import VerifyRequest, VerifyResponse, VerificationResult
from .agents import RouteVerifier
from .coverage import check_coverage
from .errors import SolutionFormatError
from .loaders import parse_route

app = FastAPI(title="EVRPTW Solution Verifier", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
)


def _flatten_metrics(result: VerificationResult) -> Dict[str, float]:
    return {
        "true_cost":        result.true_cost,
        "declared_cost":    result.declared_cost,
        "cost_difference":  result.declared_cost - result.true_cost,
        "total_distance":   sum(r.distance for r in result.routes),
        "routes":           float(result.num_routes),
        "vehicles_used":    float(sum(1 for r in result.routes if r.used)),
        "max_vehicles":     float(result.max_vehicles),
        "infeasible_routes": float(sum(1 for r in result.routes if not r.feasible)),
    }


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}


@app.post("/verify", response_model=VerifyResponse)
def endpoint_verify(req: VerifyRequest) -> Dict[str, Any]:
    try:
        routes = [parse_route(" ".join(names), req.instance) for names in req.routes]
    except SolutionFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))

    coverage = check_coverage(req.instance, routes)
    verifier = RouteVerifier(req.instance, req.config)
    result = verifier.verify(routes, req.cost, coverage=coverage)
    return {
        "status": "ok",
        "valid": result.valid,
        "metrics": _flatten_metrics(result),
        "routes": result.routes,
        "coverage": result.coverage,
        "violations": [v.model_dump(mode="json") for v in result.violations],
    }
