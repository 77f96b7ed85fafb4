# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for the Medicine Burden Visualizer

Runs on port 8000 (the React frontend runs on 3000).
Provides REST endpoints for name resolution and burden analysis.
"""

import logging
from typing import Dict, Any, Optional, List

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from medicine_burden.analysis import MedicineAnalyzer
from medicine_burden.config import base_settings, logging_settings
from medicine_burden.constants import ORGAN_INFO
from medicine_burden.core import compute_organ_burdens, get_all_known_medicines
from medicine_burden.resolver import BaseResolverClient, OpenRouterResolverClient
from medicine_burden.utils import (
    EmptyResponseError,
    InvalidInputError,
    RateLimitError,
    ResolutionError,
    ResolverConfigurationError,
    ResolverTimeoutError,
    ServiceUnavailableError,
    UpstreamError,
    setup_logging,
)

logger = logging.getLogger(__name__)

NO_STORE = {"Cache-Control": "no-store"}

_resolver: Optional[BaseResolverClient] = None


def get_resolver() -> BaseResolverClient:
    """Shared resolver client, created on first use."""
    global _resolver
    if _resolver is None:
        _resolver = OpenRouterResolverClient()
    return _resolver


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        level=logging_settings.LOG_LEVEL,
        log_file=logging_settings.LOG_FILE,
        format_json=logging_settings.LOG_FORMAT_JSON,
    )
    logger.info(f"{base_settings.APP_NAME} API starting")
    yield
    if _resolver is not None:
        await _resolver.close()


app = FastAPI(
    title=f"{base_settings.APP_NAME} API",
    description="Educational organ burden visualization for medicine combinations",
    version=base_settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=base_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Models
# ============================================================================

class ResolveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    medicine_name: Optional[str] = Field(default=None, alias="medicineName")


class BurdenRequest(BaseModel):
    medicine_ids: List[str]


class AnalyzeRequest(BaseModel):
    input: str


# ============================================================================
# Error mapping
# ============================================================================

def _resolution_http_error(error: ResolutionError) -> HTTPException:
    """Map a resolver failure onto the HTTP status the frontend expects."""
    if isinstance(error, ResolverConfigurationError):
        status = 500
    elif isinstance(error, RateLimitError):
        status = 429
    elif isinstance(error, ServiceUnavailableError):
        status = 402
    elif isinstance(error, ResolverTimeoutError):
        status = 504
    elif isinstance(error, (UpstreamError, EmptyResponseError)):
        status = 502
    else:
        status = 500

    detail: Any = str(error)
    if isinstance(error, UpstreamError):
        detail = {"error": str(error), "status": error.status, "details": error.details}

    return HTTPException(status_code=status, detail=detail, headers=NO_STORE)


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": f"{base_settings.APP_NAME} API"}


@app.get("/api/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy"}


@app.get("/api/organs")
async def list_organs():
    """Organ display metadata, in presentation order."""
    return {"organs": [info.to_dict() for info in ORGAN_INFO.values()]}


@app.get("/api/medicines")
async def list_medicines():
    """All medicines known to the knowledge table."""
    medicines = get_all_known_medicines()
    return {"medicines": medicines, "count": len(medicines)}


@app.post("/api/burdens")
async def compute_burdens(request: BurdenRequest):
    """Organ burdens for a list of canonical medicine ids."""
    burdens = compute_organ_burdens(request.medicine_ids)
    return {"organ_burdens": [b.to_dict() for b in burdens]}


@app.post("/api/resolve-medicine")
async def resolve_medicine(
    request: ResolveRequest,
    response: Response,
    resolver: BaseResolverClient = Depends(get_resolver),
) -> Dict[str, Any]:
    """
    Resolve one free-text medicine name to a canonical id guess.
    """
    if not request.medicine_name:
        raise HTTPException(status_code=400, detail="Medicine name is required", headers=NO_STORE)

    try:
        resolved = await resolver.resolve(request.medicine_name)
    except ResolutionError as e:
        logger.warning(f"Resolution failed for '{request.medicine_name}': {e}")
        raise _resolution_http_error(e)

    response.headers["Cache-Control"] = "no-store"
    return resolved.to_dict()


@app.post("/api/analyze")
async def analyze(
    request: AnalyzeRequest,
    response: Response,
    resolver: BaseResolverClient = Depends(get_resolver),
) -> Dict[str, Any]:
    """
    Parse, resolve and aggregate a free-text medicine list.
    """
    analyzer = MedicineAnalyzer(resolver)
    try:
        result = await analyzer.analyze(request.input)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e), headers=NO_STORE)

    response.headers["Cache-Control"] = "no-store"
    return result.to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
