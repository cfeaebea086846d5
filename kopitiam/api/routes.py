from fastapi import APIRouter, Depends, Request
from .schemas import AnnotationsResponse, CreateSearchRequest, CreateSearchResponse, PointOfInterestOut
from ..core.auth import require_api_key
from ..core import orchestrator
from ..providers.base import SearchRegion

router = APIRouter()

@router.post("/searches", response_model=CreateSearchResponse, status_code=202, dependencies=[Depends(require_api_key)])
async def create_search(req: CreateSearchRequest, request: Request):
    cfg = request.app.state.cfg
    query = req.query if req.query is not None else cfg.search_query
    region = SearchRegion(**req.region.model_dump()) if req.region is not None else cfg.default_region()
    orchestrator.submit_search(query, region)
    return CreateSearchResponse(status="queued")

@router.get("/annotations", response_model=AnnotationsResponse)
async def read_annotations():
    store = orchestrator.store
    outcome = store.last_outcome
    return AnnotationsResponse(
        version=store.version,
        status=outcome.status if outcome is not None else "pending",
        error=outcome.error if outcome is not None else None,
        points=[PointOfInterestOut(**p.to_dict()) for p in store.current],
    )
