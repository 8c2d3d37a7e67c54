"""Customer search and per-customer KYC decision endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, Query, Request

from app.kyc.engine import evaluate_profile
from app.models import Customer, EvaluationResponse
from app.storage.memory import MemoryStore

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


def _get_customer(request: Request, customer_id: str) -> Customer:
    customer = _get_store(request).get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")
    return customer


@router.get("/customers", response_model=List[Customer])
async def search_customers(
    request: Request,
    q: str = Query(default=""),
) -> List[Customer]:
    """Search customers by name or ID; an empty query lists everyone."""
    threshold = request.app.state.settings.search_fuzzy_threshold
    return _get_store(request).search_customers(q, fuzzy_threshold=threshold)


@router.get("/customers/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, request: Request) -> Customer:
    return _get_customer(request, customer_id)


@router.get("/customers/{customer_id}/kyc", response_model=EvaluationResponse)
async def get_customer_kyc(customer_id: str, request: Request) -> EvaluationResponse:
    """Evaluate the customer's profile with the active rule set."""
    customer = _get_customer(request, customer_id)
    engine = request.app.state.engine
    version = engine.current_version()
    result = evaluate_profile(version, customer.to_profile())
    return EvaluationResponse(
        version=version,
        decision=result.decision,
        reasons=list(result.reasons),
    )
