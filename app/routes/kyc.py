"""KYC evaluation and operator action endpoints."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request

from app.kyc.engine import KycEngine, evaluate_profile
from app.models import (
    Customer,
    CustomerRiskProfile,
    EvaluationResponse,
    KycAction,
    KycActionRecord,
    KycActionResponse,
    KycVersion,
)
from app.storage.memory import MemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/kyc")

ACTION_MESSAGES = {
    "approve": "KYC approved for customer {customer_id}",
    "request_documents": "Documents requested for customer {customer_id}",
    "hold": "KYC decision held for customer {customer_id}",
}


def _get_engine(request: Request) -> KycEngine:
    """Retrieve the KYC engine from application state."""
    return request.app.state.engine


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


def _get_customer_or_404(store: MemoryStore, customer_id: str) -> Customer:
    customer = store.get_customer(customer_id)
    if customer is None:
        logger.warning("Unknown customer %s", customer_id)
        raise HTTPException(status_code=404, detail=f"Customer {customer_id} not found")
    return customer


@router.post("/evaluate", response_model=EvaluationResponse)
async def evaluate(
    profile: CustomerRiskProfile,
    request: Request,
    version: Optional[KycVersion] = Query(default=None),
) -> EvaluationResponse:
    """Evaluate a risk profile.

    Uses the rule set selected by the kycVersion feature flag unless a
    version is given explicitly for this call.
    """
    version = version or _get_engine(request).current_version()
    result = evaluate_profile(version, profile)
    return EvaluationResponse(
        version=version,
        decision=result.decision,
        reasons=list(result.reasons),
    )


def _take_action(
    request: Request, customer_id: str, action: KycAction
) -> KycActionResponse:
    """Record an operator action against the customer's current decision."""
    store = _get_store(request)
    engine = _get_engine(request)
    customer = _get_customer_or_404(store, customer_id)

    version = engine.current_version()
    result = evaluate_profile(version, customer.to_profile())
    store.record_action(
        KycActionRecord(
            customer_id=customer_id,
            action=action,
            decision=result.decision,
            kyc_version=version,
            timestamp=datetime.now(timezone.utc),
        )
    )
    logger.info(
        "KYC action %s for customer %s (decision %s, rules %s)",
        action, customer_id, result.decision, version,
    )
    return KycActionResponse(
        success=True,
        customer_id=customer_id,
        message=ACTION_MESSAGES[action].format(customer_id=customer_id),
    )


@router.post("/approve/{customer_id}", response_model=KycActionResponse)
async def approve(customer_id: str, request: Request) -> KycActionResponse:
    """Approve the customer's KYC decision."""
    return _take_action(request, customer_id, "approve")


@router.post("/request-documents/{customer_id}", response_model=KycActionResponse)
async def request_documents(customer_id: str, request: Request) -> KycActionResponse:
    """Ask the customer for additional KYC documents."""
    return _take_action(request, customer_id, "request_documents")


@router.post("/hold/{customer_id}", response_model=KycActionResponse)
async def hold(customer_id: str, request: Request) -> KycActionResponse:
    """Put the customer's KYC decision on hold."""
    return _take_action(request, customer_id, "hold")


@router.get("/actions", response_model=List[KycActionRecord])
async def get_actions(
    request: Request,
    customer_id: Optional[str] = Query(default=None, alias="customerId"),
) -> List[KycActionRecord]:
    """Return the operator action log, optionally for one customer."""
    return _get_store(request).get_actions(customer_id=customer_id)
