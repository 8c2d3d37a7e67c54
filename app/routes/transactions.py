"""Transaction list endpoint backing the dashboard's transactions table."""

from datetime import date
from typing import Literal, Optional

from fastapi import APIRouter, Query, Request

from app.models import TransactionFilters, TransactionsPage
from app.storage.memory import MemoryStore

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


@router.get("/transactions", response_model=TransactionsPage)
async def get_transactions(
    request: Request,
    customer_id: Optional[str] = Query(default=None, alias="customerId"),
    type: Optional[Literal["payment", "refund", "chargeback"]] = Query(default=None),
    status: Optional[Literal["completed", "pending", "failed"]] = Query(default=None),
    date_from: Optional[date] = Query(default=None, alias="dateFrom"),
    date_to: Optional[date] = Query(default=None, alias="dateTo"),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1, le=100, alias="pageSize"),
) -> TransactionsPage:
    """List transactions with optional filters and pagination.

    Filters:
      - customerId: exact match on the customer
      - type / status: exact match
      - dateFrom / dateTo: inclusive calendar dates (YYYY-MM-DD)
    """
    filters = TransactionFilters(
        customer_id=customer_id,
        type=type,
        status=status,
        date_from=date_from,
        date_to=date_to,
        page=page,
        page_size=page_size or request.app.state.settings.default_page_size,
    )
    return _get_store(request).query_transactions(filters)
