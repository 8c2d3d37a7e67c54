"""Payments Ops KYC Decision API.

Backend for the payments operations dashboard: customer search, a
versioned KYC rule evaluator selected by feature flag, a transaction list,
and the operator actions taken on a KYC decision.

Run with:
    python3 -m uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

import json
import logging
from pathlib import Path
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.kyc.engine import KycEngine, UnknownKycVersionError
from app.logging_config import configure_logging
from app.models import Customer, FeatureFlags, Transaction
from app.routes import customers, flags, kyc, transactions
from app.storage.flags import FeatureFlagStore
from app.storage.memory import MemoryStore

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description=(
        "KYC decisions for payments operations. Evaluates customer risk "
        "profiles with the v1 or v2 rule set, chosen by feature flag, and "
        "serves customer search and transaction history for the dashboard."
    ),
    version="1.0.0",
)


def load_seed_data(store: MemoryStore, data_dir: Path) -> None:
    """Load customers and transactions from the data directory, if present."""
    customers_path = data_dir / "customers.json"
    if customers_path.exists():
        with open(customers_path, "r", encoding="utf-8") as f:
            for raw in json.load(f):
                store.add_customer(Customer.model_validate(raw))
    else:
        logger.warning("No customer seed file at %s", customers_path)

    transactions_path = data_dir / "transactions.json"
    if transactions_path.exists():
        with open(transactions_path, "r", encoding="utf-8") as f:
            for raw in json.load(f):
                store.add_transaction(Transaction.model_validate(raw))
    else:
        logger.warning("No transaction seed file at %s", transactions_path)


@app.on_event("startup")
async def startup() -> None:
    """Load reference data and initialize the KYC engine."""
    configure_logging(settings.log_level)

    store = MemoryStore()
    load_seed_data(store, settings.data_dir)

    flag_store = FeatureFlagStore(
        FeatureFlags(kyc_version=settings.default_kyc_version)
    )
    engine = KycEngine(flag_store)

    logger.info(
        "Loaded %d customers; KYC rule version %s active",
        len(store.list_customers()), engine.current_version(),
    )

    # Attach to app state for dependency injection in routes
    app.state.settings = settings
    app.state.store = store
    app.state.flags = flag_store
    app.state.engine = engine


@app.exception_handler(UnknownKycVersionError)
async def unknown_version_handler(
    request: Request, exc: UnknownKycVersionError
) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Mount all API routers
app.include_router(kyc.router)
app.include_router(customers.router)
app.include_router(transactions.router)
app.include_router(flags.router)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}
