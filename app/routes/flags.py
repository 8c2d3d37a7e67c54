"""Feature flag endpoints for reading and switching the KYC rule version."""

from fastapi import APIRouter, Request

from app.models import FeatureFlags, FeatureFlagsUpdate

router = APIRouter(prefix="/api")


@router.get("/flags", response_model=FeatureFlags)
async def get_flags(request: Request) -> FeatureFlags:
    """Return the current feature flags."""
    return request.app.state.flags.snapshot()


@router.put("/flags", response_model=FeatureFlags)
async def update_flags(
    update: FeatureFlagsUpdate,
    request: Request,
) -> FeatureFlags:
    """Update the feature flags.

    Only the fields present in the body change. The KYC engine reads the
    flag store on every evaluation, so a new kycVersion applies to the
    very next request.
    """
    return request.app.state.flags.update(**update.model_dump(exclude_none=True))
