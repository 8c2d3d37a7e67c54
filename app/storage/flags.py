"""In-memory feature flag store.

Holds the active KYC rule-set version and the UI outline toggle. Values
live in memory only and reset to the configured defaults on restart.
"""

import logging
import threading
from typing import Optional

from app.models import FeatureFlags, KycVersion

logger = logging.getLogger(__name__)


class FeatureFlagStore:
    """Thread-safe holder for the current feature flags."""

    def __init__(self, initial: Optional[FeatureFlags] = None) -> None:
        self._flags = initial or FeatureFlags()
        self._lock = threading.Lock()

    def snapshot(self) -> FeatureFlags:
        """Return a copy of the current flags."""
        return self._flags.model_copy()

    @property
    def kyc_version(self) -> KycVersion:
        return self._flags.kyc_version

    def set_kyc_version(self, version: KycVersion) -> FeatureFlags:
        return self.update(kyc_version=version)

    def set_show_component_outlines(self, value: bool) -> FeatureFlags:
        return self.update(show_component_outlines=value)

    def update(self, **changes) -> FeatureFlags:
        """Apply a partial update; flags not named keep their value.

        The merged flags are re-validated, so an unknown version raises
        pydantic.ValidationError and leaves the store unchanged.
        """
        changes = {k: v for k, v in changes.items() if v is not None}
        with self._lock:
            merged = FeatureFlags.model_validate(
                {**self._flags.model_dump(), **changes}
            )
            previous = self._flags
            self._flags = merged

        for name, value in changes.items():
            if getattr(previous, name) != value:
                logger.info(
                    "Feature flag %s changed: %r -> %r",
                    name, getattr(previous, name), value,
                )
        return merged.model_copy()
