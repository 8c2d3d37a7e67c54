"""KYC rule-set selection.

Attaches the version discriminator to a caller's risk profile and
dispatches to the matching rule set. The active version is read from the
feature flag store on every call, so a flag change takes effect on the
next evaluation without rebuilding the engine.
"""

import logging
from typing import Callable

from app.kyc.rules_v1 import evaluate_v1
from app.kyc.rules_v2 import evaluate_v2
from app.models import (
    CustomerRiskProfile,
    KycInput,
    KycInputV1,
    KycInputV2,
    KycResult,
    KycVersion,
)
from app.storage.flags import FeatureFlagStore

logger = logging.getLogger(__name__)

EVALUATORS: dict[str, Callable[..., KycResult]] = {
    "v1": evaluate_v1,
    "v2": evaluate_v2,
}


class UnknownKycVersionError(ValueError):
    """Raised when asked to evaluate with a rule-set version that does not exist."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"Unknown KYC rule version {version!r}; expected one of "
            f"{', '.join(sorted(EVALUATORS))}"
        )
        self.version = version


def attach_version(version: str, profile: CustomerRiskProfile) -> KycInput:
    """Build the version-tagged input for the given rule set.

    The v1 input drops the fields only v2 understands.
    """
    if version == "v1":
        return KycInputV1(
            risk_score=profile.risk_score,
            country=profile.country,
            amount=profile.amount,
        )
    if version == "v2":
        return KycInputV2(**profile.model_dump())
    raise UnknownKycVersionError(version)


def evaluate_profile(version: str, profile: CustomerRiskProfile) -> KycResult:
    """Evaluate a profile with an explicit rule-set version."""
    tagged = attach_version(version, profile)
    result = EVALUATORS[version](tagged)
    logger.debug(
        "KYC %s evaluation: decision=%s reasons=%s",
        version, result.decision, list(result.reasons),
    )
    return result


class KycEngine:
    """Evaluates risk profiles with the rule set selected by feature flag."""

    def __init__(self, flags: FeatureFlagStore) -> None:
        self.flags = flags

    def current_version(self) -> KycVersion:
        return self.flags.kyc_version

    def evaluate(self, profile: CustomerRiskProfile) -> KycResult:
        """Evaluate a profile with the currently active rule set."""
        return evaluate_profile(self.current_version(), profile)
