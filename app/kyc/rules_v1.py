"""KYC rule set v1.

Simple threshold rules on the customer's risk score plus a restricted
country list:
  - risk score 80+    -> deny (returns before the country check)
  - risk score 50-79  -> manual review
  - restricted country -> deny
"""

from app.models import KycDecision, KycInputV1, KycResult

RESTRICTED_COUNTRIES = frozenset({"XX", "YY", "ZZ"})


def evaluate_v1(input: KycInputV1) -> KycResult:
    """Evaluate a profile against the v1 rules.

    The amount field is accepted but does not affect the outcome.
    """
    reasons: list[str] = []
    decision: KycDecision = "approve"

    # High risk score -- instant denial, country is not inspected
    if input.risk_score >= 80:
        return KycResult(decision="deny", reasons=("Risk score 80+",))

    if 50 <= input.risk_score < 80:
        decision = "manual_review"
        reasons.append("Risk score 50-79")

    # Restricted country overrides a manual review
    if input.country in RESTRICTED_COUNTRIES:
        reasons.append(f"Restricted country: {input.country}")
        return KycResult(decision="deny", reasons=tuple(reasons))

    if decision == "approve" and input.risk_score < 50:
        reasons.append("Low risk score")

    return KycResult(decision=decision, reasons=tuple(reasons))
