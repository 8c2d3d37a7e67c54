"""KYC rule set v2.

Extends v1 with sanctions, PEP, amount, and velocity checks and lowers the
deny threshold on the risk score to 75. Rules run in this order:

  1. Sanctions list       -> deny, nothing else is evaluated
  2. PEP                  -> manual review
  3. Risk score 75+       -> deny (earlier reasons are kept)
  4. Risk score 50-74     -> manual review
  5. Amount over 100,000  -> manual review
  6. Velocity over 10/24h -> manual review
  7. Restricted country   -> deny (earlier reasons are kept)
  8. Risk score 60+ with an amount over half the threshold -> manual review
  9. Otherwise a low-risk closing reason

Steps 2 and 4-8 only ever raise the decision from approve to manual review;
a manual review is never lowered back to approve.
"""

from app.kyc.rules_v1 import RESTRICTED_COUNTRIES
from app.models import KycDecision, KycInputV2, KycResult

AMOUNT_THRESHOLD = 100000
VELOCITY_THRESHOLD = 10

COMBINED_RISK_REASON = "Combined risk factors: medium risk score + high amount"


def _format_number(value: float) -> str:
    """Render a count without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _escalate(decision: KycDecision) -> KycDecision:
    """Raise approve to manual_review, leave anything stricter alone."""
    return "manual_review" if decision == "approve" else decision


def evaluate_v2(input: KycInputV2) -> KycResult:
    """Evaluate a profile against the v2 rules."""
    reasons: list[str] = []
    decision: KycDecision = "approve"

    if input.sanctions_list:
        return KycResult(decision="deny", reasons=("On sanctions list",))

    if input.is_pep:
        decision = "manual_review"
        reasons.append("PEP (Politically Exposed Person)")

    if input.risk_score >= 75:
        reasons.append("Risk score 75+")
        return KycResult(decision="deny", reasons=tuple(reasons))

    if 50 <= input.risk_score < 75:
        decision = _escalate(decision)
        reasons.append("Risk score 50-74")

    # Zero or missing amount/velocity means "not evaluated"
    if input.amount and input.amount > AMOUNT_THRESHOLD:
        decision = _escalate(decision)
        reasons.append(f"Amount exceeds {AMOUNT_THRESHOLD:,}")

    if input.velocity and input.velocity > VELOCITY_THRESHOLD:
        decision = _escalate(decision)
        reasons.append(
            f"High transaction velocity: {_format_number(input.velocity)} in 24h"
        )

    if input.country in RESTRICTED_COUNTRIES:
        reasons.append(f"Restricted country: {input.country}")
        return KycResult(decision="deny", reasons=tuple(reasons))

    if (
        input.risk_score >= 60
        and input.amount
        and input.amount > AMOUNT_THRESHOLD * 0.5
    ):
        decision = _escalate(decision)
        # Skip the generic reason when a specific one already covers it
        if not any("Risk score" in r or "Amount" in r for r in reasons):
            reasons.append(COMBINED_RISK_REASON)

    if decision == "approve" and input.risk_score < 50 and not input.is_pep:
        reasons.append("Low risk profile")

    return KycResult(decision=decision, reasons=tuple(reasons))
