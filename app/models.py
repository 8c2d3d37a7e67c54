"""Pydantic models for the KYC decision API.

Field names are snake_case in Python and camelCase on the wire, matching
what the dashboard front end sends and renders. Both spellings are accepted
on input.
"""

from datetime import date, datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

KycDecision = Literal["approve", "manual_review", "deny"]
KycVersion = Literal["v1", "v2"]
KycAction = Literal["approve", "request_documents", "hold"]

# Severity order used when combining rule outcomes
DECISION_SEVERITY: dict[str, int] = {
    "approve": 0,
    "manual_review": 1,
    "deny": 2,
}


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    """Immutable value type, created fresh per evaluation."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class CustomerRiskProfile(FrozenCamelModel):
    """Caller-supplied risk profile, without a rule-set version attached."""
    risk_score: float  # 0-100, not enforced
    country: str
    amount: Optional[float] = None
    is_pep: Optional[bool] = None
    sanctions_list: Optional[bool] = None
    velocity: Optional[float] = None  # transactions in the trailing 24h


class KycInputV1(FrozenCamelModel):
    """Input shape understood by the v1 rule set."""
    version: Literal["v1"] = "v1"
    risk_score: float
    country: str
    amount: Optional[float] = None


class KycInputV2(FrozenCamelModel):
    """Input shape understood by the v2 rule set."""
    version: Literal["v2"] = "v2"
    risk_score: float
    country: str
    amount: Optional[float] = None
    is_pep: Optional[bool] = None
    sanctions_list: Optional[bool] = None
    velocity: Optional[float] = None


KycInput = Annotated[Union[KycInputV1, KycInputV2], Field(discriminator="version")]


class KycResult(FrozenCamelModel):
    """Outcome of a single KYC evaluation."""
    decision: KycDecision
    reasons: tuple[str, ...]


class EvaluationResponse(CamelModel):
    """KYC result annotated with the rule-set version that produced it."""
    version: KycVersion
    decision: KycDecision
    reasons: list[str]


class Customer(CamelModel):
    """A customer as listed by the customer search."""
    id: str
    name: str
    risk_score: float
    country: str
    is_pep: bool = False
    sanctions_list: bool = False

    def to_profile(self) -> CustomerRiskProfile:
        """Build the risk profile the dashboard evaluates for this customer.

        Amount and velocity are not tracked per customer yet, so they are
        passed as 0, which the rule sets treat as "not evaluated".
        """
        return CustomerRiskProfile(
            risk_score=self.risk_score,
            country=self.country,
            is_pep=self.is_pep,
            sanctions_list=self.sanctions_list,
            amount=0,
            velocity=0,
        )


class Transaction(CamelModel):
    """A payment operation shown in the transactions table."""
    id: str
    customer_id: str
    customer_name: str
    amount: float
    currency: str
    type: Literal["payment", "refund", "chargeback"]
    status: Literal["completed", "pending", "failed"]
    date: datetime
    description: Optional[str] = None


class TransactionFilters(CamelModel):
    """Filters and pagination for a transactions query."""
    customer_id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1, le=100)


class TransactionsPage(CamelModel):
    """One page of transactions plus the total number of matches."""
    transactions: list[Transaction]
    total: int
    page: int
    page_size: int


class KycActionRecord(CamelModel):
    """An operator action taken on a customer's KYC decision."""
    customer_id: str
    action: KycAction
    decision: KycDecision
    kyc_version: KycVersion
    timestamp: datetime


class KycActionResponse(CamelModel):
    """Acknowledgement returned for an operator action."""
    success: bool
    customer_id: str
    message: str


class FeatureFlags(CamelModel):
    """Runtime feature flags for the dashboard."""
    kyc_version: KycVersion = "v1"
    show_component_outlines: bool = False


class FeatureFlagsUpdate(CamelModel):
    """Partial update of the feature flags; omitted fields stay unchanged."""
    kyc_version: Optional[KycVersion] = None
    show_component_outlines: Optional[bool] = None
