"""Tests for the v1 KYC rule set."""

from app.kyc.rules_v1 import evaluate_v1
from tests.conftest import make_v1


class TestRiskScoreThresholds:
    def test_low_risk_approved(self):
        result = evaluate_v1(make_v1(risk_score=30))
        assert result.decision == "approve"
        assert result.reasons == ("Low risk score",)

    def test_49_is_approved(self):
        result = evaluate_v1(make_v1(risk_score=49))
        assert result.decision == "approve"
        assert result.reasons == ("Low risk score",)

    def test_50_is_manual_review(self):
        result = evaluate_v1(make_v1(risk_score=50))
        assert result.decision == "manual_review"
        assert result.reasons == ("Risk score 50-79",)

    def test_79_is_manual_review(self):
        result = evaluate_v1(make_v1(risk_score=79))
        assert result.decision == "manual_review"
        assert result.reasons == ("Risk score 50-79",)

    def test_80_is_denied(self):
        result = evaluate_v1(make_v1(risk_score=80))
        assert result.decision == "deny"
        assert result.reasons == ("Risk score 80+",)

    def test_85_is_denied(self):
        result = evaluate_v1(make_v1(risk_score=85))
        assert result.decision == "deny"
        assert result.reasons == ("Risk score 80+",)

    def test_fractional_score_just_below_80(self):
        result = evaluate_v1(make_v1(risk_score=79.9))
        assert result.decision == "manual_review"


class TestRestrictedCountry:
    def test_restricted_country_low_risk_denied(self):
        result = evaluate_v1(make_v1(risk_score=10, country="XX"))
        assert result.decision == "deny"
        assert result.reasons == ("Restricted country: XX",)

    def test_every_restricted_country_denied(self):
        for country in ("XX", "YY", "ZZ"):
            result = evaluate_v1(make_v1(risk_score=30, country=country))
            assert result.decision == "deny"
            assert result.reasons == (f"Restricted country: {country}",)

    def test_country_overrides_manual_review(self):
        """Medium risk reason stays, the decision becomes deny."""
        result = evaluate_v1(make_v1(risk_score=65, country="XX"))
        assert result.decision == "deny"
        assert result.reasons == ("Risk score 50-79", "Restricted country: XX")

    def test_high_score_returns_before_country_check(self):
        """Score 80+ from a restricted country reports the score, not the country."""
        result = evaluate_v1(make_v1(risk_score=85, country="ZZ"))
        assert result.decision == "deny"
        assert result.reasons == ("Risk score 80+",)

    def test_country_match_is_case_sensitive(self):
        result = evaluate_v1(make_v1(risk_score=30, country="xx"))
        assert result.decision == "approve"


class TestAmountIgnored:
    def test_amount_does_not_affect_outcome(self):
        result = evaluate_v1(make_v1(risk_score=30, amount=10_000_000))
        assert result.decision == "approve"
        assert result.reasons == ("Low risk score",)


class TestInvariants:
    def test_reasons_never_empty(self):
        for score in range(0, 101):
            for country in ("US", "XX"):
                result = evaluate_v1(make_v1(risk_score=score, country=country))
                assert result.reasons
                assert result.decision in ("approve", "manual_review", "deny")

    def test_deny_whenever_score_80_or_more(self):
        for score in range(80, 101):
            for country in ("US", "YY"):
                assert evaluate_v1(make_v1(risk_score=score, country=country)).decision == "deny"

    def test_same_input_same_output(self):
        assert evaluate_v1(make_v1(risk_score=65)) == evaluate_v1(make_v1(risk_score=65))
